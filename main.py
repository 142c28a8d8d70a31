"""Development entrypoint for the headless conquest simulator."""

from __future__ import annotations

import sys

from conquest.main import main

if __name__ == "__main__":
    sys.exit(main())
