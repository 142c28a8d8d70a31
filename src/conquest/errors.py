"""Exceptions raised by the conquest package.

Only construction problems are raised.  Rejected plays (invalid attack
plans, out-of-turn actions, actions after the game has ended) are reported
through result values so the host can re-prompt instead of crashing.
"""


class ConfigurationError(ValueError):
    """Raised when a board or rule cannot be built from the given parameters."""
