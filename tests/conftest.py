"""Pytest configuration and shared board fixtures.

This adds the `src/` directory to `sys.path` so tests can import the
`conquest` package without requiring an editable install in CI, and
provides helpers for building hand-made boards with scripted dice.
"""

import random
import sys
from pathlib import Path

import pytest

SRC_PATH = Path(__file__).resolve().parents[1] / "src"
if str(SRC_PATH) not in sys.path:
    sys.path.insert(0, str(SRC_PATH))

from conquest.domain.battle import RankedDice  # noqa: E402
from conquest.domain.board import Board  # noqa: E402
from conquest.domain.bots import RandomBot  # noqa: E402
from conquest.domain.grid import build_grid, compute_neighbors  # noqa: E402
from conquest.domain.models import Player, PlayerID  # noqa: E402
from conquest.domain.reinforcement import RandomAnywhere  # noqa: E402
from conquest.domain.themes import RAINBOW_THEME  # noqa: E402
from conquest.utils.rng import create_rng  # noqa: E402


class ScriptedRandom(random.Random):
    """Random source whose die faces come from a fixed script.

    Only ``randint`` (used for dice) is scripted; ``randrange`` and friends
    still come from the seeded generator.
    """

    def __init__(self, rolls, seed=0):
        super().__init__(seed)
        self.rolls = list(rolls)

    def randint(self, a, b):
        value = self.rolls.pop(0)
        assert a <= value <= b
        return value


@pytest.fixture
def scripted_rng():
    """Factory fixture: ``scripted_rng([6, 6, 1])`` returns a ScriptedRandom."""

    return ScriptedRandom


@pytest.fixture
def make_board():
    """Factory fixture building a board from a row-major layout.

    ``layout`` is a list of rows; each cell is ``(owner, strength)`` with
    ``owner`` a player index or None.  Row index is ``y`` and column index
    is ``x``.
    """

    def _build(
        layout,
        *,
        num_players=None,
        battle_rule=None,
        reinforcement_rule=None,
        rng=None,
        current_turn=0,
        max_strength=9,
    ):
        height = len(layout)
        width = len(layout[0])
        zones = build_grid(width, height, max_strength=max_strength)
        compute_neighbors(zones)

        owners = [owner for row in layout for owner, _ in row if owner is not None]
        count = num_players if num_players is not None else max(owners) + 1
        players = [
            Player(
                id=PlayerID(i),
                name=RAINBOW_THEME[i].name,
                color=RAINBOW_THEME[i].color,
                bot=RandomBot(),
            )
            for i in range(count)
        ]

        for y, row in enumerate(layout):
            for x, (owner, strength) in enumerate(row):
                zone = zones[x * height + y]
                zone.strength = strength
                if owner is not None:
                    zone.owner = PlayerID(owner)
                    players[owner].zones.add(zone.id)

        for player in players:
            player.mark_dead_if_empty()

        return Board(
            width,
            height,
            zones=zones,
            players=players,
            battle_rule=battle_rule if battle_rule is not None else RankedDice(),
            reinforcement_rule=(
                reinforcement_rule if reinforcement_rule is not None else RandomAnywhere()
            ),
            rng=rng if rng is not None else create_rng(0),
            current_turn=current_turn,
        )

    return _build
