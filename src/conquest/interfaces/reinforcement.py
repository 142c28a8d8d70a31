"""Reinforcement Protocol Interfaces.

This module defines the protocols for distributing reinforcement units and
for collecting placements that a presentation layer wants to play back
before they are committed.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

from conquest.domain.models import Player, Zone
from conquest.domain.outcomes import ReinforcementOutcome

if TYPE_CHECKING:
    from conquest.domain.board import Board


class IReinforcementRule(Protocol):
    """Protocol defining where end-of-turn reinforcements go."""

    def reinforce(self, board: Board, player: Player, count: int) -> ReinforcementOutcome:
        """Plan the placement of ``count`` units for ``player``.

        Args:
            board: Board whose random source drives placement
            player: Player receiving the units
            count: Number of units to place

        Returns:
            ReinforcementOutcome listing each placement; strengths are
            untouched until the outcome is applied
        """
        ...


class IReinforcementSink(Protocol):
    """Protocol for deferred, unit-by-unit reinforcement placement.

    A sink may also offer ``pending(zone_id) -> int`` reporting units it has
    recorded but not applied; ``Board.try_reinforce`` then counts those toward
    the zone's cap across several calls (see ``PlacementRecorder``).
    """

    def add_unit(self, zone: Zone) -> None:
        """Record one unit arriving in ``zone``."""
        ...

    def apply(self, board: Board) -> None:
        """Commit every recorded unit to the board."""
        ...
