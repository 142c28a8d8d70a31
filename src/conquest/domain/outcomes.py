"""Transient results produced by battle and reinforcement rules.

Rules never mutate the board directly.  They return one of these values
describing the change, and the board applies it in a single step so no
caller ever observes a half-applied attack or reinforcement.
"""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from conquest.domain.enums import InvalidReason
from conquest.domain.models import AttackPlan, PlayerID, Zone, ZoneID

if TYPE_CHECKING:
    from conquest.domain.board import Board


@dataclass(slots=True)
class BattleResult:
    """Resolved outcome of an attack plan."""

    plan: AttackPlan | None
    invalid: bool = False
    reason: InvalidReason | None = None
    attacker_rolls: list[int] = field(default_factory=list)
    defender_rolls: list[int] = field(default_factory=list)
    attacker_losses: int = 0
    defender_losses: int = 0
    captured: bool = False
    units_moved: int = 0
    previous_owner: PlayerID | None = None
    applied: bool = False

    @classmethod
    def rejected(cls, plan: AttackPlan | None, reason: InvalidReason) -> BattleResult:
        return cls(plan=plan, invalid=True, reason=reason)

    @property
    def attacker_total(self) -> int:
        return sum(self.attacker_rolls)

    @property
    def defender_total(self) -> int:
        return sum(self.defender_rolls)


def _apply_placements(board: Board, placements: list[ZoneID]) -> None:
    for zone_id in placements:
        zone = board.zones[zone_id]
        zone.strength = min(zone.max_strength, zone.strength + 1)


class PlacementRecorder:
    """Collects unit placements for later playback instead of applying them.

    Presentation layers pass a recorder to ``Board.try_reinforce`` so they
    can animate units arriving one at a time, then call :meth:`apply` to
    commit the strengths.
    """

    def __init__(self) -> None:
        self.placements: list[ZoneID] = []
        self._pending: Counter[ZoneID] = Counter()
        self.applied = False

    def add_unit(self, zone: Zone) -> None:
        self.placements.append(zone.id)
        self._pending[zone.id] += 1

    def pending(self, zone_id: ZoneID) -> int:
        """Units recorded for a zone but not yet committed."""
        return self._pending[zone_id]

    def apply(self, board: Board) -> None:
        """Commit every recorded placement to the board."""

        if self.applied:
            raise RuntimeError("Placements have already been applied")
        _apply_placements(board, self.placements)
        self._pending.clear()
        self.applied = True


@dataclass(slots=True)
class ReinforcementOutcome:
    """Placement plan for one player's reinforcements."""

    player: PlayerID
    requested: int
    placements: list[ZoneID] = field(default_factory=list)
    unplaced: int = 0
    applied: bool = False

    @property
    def placed(self) -> int:
        return len(self.placements)

    def apply(self, board: Board) -> None:
        """Add the planned units to the board exactly once."""

        if self.applied:
            raise RuntimeError("Reinforcement outcome has already been applied")
        _apply_placements(board, self.placements)
        self.applied = True
