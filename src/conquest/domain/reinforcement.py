"""Reinforcement placement rules."""

from __future__ import annotations

from typing import TYPE_CHECKING

from conquest.domain.connectivity import border_zones
from conquest.domain.models import Player
from conquest.domain.outcomes import PlacementRecorder, ReinforcementOutcome

if TYPE_CHECKING:
    from conquest.domain.board import Board


class RandomAnywhere:
    """Drop each unit on a uniformly random owned zone that still has room."""

    def reinforce(self, board: Board, player: Player, count: int) -> ReinforcementOutcome:
        recorder = PlacementRecorder()
        unplaced = board.try_reinforce(player.zones, count, recorder)
        return ReinforcementOutcome(
            player=player.id,
            requested=count,
            placements=recorder.placements,
            unplaced=unplaced,
        )


class RandomBorder:
    """Fill zones on the front line first, then spill over anywhere.

    Units go to random border zones (those touching a zone the player does
    not own) until they are all full, and whatever is left is spread over
    every owned zone.
    """

    def reinforce(self, board: Board, player: Player, count: int) -> ReinforcementOutcome:
        recorder = PlacementRecorder()
        remaining = board.try_reinforce(border_zones(board, player), count, recorder)
        if remaining > 0:
            remaining = board.try_reinforce(player.zones, remaining, recorder)
        return ReinforcementOutcome(
            player=player.id,
            requested=count,
            placements=recorder.placements,
            unplaced=remaining,
        )
