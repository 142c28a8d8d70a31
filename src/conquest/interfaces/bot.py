"""Bot Strategy Protocol Interface."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

from conquest.domain.models import AttackPlan, Player

if TYPE_CHECKING:
    from conquest.domain.board import Board


class IBotStrategy(Protocol):
    """Protocol defining how a non-human player chooses its next attack."""

    def pick_next_attack(self, board: Board, player: Player) -> AttackPlan | None:
        """Choose the next attack for ``player``.

        Returns:
            The plan to submit, or None to end the turn
        """
        ...
