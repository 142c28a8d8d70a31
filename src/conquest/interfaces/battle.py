"""Battle Rule Protocol Interface.

This module defines the protocol (interface) for resolving a single attack
between two adjacent zones.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

from conquest.domain.models import AttackPlan, Player
from conquest.domain.outcomes import BattleResult

if TYPE_CHECKING:
    from conquest.domain.board import Board


class IBattleRule(Protocol):
    """Protocol defining how an attack plan is resolved.

    Implementations re-validate the plan and return a result flagged as
    invalid rather than touching the board.  A valid result describes the
    unit losses and any capture; the board applies it.
    """

    def attack(self, board: Board, player: Player, plan: AttackPlan | None) -> BattleResult:
        """Resolve an attack made by ``player``.

        Args:
            board: Board the attack happens on (its random source is used for dice)
            player: The acting player, who must own the attacking zone
            plan: Attacker/defender pair to resolve

        Returns:
            BattleResult describing the outcome, not yet applied
        """
        ...
