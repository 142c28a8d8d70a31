"""Bundled bot strategies."""

from __future__ import annotations

from typing import TYPE_CHECKING

from conquest.domain.connectivity import largest_connected_area
from conquest.domain.models import AttackPlan, Player, PlayerID

if TYPE_CHECKING:
    from conquest.domain.board import Board


class RandomBot:
    """Pick any legal attack uniformly at random; end the turn when none exist."""

    def pick_next_attack(self, board: Board, player: Player) -> AttackPlan | None:
        plans = board.get_possible_attacks(player)
        if not plans:
            return None
        return plans[board.random.randrange(len(plans))]


class BorderShrinkBot:
    """Attack where a capture would hurt an opponent's contiguous empire most.

    Only attacks that outnumber the defender are considered.  Among those,
    the bot picks the target whose loss would shrink its owner's largest
    connected area the most, keeping the first enumerated plan on ties.  The
    turn ends when no favourable attack remains.
    """

    def pick_next_attack(self, board: Board, player: Player) -> AttackPlan | None:
        plans = board.get_possible_attacks(player)
        if not plans:
            return None

        baseline: dict[PlayerID, int] = {}
        best: AttackPlan | None = None
        best_reduction = -1
        for plan in plans:
            attacker = board.zones[plan.attacker]
            defender = board.zones[plan.defender]
            if attacker.strength <= defender.strength:
                continue
            reduction = 0
            if defender.owner is not None:
                owner = board.players[defender.owner]
                if owner.id not in baseline:
                    baseline[owner.id] = len(largest_connected_area(board, owner))
                after = largest_connected_area(board, owner, exclude={defender.id})
                reduction = baseline[owner.id] - len(after)
            if reduction > best_reduction:
                best = plan
                best_reduction = reduction
        return best
