"""Battle resolution rules.

Both rules re-check the plan before rolling and hand back a
:class:`BattleResult` describing losses and captures; nothing here mutates
the board.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from conquest.domain.enums import InvalidReason
from conquest.domain.models import AttackPlan, Player, Zone
from conquest.domain.outcomes import BattleResult

if TYPE_CHECKING:
    from conquest.domain.board import Board


def check_plan(board: Board, player: Player, plan: AttackPlan | None) -> InvalidReason | None:
    """Board-level validation plus the rule that you attack from your own zone."""

    reason = board.validate_attack(plan)
    if reason is not None:
        return reason
    if board.zones[plan.attacker].owner != player.id:
        return InvalidReason.NOT_YOUR_ZONE
    return None


class HighestRoll:
    """Every unit rolls a die; the higher total wins outright.

    The attacker must beat the defender's total strictly.  A winning attacker
    empties the defending zone and moves in with all but one unit; a losing
    attacker is reduced to a single unit.  The defender loses nothing when
    the attack fails.
    """

    def attack(self, board: Board, player: Player, plan: AttackPlan | None) -> BattleResult:
        reason = check_plan(board, player, plan)
        if reason is not None:
            return BattleResult.rejected(plan, reason)

        attacker = board.zones[plan.attacker]
        defender = board.zones[plan.defender]
        faces = board.rules.battle.die_faces
        result = BattleResult(
            plan=plan,
            attacker_rolls=board.multi_roll(attacker.strength, faces),
            defender_rolls=board.multi_roll(defender.strength, faces),
        )

        if result.attacker_total > result.defender_total:
            result.defender_losses = defender.strength
            result.captured = True
            result.units_moved = attacker.strength - 1
        else:
            result.attacker_losses = attacker.strength - 1
        return result


class RankedDice:
    """Classic three-versus-two ranked dice combat.

    The attacker rolls one die per unit beyond the first, up to three; the
    defender rolls one per unit, up to two.  Both sides sort descending and
    compare pairwise; the defender wins ties.  Each lost comparison costs one
    unit.  If the defending zone is emptied it is captured and the attacker
    moves in with all but one of its surviving units.
    """

    def attack(self, board: Board, player: Player, plan: AttackPlan | None) -> BattleResult:
        reason = check_plan(board, player, plan)
        if reason is not None:
            return BattleResult.rejected(plan, reason)

        attacker = board.zones[plan.attacker]
        defender = board.zones[plan.defender]
        limits = board.rules.battle
        attacker_dice = min(attacker.strength - 1, limits.attacker_max_dice)
        defender_dice = min(defender.strength, limits.defender_max_dice)

        result = BattleResult(
            plan=plan,
            attacker_rolls=board.multi_roll(attacker_dice, limits.die_faces),
            defender_rolls=board.multi_roll(defender_dice, limits.die_faces),
        )

        ranked = zip(
            sorted(result.attacker_rolls, reverse=True),
            sorted(result.defender_rolls, reverse=True),
        )
        for attack_roll, defend_roll in ranked:
            if attack_roll > defend_roll:
                result.defender_losses += 1
            else:
                result.attacker_losses += 1

        if defender.strength - result.defender_losses <= 0:
            result.captured = True
            result.units_moved = _units_to_move(attacker, defender, result.attacker_losses)
        return result


def _units_to_move(attacker: Zone, defender: Zone, attacker_losses: int) -> int:
    survivors = attacker.strength - attacker_losses
    return max(1, min(survivors - 1, defender.max_strength))
