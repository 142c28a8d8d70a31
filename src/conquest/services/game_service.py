"""Game session service driving a board on behalf of a host application.

The service keeps the selection state a human player builds up (attacking
zone, then defending zone), runs bot turns, and reports every action as an
:class:`AttackOutcome` so the host can re-render, re-prompt or show the
game-over screen.  Illegal requests are never raised; they come back as
``AttackOutcome.INVALID`` and leave the board untouched.
"""

from __future__ import annotations

import logging

from conquest.domain.board import Board
from conquest.domain.enums import AttackOutcome
from conquest.domain.models import AttackPlan, Zone, ZoneID
from conquest.domain.outcomes import BattleResult, ReinforcementOutcome

logger = logging.getLogger(__name__)


class GameService:
    """Turn-level operations for one board."""

    def __init__(self, board: Board) -> None:
        self.board = board
        self.attacking: Zone | None = None
        self.defending: Zone | None = None
        self.current_attack: BattleResult | None = None
        self.last_reinforcement: ReinforcementOutcome | None = None

    def execute_attack_plan(self, plan: AttackPlan | None) -> AttackOutcome:
        """Resolve a plan for the current player and report the outcome.

        After a resolved attack ``defending`` holds the attacked zone until
        the next selection starts, so renderers can highlight it.
        """

        result = self.board.attack(plan)
        self.attacking = None

        if result.invalid:
            self.defending = None
            return AttackOutcome.INVALID

        self.current_attack = result
        self.defending = self.board.zones[plan.defender]
        if self.board.is_over:
            return AttackOutcome.GAME_OVER
        return AttackOutcome.NORMAL

    def take_bot_action(self) -> AttackOutcome:
        """Let the current bot make one attack, or end its turn if it passes."""

        if self.board.is_over:
            return AttackOutcome.GAME_OVER
        player = self.board.current_player
        if player.is_human or player.bot is None:
            logger.debug("Bot action requested for human player %s", player.name)
            return AttackOutcome.INVALID

        plan = player.bot.pick_next_attack(self.board, player)
        if plan is not None:
            return self.execute_attack_plan(plan)

        self.last_reinforcement = self.board.end_turn()
        return AttackOutcome.NORMAL

    def select_zone(self, zone_id: ZoneID) -> AttackOutcome:
        """Handle a human picking a zone on the board.

        The first pick must be one of the player's own zones and becomes the
        attacker; picking it again clears the selection.  The second pick is
        the defender and immediately resolves the attack.
        """

        if self.board.is_over:
            return AttackOutcome.GAME_OVER
        player = self.board.current_player
        if not player.is_human:
            logger.debug("Zone selected while bot %s is playing", player.name)
            return AttackOutcome.INVALID
        if not 0 <= zone_id < len(self.board.zones):
            return AttackOutcome.INVALID

        zone = self.board.zones[zone_id]
        if self.attacking is None:
            if zone.owner != player.id:
                return AttackOutcome.INVALID
            self.attacking = zone
            self.defending = None
            return AttackOutcome.NORMAL

        if zone.id == self.attacking.id:
            self.attacking = None
            return AttackOutcome.NORMAL

        return self.execute_attack_plan(AttackPlan(attacker=self.attacking.id, defender=zone.id))

    def end_turn(self) -> AttackOutcome:
        """End the human player's turn and apply their reinforcements."""

        if self.board.is_over:
            return AttackOutcome.GAME_OVER
        if not self.board.current_player.is_human:
            logger.debug("End turn requested during bot %s's turn", self.board.current_player.name)
            return AttackOutcome.INVALID

        self.attacking = None
        self.defending = None
        self.last_reinforcement = self.board.end_turn()
        return AttackOutcome.NORMAL

    def run_bots(self, max_actions: int) -> AttackOutcome:
        """Step bot players until a human is up, the game ends or the budget runs out."""

        outcome = AttackOutcome.NORMAL
        for _ in range(max_actions):
            if self.board.is_over:
                return AttackOutcome.GAME_OVER
            if self.board.current_player.is_human:
                return outcome
            outcome = self.take_bot_action()
        return AttackOutcome.GAME_OVER if self.board.is_over else outcome
