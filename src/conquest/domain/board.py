"""Turn engine: global board state, turn order and attack resolution."""

from __future__ import annotations

import logging
import random
from collections import Counter
from collections.abc import Iterable
from typing import TYPE_CHECKING

from conquest.domain.connectivity import largest_connected_area
from conquest.domain.enums import GamePhase, InvalidReason
from conquest.domain.grid import zone_at
from conquest.domain.models import AttackPlan, Player, Zone, ZoneID
from conquest.domain.outcomes import BattleResult, ReinforcementOutcome
from conquest.domain.rules_config import DEFAULT_RULES, RulesConfig
from conquest.utils.grid_math import GridCoord, in_bounds
from conquest.utils.rng import DEFAULT_DIE_FACES, multi_roll

if TYPE_CHECKING:
    from conquest.interfaces import IBattleRule, IReinforcementRule, IReinforcementSink

logger = logging.getLogger(__name__)


class Board:
    """The whole game: zones, players, turn order and installed rules.

    Boards are normally built with :func:`conquest.domain.setup.new_board`.
    The random source is owned by the board; every stochastic decision made
    during play must draw from ``board.random`` so a seeded game replays
    exactly.
    """

    def __init__(
        self,
        width: int,
        height: int,
        *,
        zones: list[Zone],
        players: list[Player],
        battle_rule: IBattleRule,
        reinforcement_rule: IReinforcementRule,
        rng: random.Random,
        rules: RulesConfig = DEFAULT_RULES,
        current_turn: int = 0,
    ) -> None:
        self.width = width
        self.height = height
        self.num_players = len(players)
        self.random = rng
        self.rules = rules
        self.round = 0
        self.current_turn = current_turn
        self.zones = zones
        self.players = players
        self.battle_rule = battle_rule
        self.reinforcement_rule = reinforcement_rule
        self.phase = GamePhase.AWAITING_ACTION if self.still_playing() else GamePhase.GAME_OVER

    # --- Queries -------------------------------------------------------------------

    @property
    def current_player(self) -> Player:
        return self.players[self.current_turn]

    @property
    def winner(self) -> Player | None:
        """The sole surviving player, or None while the game is still on."""

        if self.still_playing():
            return None
        return next((p for p in self.players if not p.is_dead), None)

    @property
    def is_over(self) -> bool:
        return not self.still_playing()

    def still_playing(self) -> bool:
        """Game continues until only one player is alive."""

        return sum(1 for p in self.players if not p.is_dead) > 1

    def zone_at(self, x: int, y: int) -> Zone | None:
        if not in_bounds(GridCoord(x, y), self.width, self.height):
            return None
        return zone_at(self.zones, self.height, x, y)

    def player_strength(self, player: Player) -> int:
        """Total units across all of the player's zones."""

        return sum(self.zones[z].strength for z in player.zones)

    def largest_area(self, player: Player) -> set[ZoneID]:
        return largest_connected_area(self, player)

    def game_status(self) -> str:
        """One-line summary such as ``Round 3: red-14   blue-22``."""

        standings = "   ".join(f"{p.name}-{self.player_strength(p)}" for p in self.players)
        return f"Round {self.round}: {standings}"

    # --- Dice ------------------------------------------------------------------------

    def roll(self, num_dice: int, die_faces: int = DEFAULT_DIE_FACES) -> int:
        """Roll ``num_dice`` dice and return their total."""

        return sum(multi_roll(self.random, num_dice, die_faces))

    def multi_roll(self, num_dice: int, die_faces: int = DEFAULT_DIE_FACES) -> list[int]:
        """Roll ``num_dice`` dice and return every result."""

        return multi_roll(self.random, num_dice, die_faces)

    # --- Turn order ------------------------------------------------------------------

    def next_player_turn(self) -> None:
        """Move the turn to the next living player, counting rounds on wraparound."""

        for _ in range(self.num_players):
            self.current_turn += 1
            if self.current_turn >= len(self.players):
                self.current_turn = 0
                self.round += 1
            if not self.players[self.current_turn].is_dead:
                break

    def end_turn(self) -> ReinforcementOutcome | None:
        """Reinforce the current player and pass the turn.

        The reinforcement count is the size of the player's largest connected
        area.  The installed reinforcement rule chooses the zones; the
        resulting outcome is applied before the turn advances and is returned
        so presentation layers can play the placements back.  Returns None
        without touching the board once the game is over.
        """

        if self.is_over:
            self.phase = GamePhase.GAME_OVER
            return None

        player = self.current_player
        count = len(largest_connected_area(self, player))
        outcome = self.reinforcement_rule.reinforce(self, player, count)
        if not outcome.applied:
            outcome.apply(self)
        logger.debug(
            "%s reinforced with %d of %d units", player.name, outcome.placed, outcome.requested
        )
        self.next_player_turn()
        return outcome

    # --- Attacks ---------------------------------------------------------------------

    def validate_attack(self, plan: AttackPlan | None) -> InvalidReason | None:
        """Return why ``plan`` cannot be executed, or None if it can."""

        if plan is None:
            return InvalidReason.MISSING_PLAN
        if not self._is_zone_id(plan.attacker) or not self._is_zone_id(plan.defender):
            return InvalidReason.MISSING_ZONE
        attacker = self.zones[plan.attacker]
        defender = self.zones[plan.defender]
        if attacker.owner is None:
            return InvalidReason.UNOWNED_ATTACKER
        if attacker.strength <= 1:
            return InvalidReason.INSUFFICIENT_STRENGTH
        if not attacker.is_neighbor_of(defender):
            return InvalidReason.NOT_ADJACENT
        if attacker.owner == defender.owner:
            return InvalidReason.SAME_OWNER
        return None

    def attack_is_invalid(self, plan: AttackPlan | None) -> bool:
        """Returns True if this attack is invalid."""

        return self.validate_attack(plan) is not None

    def get_possible_attacks(self, player: Player) -> list[AttackPlan] | None:
        """Enumerate every legal attack for ``player``.

        Returns None when the player has no zone able to attack (strength of
        two or more).  An empty list means attackers exist but none of them
        borders an enemy zone.
        """

        attackers = [z for z in sorted(player.zones) if self.zones[z].strength > 1]
        if not attackers:
            return None

        plans: list[AttackPlan] = []
        for zone_id in attackers:
            for neighbor in sorted(self.zones[zone_id].neighbors):
                if self.zones[neighbor].owner != player.id:
                    plans.append(AttackPlan(attacker=zone_id, defender=neighbor))
        return plans

    def attack(self, plan: AttackPlan | None) -> BattleResult:
        """Resolve ``plan`` for the current player and apply the result.

        Invalid plans come back flagged with a reason and leave the board
        untouched.
        """

        if self.is_over:
            self.phase = GamePhase.GAME_OVER
            return BattleResult.rejected(plan, InvalidReason.GAME_OVER)

        player = self.current_player
        self.phase = GamePhase.RESOLVING
        try:
            result = self.battle_rule.attack(self, player, plan)
            if not result.invalid:
                self.apply_battle_result(result)
        finally:
            self.phase = GamePhase.AWAITING_ACTION if self.still_playing() else GamePhase.GAME_OVER

        if result.invalid:
            logger.debug("Rejected attack by %s: %s", player.name, result.reason)
        else:
            logger.debug(
                "%s attacked %s -> %s: rolls %s vs %s, captured=%s",
                player.name,
                plan.attacker if plan else None,
                plan.defender if plan else None,
                result.attacker_rolls,
                result.defender_rolls,
                result.captured,
            )
        if self.phase == GamePhase.GAME_OVER:
            logger.info("Game over after round %d, winner: %s", self.round, player.name)
        return result

    def apply_battle_result(self, result: BattleResult) -> None:
        """Mutate zones and players as described by a valid battle result."""

        if result.applied:
            raise RuntimeError("Battle result has already been applied")
        if result.invalid or result.plan is None:
            raise RuntimeError("Cannot apply an invalid battle result")

        attacker = self.zones[result.plan.attacker]
        defender = self.zones[result.plan.defender]
        attacker.strength -= result.attacker_losses
        defender.strength -= result.defender_losses

        if result.captured:
            new_owner = self.players[attacker.owner]
            result.previous_owner = defender.owner
            if defender.owner is not None:
                loser = self.players[defender.owner]
                loser.zones.discard(defender.id)
                if loser.mark_dead_if_empty():
                    logger.info("%s has been eliminated by %s", loser.name, new_owner.name)
            defender.owner = new_owner.id
            new_owner.zones.add(defender.id)
            defender.strength = result.units_moved
            attacker.strength -= result.units_moved

        result.applied = True

    def try_reinforce(
        self,
        zones: Iterable[ZoneID],
        count: int,
        sink: IReinforcementSink | None = None,
    ) -> int:
        """Place up to ``count`` units one at a time on random non-full zones.

        Without a sink each unit is added to the zone immediately.  With a
        sink the units are only recorded (``sink.add_unit``) and count toward
        the zone's cap until the sink applies them.  Units recorded by earlier
        calls are only seen if the sink also offers ``pending(zone_id)``;
        otherwise just this call's placements are counted.

        Returns:
            Number of units that could not be placed because every zone was full
        """

        pending_of = getattr(sink, "pending", None)
        recorded: Counter[ZoneID] = Counter()
        remaining: list[ZoneID] = sorted(set(zones))
        while count > 0 and remaining:
            index = self.random.randrange(len(remaining))
            zone = self.zones[remaining[index]]
            if sink is None:
                pending = 0
            elif pending_of is not None:
                pending = pending_of(zone.id)
            else:
                pending = recorded[zone.id]
            if zone.strength + pending < zone.max_strength:
                if sink is None:
                    zone.strength += 1
                else:
                    sink.add_unit(zone)
                    recorded[zone.id] += 1
                count -= 1
            else:
                remaining.pop(index)

        return count

    def _is_zone_id(self, zone_id: ZoneID | None) -> bool:
        return zone_id is not None and 0 <= zone_id < len(self.zones)
