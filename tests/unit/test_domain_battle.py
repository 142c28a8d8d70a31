"""Unit tests for battle resolution."""

from __future__ import annotations

import pytest

from conquest.domain import battle
from conquest.domain.enums import GamePhase, InvalidReason
from conquest.domain.models import AttackPlan, ZoneID

PLAN = AttackPlan(attacker=ZoneID(0), defender=ZoneID(1))


def _duel(make_board, scripted_rng, attacker, defender, rolls, rule=None):
    """Two zones side by side: player 0 attacks from the left."""

    return make_board(
        [[(0, attacker), (1, defender)]],
        battle_rule=rule if rule is not None else battle.RankedDice(),
        rng=scripted_rng(rolls),
    )


class TestRankedDice:
    def test_capture_moves_units_and_ends_game(self, make_board, scripted_rng):
        board = _duel(make_board, scripted_rng, 5, 1, [6, 5, 4, 2])
        result = board.attack(PLAN)

        assert not result.invalid
        assert result.attacker_rolls == [6, 5, 4]
        assert result.defender_rolls == [2]
        assert result.captured
        assert result.units_moved >= 1
        assert result.previous_owner == 1

        source, captured = board.zones
        assert captured.owner == 0
        assert captured.strength == 4
        assert source.strength == 1
        assert board.players[0].zones == {0, 1}
        assert board.players[1].is_dead
        assert board.winner is board.players[0]
        assert board.phase == GamePhase.GAME_OVER

    def test_defender_wins_ties(self, make_board, scripted_rng):
        board = _duel(make_board, scripted_rng, 5, 1, [3, 2, 1, 3])
        result = board.attack(PLAN)
        assert result.attacker_losses == 1
        assert result.defender_losses == 0
        assert not result.captured
        assert [z.strength for z in board.zones] == [4, 1]
        assert board.phase == GamePhase.AWAITING_ACTION

    def test_pairs_compared_highest_first(self, make_board, scripted_rng):
        board = _duel(make_board, scripted_rng, 4, 3, [1, 6, 2, 3, 5])
        result = board.attack(PLAN)
        assert result.attacker_losses == 1
        assert result.defender_losses == 1
        assert [z.strength for z in board.zones] == [3, 2]
        assert all(z.owner == i for i, z in enumerate(board.zones))

    def test_dice_counts_are_capped(self, make_board, scripted_rng):
        board = _duel(make_board, scripted_rng, 9, 9, [1, 1, 1, 6, 6])
        result = board.attack(PLAN)
        assert len(result.attacker_rolls) == 3
        assert len(result.defender_rolls) == 2
        assert result.attacker_losses == 2

    def test_two_unit_attacker_rolls_one_die(self, make_board, scripted_rng):
        board = _duel(make_board, scripted_rng, 2, 5, [6, 1, 1])
        result = board.attack(PLAN)
        assert len(result.attacker_rolls) == 1
        assert len(result.defender_rolls) == 2
        assert result.defender_losses == 1

    def test_capture_of_two_unit_defender(self, make_board, scripted_rng):
        board = _duel(make_board, scripted_rng, 4, 2, [6, 5, 1, 4, 4])
        result = board.attack(PLAN)
        assert result.captured
        assert result.units_moved == 3
        assert [z.strength for z in board.zones] == [1, 3]


class TestHighestRoll:
    def test_attacker_wins_outright(self, make_board, scripted_rng):
        board = _duel(
            make_board, scripted_rng, 3, 2, [6, 6, 6, 1, 1], rule=battle.HighestRoll()
        )
        result = board.attack(PLAN)
        assert result.attacker_total == 18
        assert result.defender_total == 2
        assert result.captured
        assert [z.strength for z in board.zones] == [1, 2]
        assert board.zones[1].owner == 0

    def test_attacker_loses_all_but_one(self, make_board, scripted_rng):
        board = _duel(
            make_board, scripted_rng, 3, 2, [1, 1, 1, 6, 6], rule=battle.HighestRoll()
        )
        result = board.attack(PLAN)
        assert not result.captured
        assert result.attacker_losses == 2
        assert [z.strength for z in board.zones] == [1, 2]
        assert board.zones[1].owner == 1

    def test_tie_goes_to_defender(self, make_board, scripted_rng):
        board = _duel(make_board, scripted_rng, 2, 2, [3, 3, 4, 2], rule=battle.HighestRoll())
        result = board.attack(PLAN)
        assert not result.captured
        assert board.zones[1].owner == 1


class TestValidation:
    @pytest.mark.parametrize("rule", [battle.RankedDice(), battle.HighestRoll()])
    def test_invalid_plan_rolls_nothing_and_mutates_nothing(self, make_board, scripted_rng, rule):
        board = _duel(make_board, scripted_rng, 1, 5, [], rule=rule)
        result = board.attack(PLAN)
        assert result.invalid
        assert result.reason == InvalidReason.INSUFFICIENT_STRENGTH
        assert [z.strength for z in board.zones] == [1, 5]
        assert not result.applied

    def test_cannot_attack_from_another_players_zone(self, make_board, scripted_rng):
        board = make_board(
            [[(0, 5), (1, 5)]], rng=scripted_rng([]), current_turn=1
        )
        result = board.attack(PLAN)
        assert result.invalid
        assert result.reason == InvalidReason.NOT_YOUR_ZONE

    def test_rule_does_not_mutate_until_applied(self, make_board, scripted_rng):
        board = _duel(make_board, scripted_rng, 5, 1, [6, 6, 6, 1])
        result = battle.RankedDice().attack(board, board.players[0], PLAN)
        assert result.captured
        assert [z.strength for z in board.zones] == [5, 1]
        assert board.zones[1].owner == 1

        board.apply_battle_result(result)
        assert board.zones[1].owner == 0
        with pytest.raises(RuntimeError):
            board.apply_battle_result(result)

    def test_invalid_result_cannot_be_applied(self, make_board):
        board = make_board([[(0, 5), (1, 5)]])
        with pytest.raises(RuntimeError):
            board.apply_battle_result(
                battle.BattleResult.rejected(None, InvalidReason.MISSING_PLAN)
            )
