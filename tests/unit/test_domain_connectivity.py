"""Unit tests for connected-area analysis."""

from __future__ import annotations

from hypothesis import given, settings
from hypothesis import strategies as st

from conquest.domain.connectivity import (
    border_zones,
    connected_areas,
    largest_connected_area,
)
from conquest.domain.setup import new_board
from conquest.domain.themes import RAINBOW_THEME


def _ids(board, *cells):
    return {board.zone_at(x, y).id for x, y in cells}


def test_two_separate_areas(make_board):
    board = make_board(
        [
            [(0, 1), (1, 1), (0, 1)],
            [(0, 1), (1, 1), (0, 1)],
            [(1, 1), (1, 1), (0, 1)],
        ]
    )
    red = board.players[0]
    areas = connected_areas(board, red)
    assert len(areas) == 2
    assert sorted(len(a) for a in areas) == [2, 3]
    assert largest_connected_area(board, red) == _ids(board, (2, 0), (2, 1), (2, 2))


def test_tie_keeps_first_discovered(make_board):
    board = make_board([[(0, 1), (1, 1), (0, 1)]])
    red = board.players[0]
    largest = largest_connected_area(board, red)
    assert largest == _ids(board, (0, 0))


def test_single_connected_empire(make_board):
    board = make_board(
        [
            [(0, 1), (0, 1)],
            [(0, 1), (1, 1)],
        ]
    )
    assert len(largest_connected_area(board, board.players[0])) == 3
    assert len(largest_connected_area(board, board.players[1])) == 1


def test_exclude_splits_an_area(make_board):
    board = make_board([[(0, 1), (0, 1), (0, 1), (1, 1)]])
    red = board.players[0]
    middle = board.zone_at(1, 0).id
    assert len(largest_connected_area(board, red)) == 3
    assert len(largest_connected_area(board, red, exclude={middle})) == 1
    assert len(connected_areas(board, red, exclude={middle})) == 2


def test_player_without_zones_has_empty_area(make_board):
    board = make_board([[(0, 1), (0, 1)]], num_players=2)
    assert largest_connected_area(board, board.players[1]) == set()


def test_border_zones(make_board):
    board = make_board(
        [
            [(0, 1), (0, 1), (0, 1)],
            [(0, 1), (0, 1), (0, 1)],
            [(0, 1), (0, 1), (1, 1)],
        ]
    )
    red = board.players[0]
    border = set(border_zones(board, red))
    assert border == _ids(board, (2, 1), (1, 2))
    assert border <= red.zones


def _component_of(board, player, start):
    seen = {start}
    frontier = [start]
    while frontier:
        current = frontier.pop()
        for n in board.zones[current].neighbors:
            if n in player.zones and n not in seen:
                seen.add(n)
                frontier.append(n)
    return seen


@settings(max_examples=50, deadline=None)
@given(
    width=st.integers(min_value=1, max_value=7),
    height=st.integers(min_value=1, max_value=7),
    players=st.integers(min_value=1, max_value=4),
    seed=st.integers(min_value=0, max_value=2**32),
)
def test_largest_area_is_connected_maximal_subset(width, height, players, seed):
    players = min(players, width * height)
    board = new_board(width, height, players, RAINBOW_THEME, seed=seed)

    for player in board.players:
        largest = largest_connected_area(board, player)
        assert largest <= player.zones
        if not largest:
            assert not player.zones
            continue
        start = next(iter(largest))
        assert _component_of(board, player, start) == largest
        biggest = max(len(_component_of(board, player, z)) for z in player.zones)
        assert len(largest) == biggest

        areas = connected_areas(board, player)
        assert sum(len(a) for a in areas) == len(player.zones)
        assert set().union(*areas) == player.zones
