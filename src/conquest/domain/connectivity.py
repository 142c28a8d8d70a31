"""Connected-region analysis over a player's zones.

Reinforcements at the end of a turn are sized by the player's largest
contiguous territory, not their total zone count.
"""

from __future__ import annotations

from collections.abc import Collection
from typing import TYPE_CHECKING

from conquest.domain.models import Player, ZoneID

if TYPE_CHECKING:
    from conquest.domain.board import Board


def connected_areas(
    board: Board,
    player: Player,
    *,
    exclude: Collection[ZoneID] = frozenset(),
) -> list[set[ZoneID]]:
    """Split a player's zones into connected components.

    Components are discovered by depth-first traversal starting from the
    lowest unvisited zone id, so the returned order is deterministic.  Each
    owned zone is visited exactly once.  Zones in ``exclude`` are treated as
    if the player did not own them.
    """

    owned = player.zones.difference(exclude)
    visited: set[ZoneID] = set()
    areas: list[set[ZoneID]] = []

    for start in sorted(owned):
        if start in visited:
            continue
        area = {start}
        visited.add(start)
        stack = [start]
        while stack:
            current = stack.pop()
            for neighbor in board.zones[current].neighbors:
                if neighbor in owned and neighbor not in visited:
                    visited.add(neighbor)
                    area.add(neighbor)
                    stack.append(neighbor)
        areas.append(area)

    return areas


def largest_connected_area(
    board: Board,
    player: Player,
    *,
    exclude: Collection[ZoneID] = frozenset(),
) -> set[ZoneID]:
    """Return the biggest connected set of the player's zones.

    Ties keep the component discovered first.  A player with no zones gets
    an empty set.
    """

    largest: set[ZoneID] = set()
    for area in connected_areas(board, player, exclude=exclude):
        if len(area) > len(largest):
            largest = area
    return largest


def border_zones(board: Board, player: Player) -> list[ZoneID]:
    """Owned zones with at least one neighbor owned by someone else."""

    return [
        zone_id
        for zone_id in sorted(player.zones)
        if any(board.zones[n].owner != player.id for n in board.zones[zone_id].neighbors)
    ]
