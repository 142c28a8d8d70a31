"""Zone graph construction."""

from __future__ import annotations

from collections.abc import Sequence

from conquest.domain.models import Zone, ZoneID
from conquest.domain.rules_config import DEFAULT_RULES
from conquest.utils.grid_math import GridCoord, grid_neighbors


def build_grid(
    width: int,
    height: int,
    *,
    max_strength: int = DEFAULT_RULES.zone.max_strength,
    initial_strength: int = DEFAULT_RULES.zone.initial_strength,
) -> list[Zone]:
    """Allocate ``width * height`` unclaimed zones.

    Zones are laid out column by column (x outer, y inner) and each zone's id
    is its index in the returned list.  Neighbors are left empty; call
    :func:`compute_neighbors` once the full list exists.
    """

    if width <= 0 or height <= 0:
        raise ValueError(f"Grid dimensions must be positive, got {width}x{height}")

    zones: list[Zone] = []
    for x in range(width):
        for y in range(height):
            zones.append(
                Zone(
                    id=ZoneID(len(zones)),
                    x=x,
                    y=y,
                    strength=initial_strength,
                    max_strength=max_strength,
                    owner=None,
                )
            )
    return zones


def compute_neighbors(zones: Sequence[Zone]) -> None:
    """Populate every zone's rook-adjacent neighbor set.

    Two zones are neighbors iff their coordinates differ by exactly one on a
    single axis.  The relation is symmetric by construction.
    """

    by_coord: dict[GridCoord, ZoneID] = {zone.coord: zone.id for zone in zones}
    for zone in zones:
        zone.neighbors = frozenset(
            by_coord[coord] for coord in grid_neighbors(zone.coord) if coord in by_coord
        )


def zone_at(zones: Sequence[Zone], height: int, x: int, y: int) -> Zone | None:
    """Return the zone at (x, y) on a grid built by :func:`build_grid`, if any."""

    if x < 0 or y < 0 or y >= height:
        return None
    index = x * height + y
    if index >= len(zones):
        return None
    return zones[index]
