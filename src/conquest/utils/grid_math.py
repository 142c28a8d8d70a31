"""
Square grid coordinate mathematics for the conquest board.

The board is a rectangular grid of zones addressed by integer (x, y)
coordinates, with x running across columns and y down rows.  Two cells are
adjacent iff they differ by exactly 1 on one axis and by 0 on the other
(rook adjacency, never diagonal).
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class GridCoord:
    """
    A cell coordinate on the board.

    Attributes:
        x: Column index (0 is the leftmost column)
        y: Row index (0 is the top row)

    Example:
        >>> origin = GridCoord(x=0, y=0)
        >>> in_bounds(origin, 3, 3)
        True
    """

    x: int
    y: int


# Direction vectors for the 4 orthogonal neighbors
_NEIGHBOR_DIRECTIONS: list[tuple[int, int]] = [
    (1, 0),  # East
    (0, -1),  # North
    (-1, 0),  # West
    (0, 1),  # South
]


def grid_neighbors(coord: GridCoord) -> list[GridCoord]:
    """
    Find the 4 orthogonal neighbors of a cell, ignoring board bounds.

    Args:
        coord: The center cell

    Returns:
        A list of 4 GridCoord objects

    Example:
        >>> neighbors = grid_neighbors(GridCoord(x=0, y=0))
        >>> len(neighbors)
        4
        >>> GridCoord(x=1, y=1) in neighbors
        False
    """
    return [GridCoord(x=coord.x + dx, y=coord.y + dy) for dx, dy in _NEIGHBOR_DIRECTIONS]


def in_bounds(coord: GridCoord, width: int, height: int) -> bool:
    """Return True if the coordinate lies on a ``width`` x ``height`` board."""
    return 0 <= coord.x < width and 0 <= coord.y < height
