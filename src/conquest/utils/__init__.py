"""Utility functions for the conquest simulation."""

from conquest.utils.grid_math import GridCoord, grid_neighbors, in_bounds
from conquest.utils.rng import create_rng, multi_roll

__all__ = [
    "GridCoord",
    "create_rng",
    "grid_neighbors",
    "in_bounds",
    "multi_roll",
]
