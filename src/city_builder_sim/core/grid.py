"""Grid geometry for a square grid centred on the origin.

A grid of side N covers cells with -N/2 <= x, z <= N/2 - 1.  Nothing here
knows about rendering; ``cell_from_point`` only maps a continuous
ground-plane position to the cell whose centre is nearest.
"""

import math
from typing import Iterator

from ..schemas.data import GridCoordinate


def grid_bounds(size: int) -> tuple[int, int]:
    """Return the inclusive ``(low, high)`` bound shared by both axes."""
    half = size // 2
    return -half, half - 1


def in_bounds(coord: GridCoordinate, size: int) -> bool:
    """Whether ``coord`` lies on a grid of side ``size``."""
    low, high = grid_bounds(size)
    return low <= coord.x <= high and low <= coord.z <= high


def point_to_cell(px: float, pz: float) -> GridCoordinate:
    """Round a ground-plane point to the nearest cell, ignoring bounds.

    Cells are unit squares centred on integer coordinates, so each axis is
    rounded half-up.
    """
    return GridCoordinate(x=math.floor(px + 0.5), z=math.floor(pz + 0.5))


def cell_from_point(px: float, pz: float, size: int) -> GridCoordinate | None:
    """Map a ground-plane point to its grid cell.

    Args:
        px: Position along the x axis.
        pz: Position along the z axis.
        size: Grid side length.

    Returns:
        The cell containing the point, or None if it falls off the grid.
    """
    coord = point_to_cell(px, pz)
    if not in_bounds(coord, size):
        return None
    return coord


def iter_cells(size: int) -> Iterator[GridCoordinate]:
    """Yield every cell, row by row (z outer, x inner)."""
    low, high = grid_bounds(size)
    for z in range(low, high + 1):
        for x in range(low, high + 1):
            yield GridCoordinate(x=x, z=z)
