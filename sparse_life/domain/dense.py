"""Conversion between sparse fields and dense numpy grids.

Dense grids are boolean ``(height, width)`` arrays indexed ``[y, x]`` with an
``origin`` giving the grid coordinate of element ``[0, 0]``.
"""

from __future__ import annotations

import numpy as np

from sparse_life.config.constants import BIRTH_COUNT, MOORE_OFFSETS, SURVIVE_COUNT
from sparse_life.domain.cell import Coords
from sparse_life.domain.field import Field


def to_dense(
    field: Field,
    bounding_box: tuple[int, int, int, int] | None = None,
    padding: int = 0,
) -> tuple[np.ndarray, Coords]:
    """Return ``(grid, origin)`` covering ``bounding_box`` (the live cells by default).

    Living cells outside an explicit box are dropped.
    """
    if padding < 0:
        raise ValueError("padding must be >= 0")
    box = bounding_box if bounding_box is not None else field.bounding_box()
    if box is None:
        return np.zeros((2 * padding, 2 * padding), dtype=bool), Coords(-padding, -padding)
    min_x, min_y, max_x, max_y = box
    origin = Coords(min_x - padding, min_y - padding)
    grid = np.zeros((max_y - min_y + 1 + 2 * padding, max_x - min_x + 1 + 2 * padding), dtype=bool)
    height, width = grid.shape
    for coords in field.live_coords():
        col, row = coords.x - origin.x, coords.y - origin.y
        if 0 <= row < height and 0 <= col < width:
            grid[row, col] = True
    return grid, origin


def from_dense(grid: np.ndarray, origin: tuple[int, int] = (0, 0)) -> Field:
    """Build a field whose living cells are the truthy elements of ``grid``."""
    ox, oy = origin
    rows, cols = np.nonzero(np.asarray(grid))
    return Field.from_coords((ox + int(c), oy + int(r)) for r, c in zip(rows, cols, strict=True))


def dense_step(grid: np.ndarray, origin: tuple[int, int] = (0, 0)) -> tuple[np.ndarray, Coords]:
    """Advance a dense grid one generation without clipping at its edges.

    The grid is padded by one cell on every side first, so the result is
    one cell larger in each direction and ``origin`` moves by ``(-1, -1)``.
    """
    padded = np.pad(np.asarray(grid, dtype=bool), 1)
    counts = np.zeros(padded.shape, dtype=np.int8)
    for dx, dy in MOORE_OFFSETS:
        shifted = np.roll(np.roll(padded, dy, axis=0), dx, axis=1)
        counts += shifted
    alive = (counts == BIRTH_COUNT) | ((counts == SURVIVE_COUNT) & padded)
    return alive, Coords(origin[0] - 1, origin[1] - 1)
