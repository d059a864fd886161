"""Pixel window onto the unbounded grid: pan, zoom and visibility."""

from __future__ import annotations

import math
from dataclasses import dataclass, replace

from sparse_life.config.constants import (
    CELL_SIZE,
    VIEW_HEIGHT,
    VIEW_WIDTH,
    ZOOM_DIVISOR,
)
from sparse_life.domain.cell import Coords, CoordsLike, as_coords


def zoom_to_scale(zoom: int) -> float:
    """Convert a zoom slider value to a render scale (5 is 1.0)."""
    if zoom < 1:
        raise ValueError("zoom must be >= 1")
    return zoom / ZOOM_DIVISOR


@dataclass(frozen=True)
class Viewport:
    """Canvas geometry; ``dx``/``dy`` are the pan offset in unscaled pixels."""

    width: int = VIEW_WIDTH
    height: int = VIEW_HEIGHT
    cell_size: int = CELL_SIZE
    scale: float = 1.0
    dx: float = 0.0
    dy: float = 0.0

    def __post_init__(self) -> None:
        if self.width < 1 or self.height < 1:
            raise ValueError("viewport width and height must be >= 1")
        if self.cell_size < 1:
            raise ValueError("cell_size must be >= 1")
        if self.scale <= 0:
            raise ValueError("scale must be > 0")

    def coordinates_to_pixels(
        self, coords: CoordsLike, relative: bool = False
    ) -> tuple[float, float]:
        """Top-left pixel of a cell.

        ``relative`` applies only the sub-cell part of the pan offset, which
        is what the grid lines need.
        """
        x, y = as_coords(coords)
        ox = math.fmod(self.dx, self.cell_size) if relative else self.dx
        oy = math.fmod(self.dy, self.cell_size) if relative else self.dy
        return (
            (x * self.cell_size + ox) * self.scale,
            (y * self.cell_size + oy) * self.scale,
        )

    def pixels_to_coordinates(self, px: float, py: float) -> Coords:
        return Coords(
            math.floor((px - self.dx * self.scale) / self.cell_size / self.scale),
            math.floor((py - self.dy * self.scale) / self.cell_size / self.scale),
        )

    def coords_in_bounds(self, coords: CoordsLike) -> bool:
        """True if the cell is on the canvas, with one cell of margin."""
        px, py = self.coordinates_to_pixels(coords)
        margin = self.cell_size * self.scale
        return -margin <= px <= self.width + margin and -margin <= py <= self.height + margin

    def visible_coords(self) -> list[Coords]:
        """Every grid position that ``coords_in_bounds`` accepts."""
        span = self.cell_size * self.scale
        x0 = math.ceil(-1 - self.dx / self.cell_size)
        x1 = math.floor((self.width + span) / span - self.dx / self.cell_size)
        y0 = math.ceil(-1 - self.dy / self.cell_size)
        y1 = math.floor((self.height + span) / span - self.dy / self.cell_size)
        return [
            Coords(x, y)
            for y in range(y0, y1 + 1)
            for x in range(x0, x1 + 1)
            if self.coords_in_bounds((x, y))
        ]

    def panned(self, dx: float, dy: float) -> Viewport:
        return replace(self, dx=self.dx + dx, dy=self.dy + dy)

    def zoomed(self, zoom: int) -> Viewport:
        return replace(self, scale=zoom_to_scale(zoom))

    @classmethod
    def fitted(
        cls,
        bounding_box: tuple[int, int, int, int] | None,
        cell_size: int = CELL_SIZE,
        margin: int = 2,
        scale: float = 1.0,
    ) -> Viewport:
        """Viewport framing ``bounding_box`` plus ``margin`` cells at ``scale``."""
        if bounding_box is None:
            bounding_box = (0, 0, 0, 0)
        min_x, min_y, max_x, max_y = bounding_box
        cols = max_x - min_x + 1 + 2 * margin
        rows = max_y - min_y + 1 + 2 * margin
        return cls(
            width=max(1, round(cols * cell_size * scale)),
            height=max(1, round(rows * cell_size * scale)),
            cell_size=cell_size,
            scale=scale,
            dx=float((margin - min_x) * cell_size),
            dy=float((margin - min_y) * cell_size),
        )
