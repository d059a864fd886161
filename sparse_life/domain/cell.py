"""Coordinates and cell records for the sparse life grid.

``Coords`` is a named ``(x, y)`` pair so plain tuples compare and hash
equal to it. ``Cell`` is the stored record: a coordinate plus a life flag.
A dead ``Cell`` is only ever a candidate placeholder inside a field that
is being advanced.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import NamedTuple, TypeAlias, Union


class Coords(NamedTuple):
    """Unbounded integer grid position."""

    x: int
    y: int


@dataclass
class Cell:
    """One stored grid entry."""

    x: int
    y: int
    has_life: bool = True

    @property
    def coords(self) -> Coords:
        return Coords(self.x, self.y)

    def copy(self) -> Cell:
        return Cell(self.x, self.y, self.has_life)

    def to_record(self) -> dict[str, int | bool]:
        """Plain ``{x, y, hasLife}`` record used by save files."""
        return {"x": self.x, "y": self.y, "hasLife": self.has_life}

    @classmethod
    def from_record(cls, record: Mapping[str, object]) -> Cell:
        """Build a cell from ``{x, y[, hasLife]}``; a missing flag means alive.

        Raises ``ValueError`` for missing coordinates, non-integer
        coordinates (booleans included) or a non-boolean flag.
        """
        coords = []
        for key in ("x", "y"):
            if key not in record:
                raise ValueError(f"cell record is missing {key!r}")
            value = record[key]
            if isinstance(value, bool) or not isinstance(value, int):
                raise ValueError(f"cell record {key!r} must be an integer, got {value!r}")
            coords.append(value)
        has_life = record.get("hasLife", True)
        if not isinstance(has_life, bool):
            raise ValueError(f"cell record 'hasLife' must be a boolean, got {has_life!r}")
        return cls(coords[0], coords[1], has_life)


CoordsLike: TypeAlias = Union[Coords, Cell, tuple[int, int]]
"""Anything that names a grid position."""

CellLike: TypeAlias = Union[Cell, Mapping[str, object], tuple[int, int]]
"""Anything a field can be built from; bare pairs are living cells."""


def as_coords(value: CoordsLike) -> Coords:
    """Normalize a position-like value to ``Coords``."""
    if isinstance(value, Cell):
        return value.coords
    x, y = value
    return Coords(x, y)


def as_cell(value: CellLike) -> Cell:
    """Normalize a cell-like value to a fresh ``Cell``."""
    if isinstance(value, Cell):
        return value.copy()
    if isinstance(value, Mapping):
        return Cell.from_record(value)
    x, y = value
    return Cell(x, y, True)
