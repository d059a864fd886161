"""Sparse Game of Life field: one generation of cell state.

Cells are stored in a dict keyed by ``Coords``, so a coordinate is stored at
most once and the grid is unbounded in every direction. Only living cells
are kept between generations; dead entries appear while a field is being
advanced, as candidates around living cells.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from sparse_life.config.constants import BIRTH_COUNT, MOORE_OFFSETS, SURVIVE_COUNT
from sparse_life.domain.cell import Cell, CellLike, Coords, CoordsLike, as_cell, as_coords


def lives_next_round(has_life: bool, neighbor_count: int) -> bool:
    """Conway's rule: survive on 2 or 3 living neighbors, birth on 3."""
    return (neighbor_count == SURVIVE_COUNT and has_life) or neighbor_count == BIRTH_COUNT


def moore_neighbors(coords: CoordsLike) -> list[Coords]:
    """Return the 8 positions surrounding ``coords``."""
    x, y = as_coords(coords)
    return [Coords(x + dx, y + dy) for dx, dy in MOORE_OFFSETS]


class Field:
    """Sparse container of cells for a single generation."""

    def __init__(self, cells: Iterable[CellLike] | None = None) -> None:
        self._cells: dict[Coords, Cell] = {}
        for item in cells or ():
            cell = as_cell(item)
            self._cells[cell.coords] = cell

    @classmethod
    def from_coords(cls, coords: Iterable[CoordsLike]) -> Field:
        """Build a field where every given position is alive."""
        return cls(Cell(c.x, c.y, True) for c in map(as_coords, coords))

    @classmethod
    def from_records(cls, records: Iterable[CellLike]) -> Field:
        return cls(records)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def has_life_at(self, coords: CoordsLike) -> bool:
        cell = self._cells.get(as_coords(coords))
        return cell is not None and cell.has_life

    def has_cell_at(self, coords: CoordsLike) -> bool:
        return as_coords(coords) in self._cells

    def find_index_at(self, coords: CoordsLike) -> int:
        """Position of ``coords`` in ``get_cells()`` order, -1 if not stored."""
        target = as_coords(coords)
        for index, key in enumerate(self._cells):
            if key == target:
                return index
        return -1

    def get_cells(self) -> list[Cell]:
        """Copies of every stored cell, alive and placeholder."""
        return [cell.copy() for cell in self._cells.values()]

    def live_coords(self) -> frozenset[Coords]:
        return frozenset(key for key, cell in self._cells.items() if cell.has_life)

    @property
    def population(self) -> int:
        return sum(1 for cell in self._cells.values() if cell.has_life)

    def bounding_box(self) -> tuple[int, int, int, int] | None:
        """``(min_x, min_y, max_x, max_y)`` of living cells, None when empty."""
        live = self.live_coords()
        if not live:
            return None
        xs = [c.x for c in live]
        ys = [c.y for c in live]
        return min(xs), min(ys), max(xs), max(ys)

    def to_records(self) -> list[dict[str, int | bool]]:
        return [cell.to_record() for cell in self._cells.values()]

    # ------------------------------------------------------------------
    # Mutators
    # ------------------------------------------------------------------

    def add_life_at(self, coords: CoordsLike) -> None:
        key = as_coords(coords)
        cell = self._cells.get(key)
        if cell is not None:
            cell.has_life = True
        else:
            self._cells[key] = Cell(key.x, key.y, True)

    def kill_life_at(self, coords: CoordsLike) -> None:
        """Remove the entry at ``coords`` entirely; no-op when absent."""
        self._cells.pop(as_coords(coords), None)

    def toggle_cell(self, coords: CoordsLike) -> None:
        if self.has_life_at(coords):
            self.kill_life_at(coords)
        else:
            self.add_life_at(coords)

    # ------------------------------------------------------------------
    # Generation advance
    # ------------------------------------------------------------------

    def _expand_with_neighbors(self) -> None:
        """Store a dead placeholder for every unstored neighbor of a stored cell.

        Only cells stored before the call are expanded from.
        """
        for key in list(self._cells):
            for neighbor in moore_neighbors(key):
                if neighbor not in self._cells:
                    self._cells[neighbor] = Cell(neighbor.x, neighbor.y, False)

    def _living_neighbor_count(self, coords: Coords) -> int:
        return sum(1 for neighbor in moore_neighbors(coords) if self.has_life_at(neighbor))

    def spawn_new(self) -> Field:
        """Return the next generation.

        This field is expanded with candidates, evaluated against its own
        (unchanged) life flags, and then pruned back to its living cells.
        """
        self._expand_with_neighbors()

        # Counts read the life flags only; expansion never adds life, and
        # nothing is written until every cell has been evaluated.
        next_cells = [
            Cell(key.x, key.y, True)
            for key, cell in self._cells.items()
            if lives_next_round(cell.has_life, self._living_neighbor_count(key))
        ]

        self._cells = {key: cell for key, cell in self._cells.items() if cell.has_life}
        return Field(next_cells)

    # ------------------------------------------------------------------
    # Diffing and copying
    # ------------------------------------------------------------------

    def difference_from(self, other: Field) -> list[Cell]:
        """Living cells of ``other`` that have no life in this field.

        Between a previous and a current generation this is the set of
        cells to erase.
        """
        return [
            cell.copy()
            for key, cell in other._cells.items()
            if cell.has_life and not self.has_life_at(key)
        ]

    def clone(self) -> Field:
        return Field(self._cells.values())

    # ------------------------------------------------------------------
    # Container protocol
    # ------------------------------------------------------------------

    def __len__(self) -> int:
        return len(self._cells)

    def __iter__(self) -> Iterator[Cell]:
        return iter(self.get_cells())

    def __contains__(self, coords: object) -> bool:
        try:
            return self.has_life_at(coords)  # type: ignore[arg-type]
        except (TypeError, ValueError):
            return False

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Field):
            return NotImplemented
        return self.live_coords() == other.live_coords()

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Field(population={self.population}, stored={len(self._cells)})"
