"""Game controller: owns the generation history and the active field.

Every operation that changes what is on screen returns a ``Redraw`` plan,
the cells to erase and the cells to draw, so a front end can repaint
incrementally instead of redrawing the whole grid.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass

from sparse_life.domain.cell import Cell, CoordsLike
from sparse_life.domain.field import Field
from sparse_life.domain.history import History
from sparse_life.domain.viewport import Viewport
from sparse_life.io.save_format import decode_game, encode_game

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Redraw:
    """Cells a renderer must clear and paint after a change."""

    erase: tuple[Cell, ...]
    draw: tuple[Cell, ...]


def redraw_between(previous: Field, current: Field) -> Redraw:
    """Plan the repaint from ``previous`` to ``current``."""
    erase = tuple(current.difference_from(previous))
    draw = tuple(cell for cell in current.get_cells() if cell.has_life)
    return Redraw(erase=erase, draw=draw)


class Game:
    """Non-visual half of the interactive Game of Life."""

    def __init__(self, viewport: Viewport | None = None) -> None:
        self.viewport = viewport or Viewport()
        self.history = History()
        self.current = self.history.reset()

    # ------------------------------------------------------------------
    # Generation bookkeeping
    # ------------------------------------------------------------------

    @property
    def generation_count(self) -> int:
        return len(self.history)

    @property
    def generation(self) -> int:
        """Generation number of the active field; the newest if it is not stored."""
        found = self.history.generation_of(self.current)
        return found if found is not None else len(self.history)

    def _push(self, field: Field) -> None:
        self.history.append(field)
        self.current = field

    # ------------------------------------------------------------------
    # Editing
    # ------------------------------------------------------------------

    def toggle(self, coords: CoordsLike) -> Redraw:
        """Flip one cell of the active field in place."""
        previous = self.current.clone()
        self.current.toggle_cell(coords)
        return redraw_between(previous, self.current)

    def toggle_at_pixel(self, px: float, py: float) -> Redraw:
        return self.toggle(self.viewport.pixels_to_coordinates(px, py))

    def kill_unseen(self) -> Redraw:
        """Store a new generation holding only the cells inside the viewport."""
        previous = self.current
        visible = [cell for cell in previous.get_cells() if self.viewport.coords_in_bounds(cell)]
        self._push(Field(visible))
        logger.debug(
            "Killed %d unseen cells", previous.population - self.current.population
        )
        return redraw_between(previous, self.current)

    # ------------------------------------------------------------------
    # Playback
    # ------------------------------------------------------------------

    def step(self) -> Redraw:
        """Advance the active field by one generation and store the result."""
        previous = self.current
        self._push(previous.spawn_new())
        logger.debug(
            "Generation %d: population %d", self.generation_count, self.current.population
        )
        return redraw_between(previous, self.current)

    def play(self, generations: int) -> list[Redraw]:
        if generations < 0:
            raise ValueError("generations must be >= 0")
        return [self.step() for _ in range(generations)]

    def reset(self) -> None:
        """Drop the whole history and start again from an empty field."""
        self.current = self.history.reset()

    def select_generation(self, generation: int) -> Redraw:
        """Make a stored generation the active field (rewind)."""
        previous = self.current
        self.current = self.history.get(generation)
        return redraw_between(previous, self.current)

    # ------------------------------------------------------------------
    # View
    # ------------------------------------------------------------------

    def pan(self, dx: float, dy: float) -> None:
        self.viewport = self.viewport.panned(dx, dy)

    def zoom(self, zoom: int) -> None:
        self.viewport = self.viewport.zoomed(zoom)

    # ------------------------------------------------------------------
    # Persistence
    # ------------------------------------------------------------------

    def to_save(self) -> dict[str, object]:
        return encode_game(self.history, self.current)

    def load(self, data: Mapping[str, object]) -> None:
        """Replace history and active field with a decoded save payload.

        Raises ``SaveFormatError`` and leaves the game untouched when the
        payload is malformed.
        """
        history, current = decode_game(data)
        self.history = history
        self.current = current
        logger.info("Loaded game with %d generations", len(history))

    @classmethod
    def from_save(cls, data: Mapping[str, object], viewport: Viewport | None = None) -> Game:
        game = cls(viewport=viewport)
        game.load(data)
        return game
