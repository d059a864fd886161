"""Conway's Game of Life on an unbounded sparse grid, with replayable history."""

from sparse_life.domain import Cell, Coords, Field, History, Viewport
from sparse_life.game import Game, Redraw

__all__ = ["Cell", "Coords", "Field", "Game", "History", "Redraw", "Viewport"]

__version__ = "0.1.0"
