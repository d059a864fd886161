"""Domain layer: cells, fields, history, detectors and the viewport."""

from sparse_life.domain.cell import Cell, Coords, as_cell, as_coords
from sparse_life.domain.dense import dense_step, from_dense, to_dense
from sparse_life.domain.field import Field, lives_next_round, moore_neighbors
from sparse_life.domain.filters import (
    ExtinctionDetector,
    PeriodDetector,
    StillLifeDetector,
    TerminationReason,
)
from sparse_life.domain.history import GenerationOutOfRangeError, History
from sparse_life.domain.viewport import Viewport

__all__ = [
    "Cell",
    "Coords",
    "ExtinctionDetector",
    "Field",
    "GenerationOutOfRangeError",
    "History",
    "PeriodDetector",
    "StillLifeDetector",
    "TerminationReason",
    "Viewport",
    "as_cell",
    "as_coords",
    "dense_step",
    "from_dense",
    "lives_next_round",
    "moore_neighbors",
    "to_dense",
]
