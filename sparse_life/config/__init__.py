"""Configuration layer: constants and typed config dataclasses."""

from sparse_life.config.constants import (
    BIRTH_COUNT,
    CELL_SIZE,
    DEFAULT_ZOOM,
    FLUSH_THRESHOLD,
    MAX_PERIOD,
    MOORE_OFFSETS,
    NUM_STEPS,
    PERIOD_HISTORY_SIZE,
    SAVE_FILE_NAME,
    STILL_LIFE_WINDOW,
    SURVIVE_COUNT,
    VIEW_HEIGHT,
    VIEW_WIDTH,
    ZOOM_DIVISOR,
)
from sparse_life.config.types import RunConfig

__all__ = [
    "BIRTH_COUNT",
    "CELL_SIZE",
    "DEFAULT_ZOOM",
    "FLUSH_THRESHOLD",
    "MAX_PERIOD",
    "MOORE_OFFSETS",
    "NUM_STEPS",
    "PERIOD_HISTORY_SIZE",
    "RunConfig",
    "SAVE_FILE_NAME",
    "STILL_LIFE_WINDOW",
    "SURVIVE_COUNT",
    "VIEW_HEIGHT",
    "VIEW_WIDTH",
    "ZOOM_DIVISOR",
]
