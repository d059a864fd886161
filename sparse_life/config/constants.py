"""Centralized constants for the life engine and its front ends.

Values that appear in more than one module are defined here.
Consuming modules should import from this module rather than defining
their own inline literals.
"""

from __future__ import annotations

MOORE_OFFSETS: tuple[tuple[int, int], ...] = tuple(
    (dx, dy) for dx in (-1, 0, 1) for dy in (-1, 0, 1) if (dx, dy) != (0, 0)
)
"""Relative positions of the 8 Moore neighbors."""

SURVIVE_COUNT = 2
"""A living cell with exactly this many living neighbors survives."""

BIRTH_COUNT = 3
"""Any cell with exactly this many living neighbors is alive next round."""

CELL_SIZE = 30
"""Edge length of one cell in unscaled pixels."""

ZOOM_DIVISOR = 5
"""Zoom slider value divided by this gives the render scale."""

DEFAULT_ZOOM = 5
"""Zoom slider value for scale 1.0."""

VIEW_WIDTH = 900
"""Default viewport width in pixels."""

VIEW_HEIGHT = 600
"""Default viewport height in pixels."""

NUM_STEPS = 100
"""Default number of generations for a headless run."""

STILL_LIFE_WINDOW = 3
"""Consecutive unchanged generations before a run counts as a still life."""

MAX_PERIOD = 15
"""Longest oscillator period looked for by the period detector."""

PERIOD_HISTORY_SIZE = 32
"""Live-cell sets retained by the period detector."""

FLUSH_THRESHOLD = 8_192
"""Flush history log rows to Parquet once this in-memory row count is reached."""

SAVE_FILE_NAME = "gameOfLife_save.txt"
"""Default save file name, matching the browser download name."""
