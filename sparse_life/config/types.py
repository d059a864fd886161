"""Configuration dataclasses for headless runs.

All frozen dataclasses that parameterise a simulation run live here.
"""

from __future__ import annotations

from dataclasses import dataclass

from sparse_life.config.constants import (
    MAX_PERIOD,
    NUM_STEPS,
    PERIOD_HISTORY_SIZE,
    STILL_LIFE_WINDOW,
)

__all__ = ["RunConfig"]


@dataclass(frozen=True)
class RunConfig:
    """Runtime knobs for ``run_simulation``."""

    steps: int = NUM_STEPS
    still_life_window: int = STILL_LIFE_WINDOW
    max_period: int = MAX_PERIOD
    period_history_size: int = PERIOD_HISTORY_SIZE
    stop_on_termination: bool = False

    def __post_init__(self) -> None:
        if self.steps < 0:
            raise ValueError("steps must be >= 0")
        if self.still_life_window < 1:
            raise ValueError("still_life_window must be >= 1")
        if self.max_period < 2:
            raise ValueError("max_period must be >= 2")
        if self.period_history_size < self.max_period + 1:
            raise ValueError("period_history_size must be >= max_period + 1")
