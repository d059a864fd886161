"""Termination detectors observed once per generation."""

from __future__ import annotations

from collections import deque
from enum import Enum

from sparse_life.domain.cell import Coords
from sparse_life.domain.field import Field


class TerminationReason(str, Enum):
    """Termination reason labels reported in run summaries."""

    EXTINCT = "extinct"
    STILL_LIFE = "still_life"
    PERIODIC = "periodic"


class ExtinctionDetector:
    """Detect a field with no living cells."""

    def observe(self, field: Field) -> bool:
        return field.population == 0


class StillLifeDetector:
    """Detect N consecutive unchanged live-cell sets."""

    def __init__(self, window: int) -> None:
        if window < 1:
            raise ValueError("window must be >= 1")
        self.window = window
        self._last: frozenset[Coords] | None = None
        self._unchanged_count = 0

    def observe(self, field: Field) -> bool:
        """Return True once the live cells have remained unchanged for `window` checks."""
        live = field.live_coords()
        if self._last is None:
            self._last = live
            return False

        if live == self._last:
            self._unchanged_count += 1
        else:
            self._unchanged_count = 0
            self._last = live

        return self._unchanged_count >= self.window


class PeriodDetector:
    """Detect oscillation with a period between 2 and `max_period`.

    Period 1 is a still life and is left to ``StillLifeDetector``.
    """

    def __init__(self, max_period: int, history_size: int) -> None:
        if max_period < 2:
            raise ValueError("max_period must be >= 2")
        if history_size < max_period + 1:
            raise ValueError("history_size must be >= max_period + 1")
        self.max_period = max_period
        self._recent: deque[frozenset[Coords]] = deque(maxlen=history_size)
        self.period: int | None = None

    def observe(self, field: Field) -> bool:
        live = field.live_coords()
        self._recent.append(live)
        self.period = None
        if not live:
            return False
        n = len(self._recent)
        if n > 1 and self._recent[-2] == live:
            return False
        for period in range(2, min(self.max_period, n - 1) + 1):
            if self._recent[-1 - period] == live:
                self.period = period
                return True
        return False
