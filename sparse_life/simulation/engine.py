"""Headless runner: advance a seed field and record every generation."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from sparse_life.config.types import RunConfig
from sparse_life.domain.field import Field
from sparse_life.domain.filters import (
    ExtinctionDetector,
    PeriodDetector,
    StillLifeDetector,
    TerminationReason,
)
from sparse_life.domain.history import History

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SimulationResult:
    """Outcome of one headless run."""

    history: History
    generations: int
    terminated_at: int | None
    termination_reason: TerminationReason | None
    period: int | None
    final_population: int

    def summary(self) -> dict[str, object]:
        """JSON-friendly digest without the history itself."""
        return {
            "generations": self.generations,
            "terminated_at": self.terminated_at,
            "termination_reason": (
                self.termination_reason.value if self.termination_reason else None
            ),
            "period": self.period,
            "final_population": self.final_population,
        }


def run_simulation(seed: Field, config: RunConfig | None = None) -> SimulationResult:
    """Step ``seed`` up to ``config.steps`` times.

    The seed is cloned, so the caller's field is never pruned or expanded.
    Generation 1 of the returned history is the seed itself. The first
    detector to fire sets ``termination_reason``; the run only stops there
    when ``config.stop_on_termination`` is set.
    """
    run_config = config or RunConfig()
    history = History()
    current = history.reset(seed.clone())

    extinction = ExtinctionDetector()
    still_life = StillLifeDetector(window=run_config.still_life_window)
    periodic = PeriodDetector(
        max_period=run_config.max_period, history_size=run_config.period_history_size
    )

    terminated_at: int | None = None
    reason: TerminationReason | None = None
    period: int | None = None

    def _observe(field: Field, generation: int) -> None:
        nonlocal terminated_at, reason, period
        # Every detector sees every generation so their windows stay aligned.
        fired = {
            TerminationReason.EXTINCT: extinction.observe(field),
            TerminationReason.STILL_LIFE: still_life.observe(field),
            TerminationReason.PERIODIC: periodic.observe(field),
        }
        if reason is not None:
            return
        for candidate, hit in fired.items():
            if hit:
                reason = candidate
                terminated_at = generation
                period = periodic.period if candidate is TerminationReason.PERIODIC else None
                logger.info("Run terminated at generation %d: %s", generation, candidate.value)
                return

    _observe(current, 1)
    for _ in range(run_config.steps):
        if reason is not None and run_config.stop_on_termination:
            break
        current = current.clone().spawn_new()
        history.append(current)
        _observe(current, len(history))
        logger.debug("Generation %d: population %d", len(history), current.population)

    return SimulationResult(
        history=history,
        generations=len(history),
        terminated_at=terminated_at,
        termination_reason=reason,
        period=period,
        final_population=current.population,
    )
