"""Tests for the headless simulation runner."""

from __future__ import annotations

import logging

import pytest

from sparse_life.config.types import RunConfig
from sparse_life.domain.field import Field
from sparse_life.domain.filters import TerminationReason
from sparse_life.simulation.engine import run_simulation

BLINKER = [(0, 0), (1, 0), (2, 0)]
BLOCK = [(0, 0), (1, 0), (0, 1), (1, 1)]
GLIDER = [(1, 0), (2, 1), (0, 2), (1, 2), (2, 2)]


class TestRunSimulation:
    def test_records_seed_and_every_step(self) -> None:
        result = run_simulation(Field.from_coords(GLIDER), RunConfig(steps=8))
        assert result.generations == 9
        assert len(result.history) == 9
        assert result.history.get(1).live_coords() == set(GLIDER)
        assert result.final_population == 5
        assert result.termination_reason is None
        assert result.terminated_at is None

    def test_seed_is_not_mutated(self) -> None:
        seed = Field.from_coords(BLINKER)
        run_simulation(seed, RunConfig(steps=3))
        assert seed.live_coords() == set(BLINKER)

    def test_zero_steps(self) -> None:
        result = run_simulation(Field.from_coords(BLOCK), RunConfig(steps=0))
        assert result.generations == 1

    def test_extinction_detected(self) -> None:
        result = run_simulation(
            Field.from_coords([(0, 0)]), RunConfig(steps=5, stop_on_termination=True)
        )
        assert result.termination_reason is TerminationReason.EXTINCT
        assert result.terminated_at == 2
        assert result.generations == 2
        assert result.final_population == 0

    def test_empty_seed_is_extinct_immediately(self) -> None:
        result = run_simulation(Field(), RunConfig(steps=5, stop_on_termination=True))
        assert result.terminated_at == 1
        assert result.generations == 1

    def test_still_life_detected(self) -> None:
        result = run_simulation(
            Field.from_coords(BLOCK),
            RunConfig(steps=20, still_life_window=2, stop_on_termination=True),
        )
        assert result.termination_reason is TerminationReason.STILL_LIFE
        assert result.terminated_at == 3
        assert result.generations == 3

    def test_blinker_period_detected(self) -> None:
        result = run_simulation(
            Field.from_coords(BLINKER), RunConfig(steps=20, stop_on_termination=True)
        )
        assert result.termination_reason is TerminationReason.PERIODIC
        assert result.period == 2
        assert result.terminated_at == 3

    def test_without_stop_runs_all_steps(self) -> None:
        result = run_simulation(Field.from_coords(BLINKER), RunConfig(steps=10))
        assert result.generations == 11
        assert result.termination_reason is TerminationReason.PERIODIC
        assert result.terminated_at == 3

    def test_glider_never_terminates(self) -> None:
        result = run_simulation(
            Field.from_coords(GLIDER), RunConfig(steps=30, stop_on_termination=True)
        )
        assert result.termination_reason is None
        assert result.generations == 31

    def test_history_entries_are_alive_only(self) -> None:
        result = run_simulation(Field.from_coords(GLIDER), RunConfig(steps=4))
        for field in result.history:
            assert all(cell.has_life for cell in field.get_cells())

    def test_summary_is_plain_data(self) -> None:
        result = run_simulation(
            Field.from_coords(BLINKER), RunConfig(steps=5, stop_on_termination=True)
        )
        assert result.summary() == {
            "generations": 3,
            "terminated_at": 3,
            "termination_reason": "periodic",
            "period": 2,
            "final_population": 3,
        }

    def test_logs_termination(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.INFO, logger="sparse_life.simulation.engine"):
            run_simulation(Field.from_coords([(0, 0)]), RunConfig(steps=3))
        assert "terminated at generation 2: extinct" in caplog.text
