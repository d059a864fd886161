"""Tests for sparse_life.domain.history module."""

from __future__ import annotations

import pytest

from sparse_life.domain.field import Field
from sparse_life.domain.history import GenerationOutOfRangeError, History


def _chain(n: int) -> History:
    history = History()
    field = history.reset(Field.from_coords([(0, 0), (1, 0), (2, 0)]))
    for _ in range(n - 1):
        field = field.clone().spawn_new()
        history.append(field)
    return history


class TestHistory:
    def test_generations_are_one_based(self) -> None:
        history = _chain(3)
        assert len(history) == 3
        assert history.get(1) == history.get(3)
        assert history.get(2) != history.get(1)
        assert history.latest is history.get(3)

    def test_append_returns_generation_number(self) -> None:
        history = History()
        assert history.append(Field()) == 1
        assert history.append(Field()) == 2

    @pytest.mark.parametrize("generation", [0, -1, 4])
    def test_out_of_range_generation(self, generation: int) -> None:
        history = _chain(3)
        with pytest.raises(GenerationOutOfRangeError):
            history.get(generation)

    def test_out_of_range_is_value_and_index_error(self) -> None:
        assert issubclass(GenerationOutOfRangeError, ValueError)
        assert issubclass(GenerationOutOfRangeError, IndexError)

    def test_latest_on_empty_history(self) -> None:
        with pytest.raises(GenerationOutOfRangeError):
            History().latest

    def test_reset_reseeds_with_empty_field(self) -> None:
        history = _chain(5)
        first = history.reset()
        assert len(history) == 1
        assert history.get(1) is first
        assert first.population == 0

    def test_truncate_drops_later_generations(self) -> None:
        history = _chain(5)
        second = history.get(2)
        history.truncate(2)
        assert len(history) == 2
        assert history.latest is second

    def test_truncate_rejects_unknown_generation(self) -> None:
        history = _chain(2)
        with pytest.raises(GenerationOutOfRangeError):
            history.truncate(3)
        assert len(history) == 2

    def test_generation_of_uses_identity(self) -> None:
        history = _chain(3)
        assert history.generation_of(history.get(2)) == 2
        assert history.generation_of(history.get(1).clone()) is None

    def test_iteration_is_a_snapshot(self) -> None:
        history = _chain(2)
        for _ in history:
            history.append(Field())
        assert len(history) == 4
