"""Tests for sparse_life.domain.dense: numpy grids and cross-checks."""

from __future__ import annotations

from random import Random

import numpy as np
import pytest

from sparse_life.domain.dense import dense_step, from_dense, to_dense
from sparse_life.domain.field import Field


class TestConversion:
    def test_to_dense_frames_live_cells(self) -> None:
        field = Field.from_coords([(-1, 2), (1, 3)])
        grid, origin = to_dense(field)
        assert origin == (-1, 2)
        assert grid.shape == (2, 3)
        assert grid.dtype == bool
        assert grid[0, 0] and grid[1, 2]
        assert grid.sum() == 2

    def test_padding_and_explicit_box(self) -> None:
        field = Field.from_coords([(0, 0), (10, 10)])
        grid, origin = to_dense(field, bounding_box=(0, 0, 2, 2), padding=1)
        assert origin == (-1, -1)
        assert grid.shape == (5, 5)
        assert grid.sum() == 1

    def test_empty_field(self) -> None:
        grid, _ = to_dense(Field())
        assert grid.size == 0

    def test_negative_padding_rejected(self) -> None:
        with pytest.raises(ValueError, match="padding"):
            to_dense(Field(), padding=-1)

    def test_from_dense_applies_origin(self) -> None:
        grid = np.array([[0, 1], [1, 0]])
        field = from_dense(grid, origin=(5, -5))
        assert field.live_coords() == {(6, -5), (5, -4)}

    def test_round_trip(self) -> None:
        field = Field.from_coords([(3, -7), (4, -7), (9, 0)])
        assert from_dense(*to_dense(field)) == field


class TestDenseStep:
    def test_blinker(self) -> None:
        grid, origin = to_dense(Field.from_coords([(0, 0), (1, 0), (2, 0)]))
        next_grid, next_origin = dense_step(grid, origin)
        assert next_origin == (origin[0] - 1, origin[1] - 1)
        assert from_dense(next_grid, next_origin).live_coords() == {(1, -1), (1, 0), (1, 1)}

    def test_matches_sparse_engine_on_random_soups(self) -> None:
        rng = Random(2024)
        for _ in range(20):
            field = Field.from_coords(
                (x, y) for x in range(-6, 6) for y in range(-6, 6) if rng.random() < 0.35
            )
            grid, origin = to_dense(field)
            for _ in range(5):
                if grid.size == 0:
                    break
                grid, origin = dense_step(grid, origin)
                field = field.spawn_new()
                assert from_dense(grid, origin) == field
