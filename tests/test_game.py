"""Tests for sparse_life.game: the history-owning controller."""

from __future__ import annotations

import pytest

from sparse_life.domain.field import Field
from sparse_life.domain.history import GenerationOutOfRangeError
from sparse_life.domain.viewport import Viewport
from sparse_life.game import Game, Redraw, redraw_between
from sparse_life.io.save_format import SaveFormatError

BLINKER_H = [(0, 0), (1, 0), (2, 0)]


def _coords(cells: tuple) -> set[tuple[int, int]]:
    return {(c.x, c.y) for c in cells}


def _blinker_game() -> Game:
    game = Game(viewport=Viewport(width=300, height=300))
    for coords in BLINKER_H:
        game.toggle(coords)
    return game


class TestGameBasics:
    def test_starts_with_one_empty_generation(self) -> None:
        game = Game()
        assert game.generation_count == 1
        assert game.generation == 1
        assert game.current.population == 0

    def test_toggle_returns_redraw(self) -> None:
        game = Game()
        redraw = game.toggle((3, 3))
        assert redraw.erase == ()
        assert _coords(redraw.draw) == {(3, 3)}
        redraw = game.toggle((3, 3))
        assert _coords(redraw.erase) == {(3, 3)}
        assert redraw.draw == ()

    def test_toggle_at_pixel_uses_viewport(self) -> None:
        game = Game(viewport=Viewport(width=300, height=300, dx=30))
        game.toggle_at_pixel(65, 5)
        assert game.current.has_life_at((1, 0))

    def test_redraw_between(self) -> None:
        previous = Field.from_coords([(0, 0), (1, 1)])
        current = Field.from_coords([(1, 1), (2, 2)])
        assert redraw_between(previous, current) == Redraw(
            erase=tuple(current.difference_from(previous)),
            draw=tuple(current.get_cells()),
        )


class TestPlayback:
    def test_step_appends_generation(self) -> None:
        game = _blinker_game()
        redraw = game.step()
        assert game.generation_count == 2
        assert game.generation == 2
        assert _coords(redraw.erase) == {(0, 0), (2, 0)}
        assert _coords(redraw.draw) == {(1, -1), (1, 0), (1, 1)}

    def test_play_steps_repeatedly(self) -> None:
        game = _blinker_game()
        redraws = game.play(4)
        assert len(redraws) == 4
        assert game.generation_count == 5
        assert game.current == game.history.get(1)

    def test_play_rejects_negative(self) -> None:
        with pytest.raises(ValueError):
            Game().play(-1)

    def test_select_generation_rewinds(self) -> None:
        game = _blinker_game()
        game.play(2)
        redraw = game.select_generation(2)
        assert game.generation == 2
        assert game.current.live_coords() == {(1, -1), (1, 0), (1, 1)}
        assert _coords(redraw.erase) == {(0, 0), (2, 0)}

    def test_step_after_rewind_appends(self) -> None:
        game = _blinker_game()
        game.play(2)
        game.select_generation(1)
        game.step()
        assert game.generation_count == 4
        assert game.generation == 4

    def test_select_unknown_generation(self) -> None:
        with pytest.raises(GenerationOutOfRangeError):
            Game().select_generation(2)

    def test_reset_clears_history(self) -> None:
        game = _blinker_game()
        game.play(3)
        game.reset()
        assert game.generation_count == 1
        assert game.current.population == 0


class TestViewOperations:
    def test_kill_unseen_drops_far_cells(self) -> None:
        game = Game(viewport=Viewport(width=300, height=300))
        game.toggle((0, 0))
        game.toggle((500, 500))
        redraw = game.kill_unseen()
        assert game.generation_count == 2
        assert game.current.live_coords() == {(0, 0)}
        assert _coords(redraw.erase) == {(500, 500)}
        # Previous generation is untouched.
        assert game.history.get(1).has_life_at((500, 500))

    def test_pan_and_zoom(self) -> None:
        game = Game(viewport=Viewport(width=300, height=300))
        game.pan(-600, 0)
        game.zoom(10)
        assert game.viewport.dx == -600
        assert game.viewport.scale == 2.0
        game.toggle((0, 0))
        game.kill_unseen()
        assert game.current.population == 0


class TestPersistence:
    def test_save_and_load_round_trip(self) -> None:
        game = _blinker_game()
        game.play(2)
        restored = Game.from_save(game.to_save())
        assert restored.generation_count == 3
        assert restored.current == game.current
        for generation in (1, 2, 3):
            assert restored.history.get(generation) == game.history.get(generation)

    def test_failed_load_keeps_state(self) -> None:
        game = _blinker_game()
        game.play(1)
        history, current = game.history, game.current
        with pytest.raises(SaveFormatError):
            game.load({"playingFields": [{"cells": [{"x": 0}]}], "currentPlayingField": {"cells": []}})
        assert game.history is history
        assert game.current is current
        assert game.generation_count == 2
