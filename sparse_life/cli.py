"""CLI entrypoint: headless runs and rendering of saved games.

Supports ``--config path/to/config.json``; CLI arguments override
config-file values, and config-file values override built-in defaults.
"""

from __future__ import annotations

import argparse
import json
import logging
from pathlib import Path

from sparse_life.config.constants import (
    DEFAULT_ZOOM,
    MAX_PERIOD,
    NUM_STEPS,
    PERIOD_HISTORY_SIZE,
    STILL_LIFE_WINDOW,
)
from sparse_life.config.types import RunConfig
from sparse_life.domain.cell import Coords
from sparse_life.domain.field import Field
from sparse_life.domain.viewport import zoom_to_scale
from sparse_life.io.history_log import write_history_parquet
from sparse_life.io.paths import history_log_path, save_path
from sparse_life.io.save_format import load_game, save_game
from sparse_life.simulation.engine import run_simulation
from sparse_life.viz.render import render_field, render_filmstrip
from sparse_life.viz.theme import DEFAULT_THEME

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# CLI parsing helpers
# ---------------------------------------------------------------------------


def _parse_cells(raw_cells: str) -> tuple[Coords, ...]:
    """Parse semicolon-delimited ``x,y`` pairs, e.g. ``0,0;1,0;2,0``."""
    cells: list[Coords] = []
    for part in (p.strip() for p in raw_cells.split(";")):
        if not part:
            continue
        tokens = part.split(",")
        if len(tokens) != 2:
            raise ValueError(f"cells entries must use x,y format, got {part!r}")
        try:
            cells.append(Coords(int(tokens[0]), int(tokens[1])))
        except ValueError as exc:
            raise ValueError(f"cells entries must be integer pairs, got {part!r}") from exc
    return tuple(cells)


def _load_config(path: Path | None) -> dict[str, object]:
    if path is None:
        return {}
    data = json.loads(Path(path).read_text())
    if not isinstance(data, dict):
        raise ValueError(f"config file {path} must hold a JSON object")
    return data


# ---------------------------------------------------------------------------
# Subcommands
# ---------------------------------------------------------------------------


def _build_run_parser(sub: argparse._SubParsersAction) -> None:
    p = sub.add_parser("run", help="Advance a pattern headlessly and save the history")
    p.set_defaults(func=_handle_run)
    seed = p.add_mutually_exclusive_group()
    seed.add_argument("--cells", type=str, default=None, help="Living cells as x,y;x,y;...")
    seed.add_argument("--load", type=Path, default=None, help="Save file to continue from")
    p.add_argument("--steps", type=int, default=None)
    p.add_argument("--still-life-window", type=int, default=None)
    p.add_argument("--max-period", type=int, default=None)
    p.add_argument(
        "--stop-on-termination", action=argparse.BooleanOptionalAction, default=None
    )
    p.add_argument("--out-dir", type=Path, default=None, help="Write save file and history log here")
    p.add_argument("--out", type=Path, default=None, help="Save file to write")
    p.add_argument("--history-log", type=Path, default=None, help="Parquet history log")


def _build_render_parser(sub: argparse._SubParsersAction) -> None:
    p = sub.add_parser("render", help="Render a saved game to an image")
    p.set_defaults(func=_handle_render)
    p.add_argument("--load", type=Path, required=True)
    p.add_argument("--output", type=Path, required=True)
    p.add_argument("--generation", type=int, default=None)
    p.add_argument("--filmstrip", type=int, default=None, metavar="N_FRAMES")
    p.add_argument("--life-color", type=str, default=None)
    p.add_argument("--zoom", type=int, default=None)


def _resolve(cli_val: object, file_cfg: dict[str, object], key: str, default: object) -> object:
    """CLI > file > default."""
    if cli_val is not None:
        return cli_val
    return file_cfg.get(key, default)


def _resolve_int(cli_val: int | None, file_cfg: dict[str, object], key: str, default: int) -> int:
    value = _resolve(cli_val, file_cfg, key, default)
    if isinstance(value, bool) or not isinstance(value, (int, str)):
        raise ValueError(f"{key} must be an integer, got {value!r}")
    try:
        return int(value)
    except ValueError as exc:
        raise ValueError(f"{key} must be an integer, got {value!r}") from exc


def _resolve_bool(
    cli_val: bool | None, file_cfg: dict[str, object], key: str, default: bool
) -> bool:
    value = _resolve(cli_val, file_cfg, key, default)
    if not isinstance(value, bool):
        raise ValueError(f"{key} must be true or false, got {value!r}")
    return value


def _resolve_path(cli_val: Path | None, file_cfg: dict[str, object], key: str) -> Path | None:
    value = _resolve(cli_val, file_cfg, key, None)
    return None if value is None else Path(str(value))


def _handle_run(args: argparse.Namespace, file_cfg: dict[str, object]) -> dict[str, object]:
    run_config = RunConfig(
        steps=_resolve_int(args.steps, file_cfg, "steps", NUM_STEPS),
        still_life_window=_resolve_int(
            args.still_life_window, file_cfg, "still_life_window", STILL_LIFE_WINDOW
        ),
        max_period=_resolve_int(args.max_period, file_cfg, "max_period", MAX_PERIOD),
        period_history_size=_resolve_int(
            None, file_cfg, "period_history_size", PERIOD_HISTORY_SIZE
        ),
        stop_on_termination=_resolve_bool(
            args.stop_on_termination, file_cfg, "stop_on_termination", False
        ),
    )

    load_path = None if args.cells is not None else _resolve_path(args.load, file_cfg, "load")
    if load_path is not None:
        _, seed = load_game(load_path)
    else:
        seed = Field.from_coords(_parse_cells(str(_resolve(args.cells, file_cfg, "cells", ""))))

    result = run_simulation(seed, run_config)

    out_dir = _resolve_path(args.out_dir, file_cfg, "out_dir")
    out_path = _resolve_path(args.out, file_cfg, "out")
    history_log = _resolve_path(args.history_log, file_cfg, "history_log")
    if out_dir is not None:
        out_path = out_path or save_path(out_dir)
        history_log = history_log or history_log_path(out_dir)

    if out_path is not None:
        save_game(out_path, result.history, result.history.latest)
    if history_log is not None:
        write_history_parquet(result.history, history_log, current_generation=result.generations)

    summary: dict[str, object] = {"mode": "run", "seed_population": seed.population}
    summary.update(result.summary())
    return summary


def _handle_render(args: argparse.Namespace, file_cfg: dict[str, object]) -> dict[str, object]:
    history, current = load_game(args.load)
    theme = DEFAULT_THEME
    life_color = _resolve(args.life_color, file_cfg, "life_color", None)
    if life_color is not None:
        theme = theme.with_life_color(str(life_color))
    scale = zoom_to_scale(_resolve_int(args.zoom, file_cfg, "zoom", DEFAULT_ZOOM))

    if args.filmstrip is not None:
        render_filmstrip(history, args.output, n_frames=args.filmstrip, theme=theme, scale=scale)
        return {"mode": "filmstrip", "generations": len(history), "output": str(args.output)}

    if args.generation is not None:
        field = history.get(args.generation)
        title: str | None = f"Generation {args.generation}"
    else:
        field = current
        title = None
    render_field(field, args.output, theme=theme, title=title, scale=scale)
    return {"mode": "render", "population": field.population, "output": str(args.output)}


# ---------------------------------------------------------------------------
# Main CLI
# ---------------------------------------------------------------------------


def main(argv: list[str] | None = None) -> None:
    """CLI entrypoint with subcommands."""
    parser = argparse.ArgumentParser(description="Sparse Game of Life engine")
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="JSON config file (CLI args override file values)",
    )
    parser.add_argument("--log-level", type=str, default="WARNING")
    sub = parser.add_subparsers(dest="command", required=True)
    _build_run_parser(sub)
    _build_render_parser(sub)
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=args.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    logger.debug("Running %s subcommand", args.command)
    try:
        file_cfg = _load_config(args.config)
        summary = args.func(args, file_cfg)
    except ValueError as exc:
        parser.error(str(exc))
    print(json.dumps(summary, ensure_ascii=False, indent=2))


if __name__ == "__main__":
    main()
