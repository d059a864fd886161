"""Path construction helpers for run output directories."""

from __future__ import annotations

from pathlib import Path

from sparse_life.config.constants import SAVE_FILE_NAME


def save_path(out_dir: Path) -> Path:
    """Return path to the default save file within an output directory."""
    return out_dir / SAVE_FILE_NAME


def logs_dir(out_dir: Path) -> Path:
    """Return path to the logs subdirectory within an output directory."""
    return out_dir / "logs"


def history_log_path(out_dir: Path) -> Path:
    """Return path to the history log Parquet file."""
    return logs_dir(out_dir) / "history.parquet"
