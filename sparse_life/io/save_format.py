"""JSON save files: the full generation history plus the active field.

Layout::

    {
      "playingFields": [{"cells": [{"x": 0, "y": 0, "hasLife": true}, ...]}, ...],
      "currentPlayingField": {"cells": [...]}
    }

Decoding validates the whole payload before anything is built, so a
malformed file never yields a partial history.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from pathlib import Path

from sparse_life.domain.cell import Cell
from sparse_life.domain.field import Field
from sparse_life.domain.history import History
from sparse_life.io.schemas import (
    KEY_CELLS,
    KEY_CURRENT_FIELD,
    KEY_HAS_LIFE,
    KEY_PLAYING_FIELDS,
    KEY_X,
    KEY_Y,
)

logger = logging.getLogger(__name__)


class SaveFormatError(ValueError):
    """Raised when a save payload does not have the expected shape."""


def _encode_field(field: Field) -> dict[str, object]:
    return {KEY_CELLS: field.to_records()}


def encode_game(history: History, current: Field) -> dict[str, object]:
    """Build the plain save payload for ``history`` and ``current``."""
    return {
        KEY_PLAYING_FIELDS: [_encode_field(field) for field in history],
        KEY_CURRENT_FIELD: _encode_field(current),
    }


def _require_int(value: object, where: str) -> int:
    # bool is an int subclass; true/false are not coordinates.
    if isinstance(value, bool) or not isinstance(value, int):
        raise SaveFormatError(f"{where} must be an integer, got {value!r}")
    return value


def _decode_cell(raw: object, where: str) -> Cell:
    if not isinstance(raw, Mapping):
        raise SaveFormatError(f"{where} must be an object")
    for key in (KEY_X, KEY_Y, KEY_HAS_LIFE):
        if key not in raw:
            raise SaveFormatError(f"{where} is missing '{key}'")
    has_life = raw[KEY_HAS_LIFE]
    if not isinstance(has_life, bool):
        raise SaveFormatError(f"{where}.{KEY_HAS_LIFE} must be a boolean")
    return Cell(
        x=_require_int(raw[KEY_X], f"{where}.{KEY_X}"),
        y=_require_int(raw[KEY_Y], f"{where}.{KEY_Y}"),
        has_life=has_life,
    )


def _decode_field(raw: object, where: str) -> Field:
    if not isinstance(raw, Mapping):
        raise SaveFormatError(f"{where} must be an object")
    cells = raw.get(KEY_CELLS)
    if not isinstance(cells, list):
        raise SaveFormatError(f"{where}.{KEY_CELLS} must be a list")
    return Field(_decode_cell(cell, f"{where}.{KEY_CELLS}[{i}]") for i, cell in enumerate(cells))


def decode_game(data: object) -> tuple[History, Field]:
    """Validate a save payload and rebuild ``(history, current)``."""
    if not isinstance(data, Mapping):
        raise SaveFormatError("save data must be an object")
    if KEY_PLAYING_FIELDS not in data:
        raise SaveFormatError(f"save data is missing '{KEY_PLAYING_FIELDS}'")
    if KEY_CURRENT_FIELD not in data:
        raise SaveFormatError(f"save data is missing '{KEY_CURRENT_FIELD}'")
    raw_fields = data[KEY_PLAYING_FIELDS]
    if not isinstance(raw_fields, list):
        raise SaveFormatError(f"{KEY_PLAYING_FIELDS} must be a list")
    if not raw_fields:
        raise SaveFormatError(f"{KEY_PLAYING_FIELDS} must hold at least one generation")

    fields = [_decode_field(raw, f"{KEY_PLAYING_FIELDS}[{i}]") for i, raw in enumerate(raw_fields)]
    current = _decode_field(data[KEY_CURRENT_FIELD], KEY_CURRENT_FIELD)
    return History(fields), current


def save_game(path: Path, history: History, current: Field) -> Path:
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(encode_game(history, current)), encoding="utf-8")
    logger.info("Saved %d generations to %s", len(history), path)
    return path


def load_game(path: Path) -> tuple[History, Field]:
    """Read and validate a save file.

    Undecodable text and unreadable JSON are reported as
    :exc:`SaveFormatError` as well.
    """
    path = Path(path)
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except UnicodeDecodeError as exc:
        raise SaveFormatError(f"{path} is not valid UTF-8 text: {exc.reason}") from exc
    except json.JSONDecodeError as exc:
        raise SaveFormatError(f"{path} is not valid JSON: {exc.msg}") from exc
    history, current = decode_game(data)
    logger.info("Loaded %d generations from %s", len(history), path)
    return history, current
