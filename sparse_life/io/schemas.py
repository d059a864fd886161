"""Parquet schema definitions and save-file key constants.

The Arrow schema used for the columnar history log and the key names of
the JSON save format are centralised here so that readers and writers
work against the same contracts.
"""

from __future__ import annotations

import pyarrow as pa

# ---------------------------------------------------------------------------
# Schema version constants
# ---------------------------------------------------------------------------

HISTORY_SCHEMA_VERSION = 1

# ---------------------------------------------------------------------------
# Columnar history log
# ---------------------------------------------------------------------------

HISTORY_SCHEMA = pa.schema(
    [
        ("generation", pa.int64()),
        ("x", pa.int64()),
        ("y", pa.int64()),
    ]
)

# Schema metadata keys; generations without live cells have no rows, so the
# total count is recorded alongside the data.
META_SCHEMA_VERSION = b"sparse_life.schema_version"
META_GENERATIONS = b"sparse_life.generations"
META_CURRENT_GENERATION = b"sparse_life.current_generation"

# ---------------------------------------------------------------------------
# JSON save format
# ---------------------------------------------------------------------------

KEY_PLAYING_FIELDS = "playingFields"
KEY_CURRENT_FIELD = "currentPlayingField"
KEY_CELLS = "cells"
KEY_X = "x"
KEY_Y = "y"
KEY_HAS_LIFE = "hasLife"
