"""Persistence: JSON save files and Parquet history logs."""

from sparse_life.io.history_log import read_history_parquet, write_history_parquet
from sparse_life.io.save_format import (
    SaveFormatError,
    decode_game,
    encode_game,
    load_game,
    save_game,
)

__all__ = [
    "SaveFormatError",
    "decode_game",
    "encode_game",
    "load_game",
    "read_history_parquet",
    "save_game",
    "write_history_parquet",
]
