"""Parquet persistence for generation histories.

Each row is one living cell of one generation. Rows are buffered and
written in chunks so long histories never sit fully in memory as a table.
"""

from __future__ import annotations

import logging
from pathlib import Path

import pyarrow as pa
import pyarrow.parquet as pq

from sparse_life.config.constants import FLUSH_THRESHOLD
from sparse_life.domain.field import Field
from sparse_life.domain.history import History
from sparse_life.io.schemas import (
    HISTORY_SCHEMA,
    HISTORY_SCHEMA_VERSION,
    META_CURRENT_GENERATION,
    META_GENERATIONS,
    META_SCHEMA_VERSION,
)

logger = logging.getLogger(__name__)


def flush_history_columns(
    columns: dict[str, list[int]],
    writer: pq.ParquetWriter,
) -> None:
    """Write accumulated history rows to Parquet and clear in-memory buffers."""
    if not columns["generation"]:
        return
    table = pa.Table.from_pydict(columns, schema=writer.schema)
    writer.write_table(table)
    for values in columns.values():
        values.clear()


def write_history_parquet(
    history: History,
    path: Path,
    current_generation: int | None = None,
    flush_threshold: int = FLUSH_THRESHOLD,
) -> Path:
    """Write every generation's live cells to a Parquet file."""
    if flush_threshold < 1:
        raise ValueError("flush_threshold must be >= 1")
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)

    metadata = {
        META_SCHEMA_VERSION: str(HISTORY_SCHEMA_VERSION).encode(),
        META_GENERATIONS: str(len(history)).encode(),
    }
    if current_generation is not None:
        metadata[META_CURRENT_GENERATION] = str(current_generation).encode()
    schema = HISTORY_SCHEMA.with_metadata(metadata)

    columns: dict[str, list[int]] = {"generation": [], "x": [], "y": []}
    writer = pq.ParquetWriter(path, schema)
    try:
        for generation, field in enumerate(history, start=1):
            for cell in field.get_cells():
                if not cell.has_life:
                    continue
                columns["generation"].append(generation)
                columns["x"].append(cell.x)
                columns["y"].append(cell.y)
            if len(columns["generation"]) >= flush_threshold:
                flush_history_columns(columns, writer)
        flush_history_columns(columns, writer)
    finally:
        writer.close()
    logger.info("Wrote %d generations to %s", len(history), path)
    return path


def read_history_parquet(path: Path) -> tuple[History, int | None]:
    """Rebuild a history from a Parquet log.

    Returns ``(history, current_generation)``; the latter is None when the
    file does not record one.
    """
    table = pq.read_table(Path(path))
    metadata = table.schema.metadata or {}
    generations_raw = metadata.get(META_GENERATIONS)
    rows = table.to_pydict()

    observed = max(rows["generation"], default=0)
    generations = int(generations_raw) if generations_raw is not None else observed
    if generations < observed:
        raise ValueError(
            f"history log records {generations} generations but has rows for {observed}"
        )

    coords: list[list[tuple[int, int]]] = [[] for _ in range(generations)]
    for generation, x, y in zip(rows["generation"], rows["x"], rows["y"], strict=True):
        if generation < 1:
            raise ValueError(f"history log has invalid generation {generation}")
        coords[generation - 1].append((x, y))

    current_raw = metadata.get(META_CURRENT_GENERATION)
    current = int(current_raw) if current_raw is not None else None
    return History(Field.from_coords(c) for c in coords), current
