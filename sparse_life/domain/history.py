"""Append-only, 1-indexed log of generation snapshots."""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from sparse_life.domain.field import Field


class GenerationOutOfRangeError(ValueError, IndexError):
    """Raised when a generation number does not name a stored snapshot."""


class History:
    """Ordered sequence of fields; generation 1 is the first entry."""

    def __init__(self, fields: Iterable[Field] | None = None) -> None:
        self._fields: list[Field] = list(fields or ())

    def append(self, field: Field) -> int:
        """Store ``field`` as the newest generation and return its number."""
        self._fields.append(field)
        return len(self._fields)

    def get(self, generation: int) -> Field:
        if not 1 <= generation <= len(self._fields):
            raise GenerationOutOfRangeError(
                f"generation must be in 1..{len(self._fields)}, got {generation}"
            )
        return self._fields[generation - 1]

    def generation_of(self, field: Field) -> int | None:
        """Generation number holding this exact instance, if stored."""
        for index, stored in enumerate(self._fields):
            if stored is field:
                return index + 1
        return None

    @property
    def latest(self) -> Field:
        if not self._fields:
            raise GenerationOutOfRangeError("history is empty")
        return self._fields[-1]

    def reset(self, seed: Field | None = None) -> Field:
        """Clear every generation and start over from ``seed`` (empty by default)."""
        first = seed if seed is not None else Field()
        self._fields = [first]
        return first

    def truncate(self, generation: int) -> None:
        """Keep generations ``1..generation`` and drop the rest."""
        self.get(generation)
        del self._fields[generation:]

    def __len__(self) -> int:
        return len(self._fields)

    def __iter__(self) -> Iterator[Field]:
        return iter(list(self._fields))

    def __repr__(self) -> str:
        return f"History(generations={len(self._fields)})"
