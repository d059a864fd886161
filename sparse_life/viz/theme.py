"""Visualization theme for field renderers.

Themes are frozen dataclasses that group all styling constants together,
so a palette can be swapped programmatically or via ``--life-color``.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, replace

_HEX_COLOR_RE = re.compile(r"#[0-9a-f]{6}", re.IGNORECASE)


def is_hex_color(value: str) -> bool:
    """True for ``#rrggbb`` strings, case-insensitive."""
    return _HEX_COLOR_RE.fullmatch(value) is not None


@dataclass(frozen=True)
class Theme:
    """Complete collection of visualization style tokens."""

    life_color: str = "#64b440"
    grid_color: str = "#646464"
    background_color: str = "#ffffff"
    grid_line_width: float = 2.0
    # Radius of a cell's circle as a fraction of the cell size.
    live_radius_factor: float = 0.35
    # Larger than the live radius so anti-aliased edges are covered too.
    erase_radius_factor: float = 0.42

    def __post_init__(self) -> None:
        for name in ("life_color", "grid_color", "background_color"):
            if not is_hex_color(getattr(self, name)):
                raise ValueError(f"{name} must be a #rrggbb color, got {getattr(self, name)!r}")

    def with_life_color(self, color: str) -> Theme:
        if not is_hex_color(color):
            raise ValueError(f"life color must be a #rrggbb color, got {color!r}")
        return replace(self, life_color=color)


DEFAULT_THEME = Theme()
