"""Visualization: themes and matplotlib renderers."""

from sparse_life.viz.render import (
    draw_field,
    draw_redraw,
    render_field,
    render_filmstrip,
    select_frame_generations,
)
from sparse_life.viz.theme import DEFAULT_THEME, Theme, is_hex_color

__all__ = [
    "DEFAULT_THEME",
    "Theme",
    "draw_field",
    "draw_redraw",
    "is_hex_color",
    "render_field",
    "render_filmstrip",
    "select_frame_generations",
]
