"""Matplotlib-based rendering of fields and generation filmstrips."""

from __future__ import annotations

import logging
import math
from pathlib import Path

import matplotlib

matplotlib.use("Agg")

import matplotlib.pyplot as plt  # noqa: E402
from matplotlib.collections import PatchCollection  # noqa: E402
from matplotlib.patches import Circle, Rectangle  # noqa: E402

from sparse_life.domain.cell import Cell  # noqa: E402
from sparse_life.domain.field import Field  # noqa: E402
from sparse_life.domain.history import History  # noqa: E402
from sparse_life.domain.viewport import Viewport  # noqa: E402
from sparse_life.game import Redraw  # noqa: E402
from sparse_life.viz.theme import DEFAULT_THEME, Theme  # noqa: E402

logger = logging.getLogger(__name__)

_DPI = 100


# ---------------------------------------------------------------------------
# Drawing helpers
# ---------------------------------------------------------------------------


def _grid_patches(viewport: Viewport, theme: Theme) -> list[Rectangle]:
    """Background-colored cell squares; the grid color shows between them."""
    scale = viewport.scale
    size = viewport.cell_size
    half_line = theme.grid_line_width / 2
    cols = math.ceil(viewport.width / size / scale) + 1
    rows = math.ceil(viewport.height / size / scale) + 1
    patches = []
    # Start one cell before the edge so partially panned rows stay visible.
    for i in range(-1, cols):
        for j in range(-1, rows):
            px, py = viewport.coordinates_to_pixels((i, j), relative=True)
            patches.append(
                Rectangle(
                    (px + half_line * scale, py + half_line * scale),
                    (size - half_line) * scale,
                    (size - half_line) * scale,
                )
            )
    return patches


def _cell_patches(
    cells: list[Cell], viewport: Viewport, theme: Theme, radius_factor: float
) -> list[Circle]:
    scale = viewport.scale
    size = viewport.cell_size
    radius = max((size * radius_factor - theme.grid_line_width) * scale, 0.0)
    patches = []
    for cell in cells:
        if not viewport.coords_in_bounds(cell):
            continue
        px, py = viewport.coordinates_to_pixels(cell)
        patches.append(Circle((px + size / 2 * scale, py + size / 2 * scale), radius))
    return patches


def draw_field(
    ax: plt.Axes,
    field: Field,
    viewport: Viewport,
    theme: Theme = DEFAULT_THEME,
) -> int:
    """Draw grid and living cells on *ax*; return the number of cells drawn."""
    ax.set_xlim(0, viewport.width)
    ax.set_ylim(viewport.height, 0)
    ax.set_aspect("equal")
    ax.set_xticks([])
    ax.set_yticks([])
    ax.set_facecolor(theme.grid_color)
    ax.add_collection(
        PatchCollection(
            _grid_patches(viewport, theme),
            facecolor=theme.background_color,
            edgecolor="none",
        )
    )
    live = [cell for cell in field.get_cells() if cell.has_life]
    circles = _cell_patches(live, viewport, theme, theme.live_radius_factor)
    if circles:
        ax.add_collection(
            PatchCollection(circles, facecolor=theme.life_color, edgecolor="none")
        )
    return len(circles)


def draw_redraw(
    ax: plt.Axes,
    redraw: Redraw,
    viewport: Viewport,
    theme: Theme = DEFAULT_THEME,
) -> tuple[int, int]:
    """Apply an incremental update on top of an already drawn field.

    Erased cells are painted over in the background color with the larger
    erase radius, then living cells are drawn. Returns ``(erased, drawn)``
    counts of cells inside the viewport.
    """
    erase = _cell_patches(list(redraw.erase), viewport, theme, theme.erase_radius_factor)
    draw = _cell_patches(list(redraw.draw), viewport, theme, theme.live_radius_factor)
    if erase:
        ax.add_collection(
            PatchCollection(erase, facecolor=theme.background_color, edgecolor="none")
        )
    if draw:
        ax.add_collection(PatchCollection(draw, facecolor=theme.life_color, edgecolor="none"))
    return len(erase), len(draw)


def _viewport_for(field: Field, viewport: Viewport | None, scale: float) -> Viewport:
    if viewport is not None:
        return viewport
    return Viewport.fitted(field.bounding_box(), scale=scale)


# ---------------------------------------------------------------------------
# Public renderers
# ---------------------------------------------------------------------------


def render_field(
    field: Field,
    output_path: Path,
    viewport: Viewport | None = None,
    theme: Theme = DEFAULT_THEME,
    title: str | None = None,
    scale: float = 1.0,
) -> Path:
    """Render one generation to an image file.

    Without a viewport, the image is framed around the living cells at
    ``scale``.
    """
    view = _viewport_for(field, viewport, scale)
    fig, ax = plt.subplots(figsize=(view.width / _DPI, view.height / _DPI), dpi=_DPI)
    try:
        drawn = draw_field(ax, field, view, theme)
        if title:
            ax.set_title(title)
        output_path = Path(output_path)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        fig.savefig(output_path, dpi=_DPI, bbox_inches="tight")
    finally:
        plt.close(fig)
    logger.info("Rendered %d cells to %s", drawn, output_path)
    return output_path


def select_frame_generations(generation_count: int, n_frames: int) -> list[int]:
    """Evenly spaced 1-based generations, always including first and last."""
    if n_frames < 1:
        raise ValueError("n_frames must be >= 1")
    if generation_count < 1:
        return []
    if n_frames >= generation_count:
        if n_frames > generation_count:
            logger.warning(
                "Requested %d frames but only %d generations exist", n_frames, generation_count
            )
        return list(range(1, generation_count + 1))
    if n_frames == 1:
        return [1]
    step = (generation_count - 1) / (n_frames - 1)
    return sorted({1 + round(i * step) for i in range(n_frames)})


def _union_box(fields: list[Field]) -> tuple[int, int, int, int] | None:
    boxes = [box for box in (f.bounding_box() for f in fields) if box is not None]
    if not boxes:
        return None
    return (
        min(b[0] for b in boxes),
        min(b[1] for b in boxes),
        max(b[2] for b in boxes),
        max(b[3] for b in boxes),
    )


def render_filmstrip(
    history: History,
    output_path: Path,
    n_frames: int = 6,
    viewport: Viewport | None = None,
    theme: Theme = DEFAULT_THEME,
    scale: float = 1.0,
) -> Path:
    """Render evenly spaced generations side by side in one image."""
    generations = select_frame_generations(len(history), n_frames)
    if not generations:
        raise ValueError("history is empty")
    fields = [history.get(g) for g in generations]
    view = viewport if viewport is not None else Viewport.fitted(_union_box(fields), scale=scale)

    panel_w = view.width / _DPI
    panel_h = view.height / _DPI
    fig, axes = plt.subplots(
        1, len(fields), figsize=(panel_w * len(fields), panel_h + 0.4), dpi=_DPI, squeeze=False
    )
    try:
        for ax, generation, field in zip(axes[0], generations, fields, strict=True):
            draw_field(ax, field, view, theme)
            ax.set_title(f"Gen {generation}", fontsize=9)
        output_path = Path(output_path)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        fig.savefig(output_path, dpi=_DPI, bbox_inches="tight")
    finally:
        plt.close(fig)
    logger.info("Rendered filmstrip of %d generations to %s", len(fields), output_path)
    return output_path
