"""Generate the sector diagram as a raster PNG (matplotlib, Agg backend).

The axes span the whole figure in grid units with y pointing down, so the
image matches the SVG layout pixel for pixel at RATIO x RATIO.
"""
import os

import matplotlib

matplotlib.use("Agg")

import matplotlib.pyplot as plt  # noqa: E402
import numpy as np  # noqa: E402
from matplotlib.patches import Polygon  # noqa: E402

from planar.types import Point, Line, Shape, Position  # noqa: E402
from planar.geometry import check_shape  # noqa: E402
from sectors.construction import Construction, compute_construction, separate_sectors  # noqa: E402
from sectors.constants import LABEL_FONT, GRID_FONT  # noqa: E402
from sectors.labels import build_guides, build_labels, grid_labels, fmt_theta  # noqa: E402
from sectors.style import (  # noqa: E402
    LineStyle, Palette, DiagramConfig, SECTOR_STYLE, GRID_STYLE,
    palette_for, place_text, stroke_color,
)

DPI = 200

_HA = {"start": "left", "middle": "center", "end": "right"}
_VA = {"baseline": "baseline", "middle": "center", "hanging": "top"}
_CAP = {"butt": "butt", "round": "round", "square": "projecting"}


class Canvas:
    """An axes plus the grid-unit to point scale for its figure."""

    def __init__(self, fig, ax, points_per_unit: float):
        self.fig = fig
        self.ax = ax
        self.ppu = points_per_unit

    def pt(self, units: float) -> float:
        return units * self.ppu


def setup_canvas(config: DiagramConfig, palette: Palette) -> Canvas:
    """Square figure of config.ratio pixels with one full-bleed axes."""
    size_in = config.ratio / DPI
    fig = plt.figure(figsize=(size_in, size_in), dpi=DPI, facecolor=palette.background)
    ax = fig.add_axes([0, 0, 1, 1])
    ax.set_facecolor(palette.background)
    ax.set_xlim(0, config.grid_size)
    ax.set_ylim(config.grid_size, 0)
    ax.set_aspect("equal")
    ax.axis("off")
    return Canvas(fig, ax, config.ratio / config.grid_size * 72 / DPI)


def _linestyle(style: LineStyle):
    if not style.dash:
        return "solid"
    dash = style.dash * 2 if len(style.dash) % 2 else style.dash
    # matplotlib scales dash lengths by the line width
    return (0, tuple(d / style.width for d in dash))

# ============================================================
# Drawing primitives
# ============================================================

def draw_line(cv: Canvas, line: Line, style: LineStyle, palette: Palette):
    (x1, y1), (x2, y2) = line
    artist, = cv.ax.plot(
        [x1, x2], [y1, y2],
        color=stroke_color(style, palette), linewidth=cv.pt(style.width),
        linestyle=_linestyle(style),
        solid_capstyle=_CAP[style.cap], dash_capstyle=_CAP[style.cap],
    )
    return artist

def draw_polygon(cv: Canvas, shape: Shape, style: LineStyle, palette: Palette):
    """Closed outline. Raises DegenerateShapeError for fewer than 3 points."""
    check_shape(shape)
    patch = Polygon(
        np.array(shape, dtype=float), closed=True, fill=False,
        edgecolor=stroke_color(style, palette), linewidth=cv.pt(style.width),
        linestyle=_linestyle(style), joinstyle="round", capstyle=_CAP[style.cap],
    )
    cv.ax.add_patch(patch)
    return patch

def draw_text(cv: Canvas, p: Point, text: str, position: Position, color: str,
              font_size: float = LABEL_FONT):
    (x, y), ta = place_text(p, position, font_size)
    return cv.ax.text(x, y, text, color=color, fontsize=cv.pt(font_size),
                      family="sans-serif", ha=_HA[ta.h], va=_VA[ta.v])

def draw_grid(cv: Canvas, grid_size: int, palette: Palette, visible: bool = True):
    ticks = np.arange(grid_size + 1)
    kw = dict(colors=stroke_color(GRID_STYLE, palette), linewidths=cv.pt(GRID_STYLE.width))
    artists = [cv.ax.hlines(ticks, 0, grid_size, **kw), cv.ax.vlines(ticks, 0, grid_size, **kw)]
    for lbl in grid_labels(grid_size):
        artists.append(draw_text(cv, lbl.point, lbl.text, lbl.position,
                                 getattr(palette, lbl.color), GRID_FONT))
    for a in artists:
        a.set_visible(visible)
    return artists

def draw_labels(cv: Canvas, c: Construction, palette: Palette, visible: bool = True):
    artists = [draw_line(cv, g.line, g.style, palette) for g in build_guides(c)]
    for lbl in build_labels(c):
        artists.append(draw_text(cv, lbl.point, lbl.text, lbl.position, getattr(palette, lbl.color)))
    for a in artists:
        a.set_visible(visible)
    return artists

# ============================================================
# Rendering
# ============================================================

def render_canvas(c: Construction, config: DiagramConfig = DiagramConfig()):
    """Render the diagram onto a new figure and return it.

    The figure is closed if any drawing step fails.
    """
    pal = palette_for(config)
    cv = setup_canvas(config, pal)
    try:
        for shape in separate_sectors(c, config.separation):
            draw_polygon(cv, shape, SECTOR_STYLE, pal)
        draw_grid(cv, config.grid_size, pal, config.show_grid)
        draw_labels(cv, c, pal, config.show_labels)
    except Exception:
        plt.close(cv.fig)
        raise
    return cv.fig


def save_canvas(fig, path: str) -> str:
    """Write *fig* as PNG and close it."""
    try:
        fig.savefig(path, dpi=DPI, facecolor=fig.get_facecolor())
    finally:
        plt.close(fig)
    return path


def write_png(path: str, c: Construction, config: DiagramConfig = DiagramConfig()) -> str:
    return save_canvas(render_canvas(c, config), path)


if __name__ == "__main__":
    c = compute_construction()
    png_path = os.path.join(os.path.dirname(os.path.abspath(__file__)), "sectors.png")
    write_png(png_path, c, DiagramConfig(separation=0.5))
    print(f"Diagram written to {png_path}")
    print(f"Θ = {fmt_theta(c.theta)}")
