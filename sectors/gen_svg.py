"""Generate the sector diagram as SVG.

The document is drawn in grid units (viewBox 0..GRID_SIZE) and sized to
RATIO pixels. Layers: sector outlines, grid, labels. Grid and label layers
are always emitted; hidden ones carry display="none".
"""
import os

from planar.types import Point, Line, Shape, Position
from planar.geometry import check_shape
from planar.svg import line_el, polygon_el, text_el
from sectors.construction import Construction, compute_construction, separate_sectors
from sectors.constants import LABEL_FONT, GRID_FONT
from sectors.labels import build_guides, build_labels, grid_lines, grid_labels, fmt_theta
from sectors.style import (
    LineStyle, Palette, DiagramConfig, SECTOR_STYLE, GRID_STYLE,
    palette_for, place_text, stroke_color,
)

_BASELINE = {"baseline": "auto", "middle": "central", "hanging": "hanging"}

# ============================================================
# SVG Helpers
# ============================================================

def draw_line(out, line: Line, style: LineStyle, palette: Palette):
    out.append(line_el(line, stroke_color(style, palette), style.width, style.dash, style.cap))

def draw_polygon(out, shape: Shape, style: LineStyle, palette: Palette, fill="none"):
    """Closed outline. Raises DegenerateShapeError for fewer than 3 points."""
    check_shape(shape)
    out.append(polygon_el(shape, stroke_color(style, palette), style.width, fill, style.dash, style.cap))

def draw_text(out, p: Point, text: str, position: Position, color: str, font_size: float = LABEL_FONT):
    origin, ta = place_text(p, position, font_size)
    out.append(text_el(origin, text, ta.h, _BASELINE[ta.v], color, font_size))

def _layer(out, name: str, visible: bool):
    display = "" if visible else ' display="none"'
    out.append(f'<g class="{name}"{display}>')

def draw_grid(out, grid_size: int, palette: Palette, visible: bool = True):
    _layer(out, "grid", visible)
    for line in grid_lines(grid_size):
        draw_line(out, line, GRID_STYLE, palette)
    for lbl in grid_labels(grid_size):
        draw_text(out, lbl.point, lbl.text, lbl.position, getattr(palette, lbl.color), GRID_FONT)
    out.append('</g>')

def draw_labels(out, c: Construction, palette: Palette, visible: bool = True):
    _layer(out, "labels", visible)
    for guide in build_guides(c):
        draw_line(out, guide.line, guide.style, palette)
    for lbl in build_labels(c):
        draw_text(out, lbl.point, lbl.text, lbl.position, getattr(palette, lbl.color))
    out.append('</g>')

# ============================================================
# SVG rendering
# ============================================================

def render_svg(c: Construction, config: DiagramConfig = DiagramConfig()) -> str:
    """Render the complete diagram. Returns SVG string.

    Any GeometryError aborts the render before a document is returned.
    """
    pal = palette_for(config)
    g = config.grid_size
    sectors = separate_sectors(c, config.separation)

    out = []
    out.append(f'<svg xmlns="http://www.w3.org/2000/svg" width="{config.ratio}" height="{config.ratio}"'
               f' viewBox="0 0 {g} {g}">')
    out.append(f'<rect x="0" y="0" width="{g}" height="{g}" fill="{pal.background}"/>')

    out.append('<g class="sectors">')
    for shape in sectors:
        draw_polygon(out, shape, SECTOR_STYLE, pal)
    out.append('</g>')

    draw_grid(out, g, pal, config.show_grid)
    draw_labels(out, c, pal, config.show_labels)

    out.append('</svg>')
    return "\n".join(out)


def write_svg(path: str, c: Construction, config: DiagramConfig = DiagramConfig()) -> str:
    """Render and write *path*. Nothing is written if rendering fails."""
    svg_content = render_svg(c, config)
    with open(path, "w", encoding="utf-8") as f:
        f.write(svg_content)
    return path

# ============================================================
# Main entry point
# ============================================================

if __name__ == "__main__":
    c = compute_construction()
    svg_path = os.path.join(os.path.dirname(os.path.abspath(__file__)), "sectors.svg")
    write_svg(svg_path, c)
    print(f"Diagram written to {svg_path}")
    print(f"Θ = {fmt_theta(c.theta)}")
