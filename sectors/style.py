"""Render configuration: palettes, line styles, and the text anchor table."""
from typing import NamedTuple

from planar.types import Point, Position
from sectors.constants import (
    GRID_SIZE, RATIO, SEPARATION,
    SECTOR_WIDTH, CONSTRUCTION_WIDTH, GRID_WIDTH, DASH, LABEL_OFFSET, LABEL_FONT,
)

# ============================================================
# Palettes
# ============================================================
class Palette(NamedTuple):
    background: str; content: str
    blue: str; green: str; red: str
    gray: str; grid: str; accent: str

LIGHT = Palette(
    background="white", content="black",
    blue="blue", green="green", red="red",
    gray="gray", grid="lightgray", accent="orange",
)

DARK = Palette(
    background="#1a1a2e", content="white",
    blue="lightblue", green="lightgreen", red="lightcoral",
    gray="lightgray", grid="gray", accent="orange",
)

# ============================================================
# Line styles
# ============================================================
class LineStyle(NamedTuple):
    """Stroke settings. *color* is a Palette field name; widths are grid units."""
    width: float
    color: str
    dash: tuple[float, ...] | None = None
    cap: str = "butt"

SECTOR_STYLE = LineStyle(SECTOR_WIDTH, "content", None, "round")
GRID_STYLE = LineStyle(GRID_WIDTH, "grid")
ALPHA_D_STYLE = LineStyle(CONSTRUCTION_WIDTH, "blue", (DASH,))
PSI_STYLE = LineStyle(CONSTRUCTION_WIDTH, "green", (DASH,))
OMEGA_STYLE = LineStyle(CONSTRUCTION_WIDTH, "red", (DASH,))

def stroke_color(style: LineStyle, palette: Palette) -> str:
    return getattr(palette, style.color)

# ============================================================
# Text anchors
# ============================================================
class TextAnchor(NamedTuple):
    """h: start|middle|end, v: baseline|middle|hanging, offsets in grid units."""
    h: str; v: str; dx: float; dy: float

_o = LABEL_OFFSET
TEXT_ANCHORS: dict[Position, TextAnchor] = {
    "top":         TextAnchor("middle", "baseline",  0, -_o),
    "topRight":    TextAnchor("start",  "baseline", _o, -_o),
    "right":       TextAnchor("start",  "middle",   _o,   0),
    "bottomRight": TextAnchor("start",  "hanging",  _o,  _o),
    "bottom":      TextAnchor("middle", "hanging",   0,  _o),
    "bottomLeft":  TextAnchor("end",    "hanging", -_o,  _o),
    "left":        TextAnchor("end",    "middle",  -_o,   0),
    "topLeft":     TextAnchor("end",    "baseline", -_o, -_o),
    "center":      TextAnchor("middle", "middle",    0,   0),
}

def place_text(p: Point, position: Position, font_size: float = LABEL_FONT) -> tuple[Point, TextAnchor]:
    """Text origin and anchor for a label at *position* around p.

    Offsets scale with font size so small grid labels hug their point.
    """
    ta = TEXT_ANCHORS[position]
    k = font_size / LABEL_FONT
    return (p[0] + ta.dx*k, p[1] + ta.dy*k), ta

# ============================================================
# Diagram configuration
# ============================================================
class DiagramConfig(NamedTuple):
    grid_size: int = GRID_SIZE
    ratio: int = RATIO
    separation: float = SEPARATION
    show_grid: bool = True
    show_labels: bool = True
    dark: bool = False

def palette_for(config: DiagramConfig) -> Palette:
    return DARK if config.dark else LIGHT
