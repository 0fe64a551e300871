"""SVG element emitters. Coordinates are written in grid units (the viewBox space)."""
from .types import Point, Line, Shape


def num(v: float) -> str:
    """Compact decimal for SVG attributes, e.g. 9.5 -> '9.5', 13.0 -> '13'."""
    s = f"{v:.4f}".rstrip('0').rstrip('.')
    return "0" if s == "-0" else s

def svg_points(shape: Shape) -> str:
    """'x,y x,y ...' string for a polygon/polyline points attribute."""
    return " ".join(f"{num(x)},{num(y)}" for x, y in shape)

def dash_attr(dash: tuple[float, ...] | None) -> str:
    if not dash:
        return ""
    return f' stroke-dasharray="{",".join(num(d) for d in dash)}"'

def line_el(line: Line, stroke: str, width: float,
            dash: tuple[float, ...] | None = None, cap: str = "butt") -> str:
    (x1, y1), (x2, y2) = line
    return (f'<line x1="{num(x1)}" y1="{num(y1)}" x2="{num(x2)}" y2="{num(y2)}"'
            f' stroke="{stroke}" stroke-width="{num(width)}" stroke-linecap="{cap}"'
            f'{dash_attr(dash)}/>')

def polygon_el(shape: Shape, stroke: str, width: float, fill: str = "none",
               dash: tuple[float, ...] | None = None, cap: str = "butt") -> str:
    return (f'<polygon points="{svg_points(shape)}" fill="{fill}" stroke="{stroke}"'
            f' stroke-width="{num(width)}" stroke-linecap="{cap}" stroke-linejoin="round"'
            f'{dash_attr(dash)}/>')

def text_el(p: Point, text: str, anchor: str, baseline: str,
            fill: str, font_size: float) -> str:
    x, y = p
    return (f'<text x="{num(x)}" y="{num(y)}" text-anchor="{anchor}"'
            f' dominant-baseline="{baseline}" font-family="sans-serif"'
            f' font-size="{num(font_size)}" fill="{fill}">{escape(text)}</text>')

def escape(text: str) -> str:
    return text.replace("&", "&amp;").replace("<", "&lt;").replace(">", "&gt;")
