"""Label and construction-line layout shared by the SVG and raster renderers."""
from typing import NamedTuple

from planar.types import Point, Line, Position
from planar.geometry import midpoint
from sectors.construction import Construction
from sectors.style import LineStyle, ALPHA_D_STYLE, PSI_STYLE, OMEGA_STYLE


class Label(NamedTuple):
    point: Point
    text: str
    position: Position
    color: str       # Palette field name


class Guide(NamedTuple):
    line: Line
    style: LineStyle


def fmt_coord(p: Point) -> str:
    """Seed coordinate as written on the diagram, e.g. (7,1)."""
    return f"({p[0]:g},{p[1]:g})"

def fmt_theta(p: Point) -> str:
    """Concurrency point label: x to whole units, y to hundredths, e.g. (6, 10.09)."""
    return f"({p[0]:.0f}, {p[1]:.2f})"


def build_guides(c: Construction) -> list[Guide]:
    """Dashed construction lines: αD (blue), ψ (green), ω (red)."""
    return [
        Guide(c.alpha_d, ALPHA_D_STYLE),
        Guide(c.psi, PSI_STYLE),
        Guide(c.omega, OMEGA_STYLE),
    ]


def build_labels(c: Construction) -> list[Label]:
    """Every text label of the label layer, in drawing order."""
    A, B, C, D, E = c.seeds
    labels = [
        Label(A, f"A {fmt_coord(A)}", "top", "content"),
        Label(B, f"B {fmt_coord(B)}", "right", "content"),
        Label(C, f"C {fmt_coord(C)}", "bottomRight", "content"),
        Label(D, f"D {fmt_coord(D)}", "bottomLeft", "content"),
        Label(E, f"E {fmt_coord(E)}", "left", "content"),

        Label(c.alpha, "α = M(AB)", "topRight", "blue"),
        Label(midpoint(c.alpha_d), "χ = αD", "bottomRight", "blue"),

        Label(c.beta, "β = ⅓DC", "bottom", "green"),
        Label(midpoint(c.psi), "ψ = β - AE", "center", "green"),

        Label(c.gamma, "γ = ⅔DC", "bottom", "red"),
        Label(c.chi, "χ", "topLeft", "red"),
        Label(midpoint((c.theta, c.gamma)), "ω = γ - χ", "right", "red"),

        Label(c.theta, "Θ = (χ,ψ,ω)", "left", "accent"),
        Label(c.theta, fmt_theta(c.theta), "right", "accent"),
    ]
    # Sector names sit on a diagonal through each sector
    top_mid = midpoint((A, c.theta))
    right_mid = midpoint((c.alpha, C))
    left_mid = midpoint((E, c.beta))
    labels += [
        Label(top_mid, "Sector Top", "center", "gray"),
        Label(top_mid, "AαΘχ", "bottom", "gray"),
        Label(right_mid, "Sector Right", "center", "gray"),
        Label(right_mid, "αBCβΘ", "bottom", "gray"),
        Label(left_mid, "Sector Left", "center", "gray"),
        Label(left_mid, "χΘβDE", "bottomRight", "gray"),
    ]
    return labels


def grid_lines(grid_size: int) -> list[Line]:
    """grid_size+1 horizontal and grid_size+1 vertical lines."""
    lines = []
    for i in range(grid_size + 1):
        lines.append(((0.0, float(i)), (float(grid_size), float(i))))
        lines.append(((float(i), 0.0), (float(i), float(grid_size))))
    return lines


def grid_labels(grid_size: int) -> list[Label]:
    """'x,y' at every grid intersection, row by row."""
    n = grid_size + 1
    return [Label((float(i % n), float(i // n)), f"{i % n},{i // n}", "bottomRight", "grid")
            for i in range(n * n)]
