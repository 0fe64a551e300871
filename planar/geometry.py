"""Pure planar geometry: midpoints, intersections, perpendicular offsets, translation."""
import math
from typing import Callable

from .types import Point, Line, Shape

# ============================================================
# Error Types
# ============================================================
class GeometryError(ValueError):
    """Raised for impossible geometry operations."""

class ParallelLinesError(GeometryError):
    """Raised when two lines have no single intersection point."""

class DegenerateShapeError(GeometryError):
    """Raised when a closed shape has fewer than 3 points."""

# ============================================================
# Line Utilities
# ============================================================
def _check_line(line: Line) -> None:
    if line[0] == line[1]:
        raise GeometryError(f"Degenerate line: start == end == {line[0]}")

def slope(line: Line) -> float | None:
    """Slope of a line, or None when the line is vertical."""
    (x1, y1), (x2, y2) = line
    if x2 - x1 == 0:
        return None
    return (y2-y1)/(x2-x1)

def midpoint(line: Line) -> Point:
    """Arithmetic mean of the two endpoints."""
    (x1, y1), (x2, y2) = line
    return ((x1+x2)/2, (y1+y2)/2)

def section_point(line: Line, k: int, n: int) -> Point:
    """Point k/n of the way from start to end.

    Weighted as ((n-k)*start + k*end)/n so grid-aligned inputs stay exact,
    e.g. section_point(((4, 13), (10, 13)), 1, 3) == (6.0, 13.0).
    """
    (x1, y1), (x2, y2) = line
    return (((n-k)*x1+k*x2)/n, ((n-k)*y1+k*y2)/n)

def line_intersection(l1: Line, l2: Line) -> Point:
    """Intersection of the infinite lines through l1 and l2.

    Vertical lines are handled as their own case rather than as an infinite
    slope. Raises ParallelLinesError for parallel (or both vertical) lines.
    """
    _check_line(l1); _check_line(l2)
    m1 = slope(l1); m2 = slope(l2)
    (l1x1, l1y1), _ = l1
    (l2x1, l2y1), _ = l2

    if m1 is None and m2 is None:
        raise ParallelLinesError(f"Parallel lines: both vertical (x={l1x1}, x={l2x1})")
    if m1 is None:
        return (l1x1, m2*l1x1 + l2y1 - m2*l2x1)
    if m2 is None:
        return (l2x1, m1*l2x1 + l1y1 - m1*l1x1)
    if m1 == m2:
        raise ParallelLinesError(f"Parallel lines: slope={m1}")

    b1 = l1y1 - m1*l1x1
    b2 = l2y1 - m2*l2x1
    x = (b2-b1)/(m1-m2)
    y = m1*x + b1
    if not (math.isfinite(x) and math.isfinite(y)):
        raise ParallelLinesError(f"Parallel lines: non-finite intersection ({x}, {y})")
    return (x, y)

def perpendicular_offset_point(line: Line, distance: float) -> Point:
    """Point at signed *distance* from the line's midpoint, perpendicular to the line.

    Positive distance moves toward increasing x, negative toward decreasing x.
    The line must have a finite, non-zero slope.
    """
    _check_line(line)
    m = slope(line)
    if m is None or m == 0:
        raise GeometryError(f"Perpendicular undefined for slope={m}")
    m2 = -1/m
    x, y = midpoint(line)
    x3 = x + math.copysign(math.sqrt(distance**2/(1+m2**2)), distance)
    y3 = y + m2*(x3-x)
    return (x3, y3)

# ============================================================
# Vector Utilities
# ============================================================
def translate(points: Shape) -> Callable[[Point], Shape]:
    """Return a closure shifting every point by an offset. Input is not mutated."""
    pts = list(points)
    def by(offset: Point) -> Shape:
        dx, dy = offset
        return [(x+dx, y+dy) for x, y in pts]
    return by

def subtract(a: Point, b: Point) -> Point:
    """Component-wise vector difference a - b."""
    return (a[0]-b[0], a[1]-b[1])

# ============================================================
# Polygon Utilities
# ============================================================
def poly_area(verts: Shape) -> float:
    """Polygon area via the shoelace formula. Works for either winding order."""
    n = len(verts); a = 0
    for i in range(n):
        j = (i+1)%n; a += verts[i][0]*verts[j][1]-verts[j][0]*verts[i][1]
    return abs(a)/2

def check_shape(shape: Shape) -> None:
    """Raise DegenerateShapeError unless *shape* has at least 3 points."""
    if len(shape) < 3:
        raise DegenerateShapeError(f"A shape must have at least 3 points, got {len(shape)}")
