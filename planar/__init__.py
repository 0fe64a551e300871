"""Shared types, planar geometry primitives, and SVG element emitters."""

from .types import Point, Line, Shape, Position, POSITIONS
from .geometry import (
    GeometryError, ParallelLinesError, DegenerateShapeError,
    slope, midpoint, section_point, line_intersection, perpendicular_offset_point,
    translate, subtract, poly_area, check_shape,
)
from .svg import num, svg_points, line_el, polygon_el, text_el
