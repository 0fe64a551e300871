"""Shared type definitions for the sector diagram."""
from typing import Literal

Point = tuple[float, float]
Line = tuple[Point, Point]
Shape = list[Point]

Position = Literal[
    "top", "topRight", "right", "bottomRight",
    "bottom", "bottomLeft", "left", "topLeft", "center",
]

POSITIONS: tuple[Position, ...] = (
    "top", "topRight", "right", "bottomRight",
    "bottom", "bottomLeft", "left", "topLeft", "center",
)
