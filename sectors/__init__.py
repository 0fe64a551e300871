"""Pentagon sector construction and its SVG / raster renderers."""

from .construction import (
    Seeds, SEEDS, Sectors, Construction,
    compute_construction, separate_sectors, pentagon,
)
from .style import DiagramConfig, LIGHT, DARK, TEXT_ANCHORS
