"""Named constants for the sector diagram.

All lengths in grid units unless noted. Pixel sizes derive from RATIO / GRID_SIZE.
"""

# Seed pentagon (grid units, y grows downward)
SEED_A = (7.0, 1.0)
SEED_B = (12.0, 9.0)
SEED_C = (10.0, 13.0)
SEED_D = (4.0, 13.0)
SEED_E = (2.0, 9.0)

# Surface
GRID_SIZE = 14                    # grid spans 0..14 both ways
RATIO = 2000                      # output size in pixels (square)

# Sector pull-apart distance
SEPARATION = 0.0

# Strokes (grid units)
SECTOR_WIDTH = 0.33               # sector outline
CONSTRUCTION_WIDTH = 0.06         # dashed construction lines
GRID_WIDTH = 0.015                # background grid
DASH = 0.1                        # dash and gap length

# Text (grid units)
LABEL_FONT = 0.375
GRID_FONT = 0.15
LABEL_OFFSET = 0.25               # gap between a point and its label
