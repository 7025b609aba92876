# constants.py

"""
Application Constants

This module defines static configuration values for the application's framework.
These are not expected to change between animation runs.

Data Contract:
- All values are immutable constants.
- Units are specified in comments where applicable.
"""

# Canvas dimensions (the buffer the particles live in)
WIDTH = 1080  # Pixels
HEIGHT = 1080  # Pixels

# Framerate
FPS = 60  # Frames per second

# Colors (RGB)
BLACK = (0, 0, 0)

# Window Title
TITLE = "Particle Rings"

# Cursor position meaning "no active pointer". Far enough outside the canvas
# that no particle's repulsion radius can reach it.
SENTINEL_CURSOR = (9999.0, 9999.0)

# Distance from rest (pixels) at which a particle reaches full scale and
# its second color.
SCALE_DISTANCE = 200.0
MIN_SCALE = 1.0
MAX_SCALE = 5.0

# Base radius range, mapped from the red channel of image A.
RADIUS_MIN = 1.0
RADIUS_MAX = 12.0
