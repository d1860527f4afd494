"""Color definitions and constants for the fire dynamics visualization.

This module contains all RGB color tuples and default configuration values
used throughout the Pygame visualization.
"""

from typing import Tuple

# Type alias for RGB color tuples
Color = Tuple[int, int, int]

# ============================================================================
# CELL STATE COLORS
# ============================================================================

EMPTY_COLOR: Color = (45, 26, 25)                   # dark soil
VEGETATION_COLOR: Color = (0, 153, 51)              # green
BURNING_COLOR: Color = (234, 67, 53)                # red (on fire)
BURNT_COLOR: Color = (100, 100, 100)                # gray (burnt out)

# ============================================================================
# UI COLORS
# ============================================================================

BLACK: Color = (0, 0, 0)                            # Text outlines
WHITE: Color = (255, 255, 255)                      # Background, text
PANEL_COLOR: Color = (80, 0, 0)                     # Info panel background

# ============================================================================
# DEFAULT DISPLAY PARAMETERS
# ============================================================================

PANEL_HEIGHT: int = 140                             # Info panel height in pixels
MIN_SCALE: float = 0.5                              # Smallest zoom (pixels per cell)
MAX_SCALE: float = 32                               # Largest zoom (pixels per cell)

# ============================================================================
# SPEED SLIDER LIMITS
# ============================================================================

MIN_FPS: int = 1                                    # Minimum simulation speed
MAX_FPS: int = 60                                   # Maximum simulation speed
