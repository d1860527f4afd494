"""Visualization package for the fire dynamics simulation using Pygame."""

from .colors import *
from .renderer import GridRenderer
from .ui import InfoPanel, SpeedSlider

__all__ = [
    # Renderer and UI components
    'GridRenderer',
    'InfoPanel',
    'SpeedSlider',

    # Cell state colors
    'EMPTY_COLOR',
    'VEGETATION_COLOR',
    'BURNING_COLOR',
    'BURNT_COLOR',

    # UI colors
    'BLACK',
    'WHITE',
    'PANEL_COLOR',

    # Display parameters
    'PANEL_HEIGHT',
    'MIN_SCALE',
    'MAX_SCALE',

    # FPS limits
    'MIN_FPS',
    'MAX_FPS',
]
