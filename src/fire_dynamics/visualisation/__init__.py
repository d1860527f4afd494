"""Matplotlib helpers for fire grid snapshots and burn history."""

from .grid_viz import GridVisualizer
from .palettes import DEFAULT_PALETTE, StatePalette

__all__ = ["GridVisualizer", "StatePalette", "DEFAULT_PALETTE"]
