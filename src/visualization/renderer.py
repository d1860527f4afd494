"""Grid rendering functionality for the fire dynamics simulation.

This module provides the GridRenderer class which draws a fire grid
snapshot and translates between screen pixels and grid cells, including
the zoom factor.
"""

import math
from typing import Optional

import numpy as np
import pygame

from fire_dynamics.cell import CellState
from fire_dynamics.exceptions import InvalidConfiguration
from .colors import (
    BURNING_COLOR,
    BURNT_COLOR,
    EMPTY_COLOR,
    MAX_SCALE,
    MIN_SCALE,
    VEGETATION_COLOR,
)


class GridRenderer:
    """Renders the fire grid onto a Pygame surface.

    Each cell is a ``scale`` x ``scale`` pixel block colored by its state.
    Zooming changes only ``scale``; the grid itself never changes size.

    Attributes:
        scale: Size of each cell in pixels.
    """

    STATE_COLORS = {
        CellState.Empty: EMPTY_COLOR,
        CellState.Vegetation: VEGETATION_COLOR,
        CellState.Burning: BURNING_COLOR,
        CellState.Burnt: BURNT_COLOR,
    }

    def __init__(self, scale: float) -> None:
        """Initialize the grid renderer.

        Args:
            scale: Size of each cell in pixels.
        """
        if not scale > 0:
            raise InvalidConfiguration(f"scale must be positive, got {scale!r}")
        self.scale = float(scale)
        self._palette = np.array(
            [self.STATE_COLORS[state] for state in CellState], dtype=np.uint8
        )

    def surface_size(self, grid_size: int) -> tuple[int, int]:
        """Pixel size of a drawn grid with ``grid_size`` cells per side."""
        side = max(1, int(grid_size * self.scale))
        return side, side

    def pixel_to_cell(self, px: float, py: float, grid_size: int) -> Optional[tuple[int, int]]:
        """Translate a pixel position on the grid surface to cell coordinates.

        Returns:
            (x, y) of the cell under the pixel, or None outside the grid.
        """
        x = math.floor(px / self.scale)
        y = math.floor(py / self.scale)
        if 0 <= x < grid_size and 0 <= y < grid_size:
            return x, y
        return None

    def rescale(self, factor: float) -> float:
        """Multiply the zoom by ``factor``, keeping it within the zoom limits.

        Returns:
            The new scale.
        """
        if not factor > 0:
            raise InvalidConfiguration(f"zoom factor must be positive, got {factor!r}")
        self.scale = min(MAX_SCALE, max(MIN_SCALE, self.scale * factor))
        return self.scale

    def zoom_in(self) -> float:
        return self.rescale(2.0)

    def zoom_out(self) -> float:
        return self.rescale(0.5)

    def render(self, snapshot: np.ndarray) -> pygame.Surface:
        """Build a surface for a snapshot indexed ``[x, y]``."""
        rgb = self._palette[snapshot]
        # surfarray indexes surfaces [x, y], the same way the grid does.
        cells = pygame.surfarray.make_surface(rgb)
        return pygame.transform.scale(cells, self.surface_size(snapshot.shape[0]))

    def draw(self, screen: pygame.Surface, snapshot: np.ndarray, offset=(0, 0)) -> None:
        """Draw the snapshot onto ``screen`` with its top-left corner at ``offset``."""
        screen.blit(self.render(snapshot), offset)
