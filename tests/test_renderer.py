"""Unit tests for the Pygame renderer and UI widgets."""

import numpy as np
import pygame
import pytest

from fire_dynamics.cell import CellState
from fire_dynamics.exceptions import InvalidConfiguration
from fire_dynamics.model import FireGrid
from fire_dynamics.simulator import FireSimulator
from visualization import (
    BURNING_COLOR,
    BURNT_COLOR,
    EMPTY_COLOR,
    MAX_SCALE,
    MIN_SCALE,
    PANEL_COLOR,
    VEGETATION_COLOR,
    GridRenderer,
    InfoPanel,
    SpeedSlider,
)


def rgb_at(surface, x, y):
    return tuple(surface.get_at((x, y)))[:3]


class TestGridRenderer:
    """Test cases for GridRenderer."""

    def test_invalid_scale(self):
        with pytest.raises(InvalidConfiguration):
            GridRenderer(0)

    def test_surface_size(self):
        renderer = GridRenderer(4)
        assert renderer.surface_size(10) == (40, 40)

    @pytest.mark.parametrize(
        "px, py, expected",
        [
            (0, 0, (0, 0)),
            (3.9, 3.9, (0, 0)),
            (4, 0, (1, 0)),
            (17, 39, (4, 9)),
            (40, 0, None),
            (0, 40, None),
            (-1, 5, None),
        ],
    )
    def test_pixel_to_cell(self, px, py, expected):
        renderer = GridRenderer(4)
        assert renderer.pixel_to_cell(px, py, 10) == expected

    def test_zoom_changes_click_translation(self):
        renderer = GridRenderer(4)
        renderer.zoom_in()
        assert renderer.scale == 8
        assert renderer.pixel_to_cell(17, 39, 10) == (2, 4)
        renderer.zoom_out()
        renderer.zoom_out()
        assert renderer.scale == 2
        assert renderer.pixel_to_cell(17, 39, 10) is None

    def test_zoom_limits(self):
        renderer = GridRenderer(MAX_SCALE)
        assert renderer.zoom_in() == MAX_SCALE
        renderer = GridRenderer(MIN_SCALE)
        assert renderer.zoom_out() == MIN_SCALE
        with pytest.raises(InvalidConfiguration):
            renderer.rescale(0)

    def test_draw_colors_each_cell(self):
        snapshot = np.full((3, 3), CellState.Empty, dtype=np.int8)
        snapshot[0, 0] = CellState.Vegetation
        snapshot[2, 0] = CellState.Burning
        snapshot[1, 2] = CellState.Burnt

        renderer = GridRenderer(4)
        screen = pygame.Surface(renderer.surface_size(3))
        renderer.draw(screen, snapshot)

        assert rgb_at(screen, 1, 1) == VEGETATION_COLOR
        assert rgb_at(screen, 9, 2) == BURNING_COLOR
        assert rgb_at(screen, 5, 10) == BURNT_COLOR
        assert rgb_at(screen, 5, 5) == EMPTY_COLOR

    def test_draw_grid_snapshot_with_offset(self):
        grid = FireGrid(4, 1.0, 0.5, 0.5, seed=2)
        grid.reset()
        grid.ignite(3, 1)

        renderer = GridRenderer(2)
        screen = pygame.Surface((20, 20))
        renderer.draw(screen, grid.snapshot(), offset=(10, 0))

        assert rgb_at(screen, 10 + 3 * 2, 1 * 2) == BURNING_COLOR
        assert rgb_at(screen, 10, 0) == VEGETATION_COLOR
        assert rgb_at(screen, 0, 0) == (0, 0, 0)


class TestSpeedSlider:
    """Test cases for SpeedSlider."""

    @pytest.fixture
    def slider(self):
        return SpeedSlider(x=10, y=100, width=300, height=16, min_val=1, max_val=61)

    def test_value_from_position(self, slider):
        assert slider.handle_click(10, 105) == 1
        assert slider.handle_click(160, 105) == 31
        assert slider.handle_click(310, 105) == 61

    def test_clamped_inside_grab_margin(self, slider):
        assert slider.handle_click(0, 105) == 1
        assert slider.handle_click(325, 105) == 61

    def test_outside_slider(self, slider):
        assert slider.handle_click(160, 10) is None
        assert slider.handle_click(400, 105) is None

    def test_invalid_range(self):
        with pytest.raises(ValueError):
            SpeedSlider(0, 0, 100, 10, min_val=5, max_val=5)

    def test_draw(self, slider):
        screen = pygame.Surface((400, 200))
        slider.draw(screen, 31)
        assert rgb_at(screen, 160, 108) == BURNING_COLOR


class TestInfoPanel:
    """Test cases for InfoPanel."""

    def test_draw_panel(self):
        pygame.font.init()
        grid = FireGrid(10, 0.5, 0.5, 0.5, seed=4)
        simulator = FireSimulator(grid)
        simulator.reset()

        screen = pygame.Surface((640, 200))
        InfoPanel().draw(screen, simulator, paused=True, top=40, width=640, height=140)
        assert rgb_at(screen, 2, 42) == PANEL_COLOR
        assert rgb_at(screen, 2, 2) == (0, 0, 0)
