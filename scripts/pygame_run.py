#!/usr/bin/env python3
"""Pygame visualization launcher for the fire dynamics simulation.

This script provides an interactive Pygame-based visualization of the
stochastic cellular automaton. Click on the grid to start a fire; the
keyboard and the speed slider control the run.

Usage:
    python scripts/pygame_run.py
"""

import logging
import sys
from pathlib import Path

import pygame

# Add the src directory to the Python path
project_root = Path(__file__).parent.parent
src_path = project_root / "src"
sys.path.insert(0, str(src_path))

from fire_dynamics import FireSimulator, SimulationConfig

from visualization import (
    GridRenderer,
    InfoPanel,
    SpeedSlider,
    BLACK,
    PANEL_HEIGHT,
    MIN_FPS,
    MAX_FPS,
)

logger = logging.getLogger(__name__)


class SimulationRunner:
    """Main simulation runner with Pygame visualization.

    Owns the frame loop: it decides when the simulator steps (at
    ``sim_speed`` steps per second), translates clicks into cell
    coordinates and redraws whenever the simulator reports a change.

    Attributes:
        simulator: The fire dynamics driver.
        renderer: Grid renderer (also handles zoom and click translation).
        info_panel: UI panel for displaying simulation info.
        slider: Speed control slider.
        paused: Whether the simulation is paused.
        dragging_slider: Whether the user is dragging the speed slider.
    """

    def __init__(self, config: SimulationConfig) -> None:
        pygame.init()
        pygame.display.set_caption("Wildfire Dynamics")
        self.clock = pygame.time.Clock()

        self.config = config
        self.simulator = FireSimulator(config.build_grid(), sim_speed=config.sim_speed)
        self.renderer = GridRenderer(config.scale)
        self._resize_window()

        self.info_panel = InfoPanel()
        self.paused = True
        self.dragging_slider = False
        self.dirty = True
        self.simulator.subscribe(self._mark_dirty)
        self.simulator.reset()

    def _mark_dirty(self, simulator: FireSimulator) -> None:
        self.dirty = True

    def _resize_window(self) -> None:
        """Fit the window to the grid at the current zoom."""
        grid_w, grid_h = self.renderer.surface_size(self.simulator.grid.size)
        self.window_width = max(grid_w, 640)
        self.grid_height = grid_h
        self.screen = pygame.display.set_mode((self.window_width, grid_h + PANEL_HEIGHT))
        self.slider = SpeedSlider(
            x=10,
            y=grid_h + 100,
            width=300,
            height=16,
            min_val=MIN_FPS,
            max_val=MAX_FPS,
        )
        self.dirty = True

    def _handle_keyboard_events(self, event: pygame.event.Event) -> bool:
        """Handle keyboard input events.

        Returns:
            False if the simulation should quit, True otherwise.
        """
        if event.key == pygame.K_ESCAPE:
            return False

        elif event.key == pygame.K_SPACE:
            self.paused = not self.paused

        elif event.key == pygame.K_r:
            self.simulator.reset()
            self.paused = True

        elif event.key == pygame.K_k:
            self.simulator.reset(keep_fires=True)

        elif event.key in (pygame.K_PLUS, pygame.K_EQUALS, pygame.K_KP_PLUS):
            self.renderer.zoom_in()
            self._resize_window()

        elif event.key in (pygame.K_MINUS, pygame.K_KP_MINUS):
            self.renderer.zoom_out()
            self._resize_window()

        return True

    def _handle_mouse_events(self, event: pygame.event.Event) -> None:
        """Handle clicks on the grid and slider interaction."""
        if event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            new_speed = self.slider.handle_click(*event.pos)
            if new_speed is not None:
                self.dragging_slider = True
                self.simulator.sim_speed = new_speed
                self.dirty = True
                return

            cell = self.renderer.pixel_to_cell(*event.pos, self.simulator.grid.size)
            if cell is not None:
                self.simulator.ignite(*cell)

        elif event.type == pygame.MOUSEBUTTONUP and event.button == 1:
            self.dragging_slider = False

        elif event.type == pygame.MOUSEMOTION and self.dragging_slider:
            new_speed = self.slider.handle_click(*event.pos)
            if new_speed is not None:
                self.simulator.sim_speed = new_speed
                self.dirty = True

    def _render(self) -> None:
        """Render all visual components to the screen."""
        self.screen.fill(BLACK)
        self.renderer.draw(self.screen, self.simulator.grid.snapshot())
        self.info_panel.draw(
            self.screen,
            self.simulator,
            self.paused,
            self.grid_height,
            self.window_width,
            PANEL_HEIGHT,
        )
        self.slider.draw(self.screen, self.simulator.sim_speed)
        pygame.display.flip()
        self.dirty = False

    def run(self) -> None:
        """Run the main loop until the user quits."""
        running = True
        since_step = 0.0

        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN:
                    running = self._handle_keyboard_events(event)
                else:
                    self._handle_mouse_events(event)

            since_step += self.clock.tick(MAX_FPS) / 1000.0
            if not self.paused and self.simulator.is_burning and since_step >= self.simulator.tick_interval:
                self.simulator.step()
                since_step = 0.0

            if self.dirty:
                self._render()

        pygame.quit()


def main() -> None:
    """Main entry point for the Pygame visualization."""
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s [%(levelname)s] %(message)s",
    )
    config = SimulationConfig(size=150, scale=4)
    logger.info(f"Starting interactive run with {config}")
    SimulationRunner(config).run()


if __name__ == "__main__":
    main()
