"""UI components for the fire dynamics visualization.

This module contains interactive UI elements like the info panel
showing simulation status and the speed control slider.
"""

from typing import TYPE_CHECKING, Optional

import pygame

from fire_dynamics.cell import CellState
from .colors import BURNING_COLOR, PANEL_COLOR, WHITE

if TYPE_CHECKING:
    from fire_dynamics.simulator import FireSimulator


class InfoPanel:
    """Displays simulation information below the grid.

    Shows the step number, run status, speed, the three probabilities,
    cell counts and keyboard shortcuts.

    Attributes:
        font: Main font for primary information.
        small_font: Smaller font for secondary information.
    """

    SHORTCUTS = (
        "SPACE = Pause / Resume",
        "R = Reset   K = Reset, keep fires",
        "+ / - = Zoom   Click = Ignite",
        "ESC = Quit",
    )

    def __init__(self) -> None:
        """Initialize the info panel with fonts."""
        self.font = pygame.font.Font(None, 26)
        self.small_font = pygame.font.Font(None, 20)

    def draw(
        self,
        screen: pygame.Surface,
        simulator: "FireSimulator",
        paused: bool,
        top: int,
        width: int,
        height: int,
    ) -> None:
        """Draw the panel in the band starting at ``top``."""
        pygame.draw.rect(screen, PANEL_COLOR, (0, top, width, height))

        grid = simulator.grid
        status = "PAUSED" if paused else ("RUNNING" if simulator.is_burning else "NO FIRE")
        step_text = self.font.render(f"Step: {simulator.step_count}   {status}", True, WHITE)
        screen.blit(step_text, (10, top + 8))

        speed_text = self.small_font.render(f"Speed: {simulator.sim_speed:g} steps/s", True, WHITE)
        screen.blit(speed_text, (10, top + 34))

        probs = (
            f"Vegetation {grid.vegetation_probability:.0%}  "
            f"Ignition {grid.ignition_probability:.0%}  "
            f"Burnout {grid.burnout_probability:.0%}"
        )
        screen.blit(self.small_font.render(probs, True, WHITE), (10, top + 54))

        census = grid.census()
        counts = "  ".join(f"{state.name}: {census[state]}" for state in CellState)
        screen.blit(self.small_font.render(counts, True, WHITE), (10, top + 74))

        for i, line in enumerate(self.SHORTCUTS):
            rendered = self.small_font.render(line, True, WHITE)
            screen.blit(rendered, (width - rendered.get_width() - 10, top + 8 + i * 20))


class SpeedSlider:
    """Interactive slider for controlling simulation speed.

    Allows the user to adjust the steps per second by clicking
    and dragging a circular handle along a horizontal bar.

    Attributes:
        x: X coordinate of the slider's left edge.
        y: Y coordinate of the slider's top edge.
        width: Width of the slider bar in pixels.
        height: Height of the slider bar in pixels.
        min_val: Minimum value (steps per second).
        max_val: Maximum value (steps per second).
    """

    def __init__(
        self,
        x: int,
        y: int,
        width: int,
        height: int,
        min_val: int,
        max_val: int
    ) -> None:
        if max_val <= min_val:
            raise ValueError(f"max_val ({max_val}) must be greater than min_val ({min_val})")
        self.x = x
        self.y = y
        self.width = width
        self.height = height
        self.min_val = min_val
        self.max_val = max_val

    def draw(self, screen: pygame.Surface, current_val: float) -> None:
        """Draw the bar and a handle at ``current_val``."""
        bar_rect = pygame.Rect(self.x, self.y, self.width, self.height)
        pygame.draw.rect(screen, (20, 20, 20), bar_rect, border_radius=6)
        pygame.draw.rect(screen, (70, 70, 70), bar_rect, 2, border_radius=6)

        ratio = (current_val - self.min_val) / (self.max_val - self.min_val)
        ratio = max(0.0, min(1.0, ratio))
        handle_x = self.x + int(ratio * self.width)
        handle_y = self.y + self.height // 2
        pygame.draw.circle(screen, BURNING_COLOR, (handle_x, handle_y), self.height // 2 + 4)

    def handle_click(self, mouse_x: int, mouse_y: int) -> Optional[int]:
        """Value under the mouse, used for both click + drag.

        Returns:
            The new value clamped to [min_val, max_val], or None if the mouse
            is not over the slider.
        """
        # easier grab area (more forgiving)
        grab_margin = 20
        if not (self.x - grab_margin <= mouse_x <= self.x + self.width + grab_margin):
            return None
        if not (self.y - grab_margin <= mouse_y <= self.y + self.height + grab_margin):
            return None

        ratio = (mouse_x - self.x) / self.width
        new_val = self.min_val + ratio * (self.max_val - self.min_val)

        return max(self.min_val, min(self.max_val, int(round(new_val))))
