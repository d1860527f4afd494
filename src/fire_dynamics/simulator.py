"""Driver that steps a FireGrid and tells observers about every change."""

from __future__ import annotations

import logging
from typing import Callable

from .cell import CellState
from .config import DEFAULT_SIM_SPEED, validate_positive
from .model import FireGrid

logger = logging.getLogger(__name__)

Observer = Callable[["FireSimulator"], None]


class FireSimulator:
    """Runs a fire grid one tick at a time.

    The simulator holds no timer: whoever drives it (a Pygame clock, a test,
    a console loop) decides when to call :meth:`step`, using
    :attr:`tick_interval` as a hint. Observers are called after every reset,
    step and successful ignition so renderers can redraw from the grid.

    Attributes:
        grid: The automaton being driven.
        history: Census of the grid after the last full reset and after each
            step. The last entry always matches the grid as it is now.
    """

    def __init__(self, grid: FireGrid, sim_speed: float = DEFAULT_SIM_SPEED):
        self.grid = grid
        self.sim_speed = sim_speed
        self.history: list[dict[CellState, int]] = [grid.census()]
        self._observers: list[Observer] = []
        self._extinguished = False

    @property
    def sim_speed(self) -> float:
        """Sweeps per second."""
        return self._sim_speed

    @sim_speed.setter
    def sim_speed(self, value: float) -> None:
        self._sim_speed = validate_positive("sim_speed", value)
        logger.info(f"Simulation speed set to {self._sim_speed:g} steps/s")

    @property
    def tick_interval(self) -> float:
        """Seconds between two steps at the current speed."""
        return 1.0 / self._sim_speed

    @property
    def step_count(self) -> int:
        return self.grid.steps

    @property
    def is_burning(self) -> bool:
        return self.grid.count(CellState.Burning) > 0

    def set_vegetation_probability(self, value: float) -> None:
        self.grid.vegetation_probability = value

    def set_ignition_probability(self, value: float) -> None:
        self.grid.ignition_probability = value

    def set_burnout_probability(self, value: float) -> None:
        self.grid.burnout_probability = value

    def subscribe(self, observer: Observer) -> None:
        if observer not in self._observers:
            self._observers.append(observer)

    def unsubscribe(self, observer: Observer) -> None:
        self._observers.remove(observer)

    def _notify(self) -> None:
        for observer in list(self._observers):
            observer(self)

    def reset(self, keep_fires: bool = False) -> None:
        """
        Reseed the grid.

        Args:
            keep_fires: Keep burning and burnt cells. The step count and
                history carry on in that case.
        """
        self.grid.reset(preserve_fire=keep_fires)
        if keep_fires:
            self.history[-1] = self.grid.census()
        else:
            self.history = [self.grid.census()]
        self._extinguished = False
        self._notify()

    def ignite(self, x: int, y: int) -> bool:
        """Start a fire at (x, y); observers are only told if it caught."""
        ignited = self.grid.ignite(x, y)
        if ignited:
            self._extinguished = False
            self.history[-1] = self.grid.census()
            self._notify()
        return ignited

    def step(self) -> None:
        """Advance the grid by one tick."""
        self.grid.step()
        self.history.append(self.grid.census())
        if not self.grid.running and not self._extinguished:
            self._extinguished = True
            logger.info(f"Fire extinguished after {self.step_count} steps")
        self._notify()

    def run(self, max_steps: int) -> int:
        """
        Step back-to-back until the fire is out or ``max_steps`` ticks ran.

        Returns:
            Number of ticks taken.
        """
        taken = 0
        while taken < max_steps and self.is_burning:
            self.step()
            taken += 1
        return taken
