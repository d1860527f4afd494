"""Fire spread model implementation."""

from __future__ import annotations

import logging
import math
from numbers import Real

import numpy as np
from mesa import Model

from .cell import CellState
from .exceptions import InvalidConfiguration, OutOfBounds
from .random_source import RandomSource

logger = logging.getLogger(__name__)


def validate_probability(name: str, value) -> float:
    """Return ``value`` as a float, raising if it is not in [0, 1]."""
    if isinstance(value, bool) or not isinstance(value, Real):
        raise InvalidConfiguration(f"{name} must be a number, got {value!r}")
    value = float(value)
    if math.isnan(value) or not 0.0 <= value <= 1.0:
        raise InvalidConfiguration(f"{name} must be in [0, 1], got {value}")
    return value


class FireGrid(Model):
    """Stochastic cellular automaton of wildfire spread on a square grid.

    Cells are stored in two numpy arrays indexed ``[x, y]``: ``current`` is
    the state visible to callers and ``next`` is the snapshot of the
    previous step that every transition of a sweep reads from. Fire spreads
    through the Moore neighborhood; the grid does not wrap around.
    """

    def __init__(
        self,
        size: int,
        vegetation_probability: float,
        ignition_probability: float,
        burnout_probability: float,
        *,
        random_source: RandomSource | None = None,
        seed: int | None = None,
    ):
        """
        Initialize an all-empty fire grid.

        Args:
            size: Number of cells along each side of the grid.
            vegetation_probability: Chance that ``reset`` plants vegetation in a cell.
            ignition_probability: Chance that a burning cell ignites one
                vegetation neighbor in a sweep.
            burnout_probability: Chance that a burning cell burns out in a sweep.
            random_source: Source of uniform draws. Defaults to the model's
                own ``random`` generator.
            seed: Seed for the model's ``random`` generator.
        """
        if isinstance(size, bool) or not isinstance(size, int) or size <= 0:
            raise InvalidConfiguration(f"size must be a positive integer, got {size!r}")

        super().__init__(seed=seed)
        self.size = size
        self.vegetation_probability = vegetation_probability
        self.ignition_probability = ignition_probability
        self.burnout_probability = burnout_probability
        self.random_source = random_source if random_source is not None else self.random

        self.current = np.full((size, size), CellState.Empty, dtype=np.int8)
        self.next = np.full((size, size), CellState.Empty, dtype=np.int8)

    @property
    def vegetation_probability(self) -> float:
        return self._vegetation_probability

    @vegetation_probability.setter
    def vegetation_probability(self, value: float) -> None:
        self._vegetation_probability = validate_probability("vegetation_probability", value)

    @property
    def ignition_probability(self) -> float:
        return self._ignition_probability

    @ignition_probability.setter
    def ignition_probability(self, value: float) -> None:
        self._ignition_probability = validate_probability("ignition_probability", value)

    @property
    def burnout_probability(self) -> float:
        return self._burnout_probability

    @burnout_probability.setter
    def burnout_probability(self, value: float) -> None:
        self._burnout_probability = validate_probability("burnout_probability", value)

    def reset(self, preserve_fire: bool = False) -> None:
        """
        Seed the grid with vegetation.

        Cells are visited row by row (``x`` outer, ``y`` inner) and each one
        takes a single draw: below ``vegetation_probability`` it becomes
        vegetation, otherwise empty.

        Args:
            preserve_fire: Leave burning and burnt cells as they are (no draw
                is taken for them).
        """
        draw = self.random_source.random
        for x in range(self.size):
            for y in range(self.size):
                if preserve_fire and CellState(self.current[x, y]).is_fire():
                    continue
                if draw() < self.vegetation_probability:
                    self.current[x, y] = CellState.Vegetation
                else:
                    self.current[x, y] = CellState.Empty

        if not preserve_fire:
            self.steps = 0
        self.running = True
        logger.info(
            f"Grid reset (preserve_fire={preserve_fire}): "
            f"{self.count(CellState.Vegetation)} vegetation cells"
        )

    def ignite(self, x: int, y: int) -> bool:
        """
        Set a vegetation cell on fire.

        Returns:
            True if the cell was vegetation and is now burning, False otherwise.

        Raises:
            OutOfBounds: if (x, y) is not on the grid.
        """
        self._check_bounds(x, y)
        if self.current[x, y] != CellState.Vegetation:
            return False
        self.current[x, y] = CellState.Burning
        self.running = True
        return True

    def sweep(self) -> None:
        """
        Advance the automaton by one synchronous time step.

        The current state is first copied into ``next``; every transition is
        then decided from ``next`` alone, so the order cells are visited in
        does not change which rules apply.
        """
        np.copyto(self.next, self.current)
        draw = self.random_source.random
        ignited = 0
        burnt_out = 0

        burning = np.argwhere(self.next == CellState.Burning)
        for x, y in burning:
            x, y = int(x), int(y)
            # One trial per burning neighbor: a cell next to several fires
            # gets several chances to ignite.
            for i, j in self._neighborhood(x, y):
                if self.next[i, j] == CellState.Vegetation and draw() < self.ignition_probability:
                    if self.current[i, j] != CellState.Burning:
                        ignited += 1
                    self.current[i, j] = CellState.Burning

            if draw() < self.burnout_probability:
                self.current[x, y] = CellState.Burnt
                burnt_out += 1

        logger.debug(
            f"Sweep: {len(burning)} burning, {ignited} newly ignited, {burnt_out} burnt out"
        )

    def step(self) -> None:
        """Run one sweep and stop the model once no cell is burning."""
        self.sweep()
        self.running = bool(np.any(self.current == CellState.Burning))

    def _neighborhood(self, x: int, y: int):
        """Yield the Moore neighbors of (x, y) that lie on the grid."""
        for i in range(x - 1, x + 2):
            for j in range(y - 1, y + 2):
                if (i, j) == (x, y):
                    continue
                if 0 <= i < self.size and 0 <= j < self.size:
                    yield i, j

    def _check_bounds(self, x: int, y: int) -> None:
        if not (0 <= x < self.size and 0 <= y < self.size):
            raise OutOfBounds(x, y, self.size)

    def state_at(self, x: int, y: int) -> CellState:
        """Return the state of cell (x, y)."""
        self._check_bounds(x, y)
        return CellState(int(self.current[x, y]))

    def snapshot(self) -> np.ndarray:
        """Return a copy of the current state for drawing."""
        return self.current.copy()

    def count(self, state: CellState) -> int:
        return int(np.count_nonzero(self.current == state))

    def census(self) -> dict[CellState, int]:
        """Number of cells in each state."""
        counts = np.bincount(self.current.ravel(), minlength=len(CellState))
        return {state: int(counts[state]) for state in CellState}

    def burning_cells(self) -> list[tuple[int, int]]:
        return [(int(x), int(y)) for x, y in np.argwhere(self.current == CellState.Burning)]

    def __str__(self) -> str:
        counts = ", ".join(f"{state.name}={n}" for state, n in self.census().items())
        return f"FireGrid(size={self.size}, step={self.steps}, {counts})"
