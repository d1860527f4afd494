from __future__ import annotations

from typing import Any, Iterable, Literal, Mapping

import matplotlib.pyplot as plt
import numpy as np
from matplotlib.patches import Patch

from ..cell import CellState
from .palettes import DEFAULT_PALETTE, StatePalette


def as_state_grid(grid: Any, *, name: str = "snapshot") -> np.ndarray:
    """Coerce input to a square 2D array of cell state values.

    - Accepts list-likes or numpy arrays indexed ``[x, y]``.
    - Returns a view/copy as needed.
    """

    array = np.asarray(grid)
    if array.ndim != 2 or array.shape[0] != array.shape[1]:
        raise ValueError(f"{name} must be a square 2D array. Got shape={array.shape}.")
    if array.size and (array.min() < 0 or array.max() >= len(CellState)):
        raise ValueError(f"{name} holds values that are not cell states.")
    return array


class GridVisualizer:
    """Small helper to render fire grids with Matplotlib.

    Designed for *easy* PNG generation of a run: one panel with the state
    of the grid at a given step, one with the number of cells per state
    over time.

    Notes:
    - Snapshots are indexed ``[x, y]`` like ``FireGrid.current``; they are
      transposed before plotting so ``x`` runs along the horizontal axis.
    """

    def __init__(
        self,
        *,
        palette: StatePalette = DEFAULT_PALETTE,
        origin: Literal["upper", "lower"] = "upper",
    ) -> None:
        self.palette = palette
        self.origin = origin

    def plot_snapshot(
        self,
        snapshot: Any,
        *,
        title: str = "Fire grid",
        legend: bool = True,
        show_axes: bool = True,
        tick_step: int = 0,
        ax: Any | None = None,
    ) -> Any:
        """Plot the state of every cell."""

        grid = as_state_grid(snapshot)

        if ax is None:
            _, ax = plt.subplots(1, 1, figsize=(6, 6))

        ax.imshow(
            grid.T,
            cmap=self.palette.cmap(),
            vmin=0,
            vmax=len(CellState) - 1,
            origin=self.origin,
            interpolation="nearest",
        )
        ax.set_title(title)

        if legend:
            handles = [Patch(color=self.palette.color(state), label=state.name) for state in CellState]
            ax.legend(handles=handles, loc="upper right", fontsize=8, framealpha=0.8)

        if not show_axes:
            ax.set_xticks([])
            ax.set_yticks([])
        elif tick_step > 0:
            size = grid.shape[0]
            ax.set_xticks(np.arange(0, size + 1, tick_step))
            ax.set_yticks(np.arange(0, size + 1, tick_step))
            ax.tick_params(axis="both", labelsize=9)
        return ax

    def plot_history(
        self,
        history: Iterable[Mapping[CellState, int]],
        *,
        states: Iterable[CellState] = (CellState.Vegetation, CellState.Burning, CellState.Burnt),
        title: str = "Cells per state",
        ax: Any | None = None,
    ) -> Any:
        """Plot the number of cells in each state at every step."""

        records = list(history)
        if not records:
            raise ValueError("history is empty")

        if ax is None:
            _, ax = plt.subplots(1, 1, figsize=(7, 4))

        steps = np.arange(len(records))
        for state in states:
            counts = [record.get(state, 0) for record in records]
            ax.plot(steps, counts, color=self.palette.color(state), label=state.name)

        ax.set_title(title)
        ax.set_xlabel("Step")
        ax.set_ylabel("Cells")
        ax.legend(fontsize=8)
        return ax

    def plot_run(self, snapshot: Any, history: Iterable[Mapping[CellState, int]]) -> Any:
        """Snapshot and history side by side. Returns the figure."""

        fig, axes = plt.subplots(1, 2, figsize=(13, 5))
        self.plot_snapshot(snapshot, ax=axes[0])
        self.plot_history(history, ax=axes[1])
        fig.tight_layout()
        return fig

    def save(self, fig: Any, path: str, *, dpi: int = 150) -> None:
        """Save a Matplotlib figure to disk."""

        fig.savefig(path, dpi=dpi, bbox_inches="tight")
