from __future__ import annotations

from dataclasses import dataclass

from matplotlib.colors import ListedColormap

from ..cell import CellState


@dataclass(frozen=True)
class StatePalette:
    """Colors for the four cell states.

    Values should be valid Matplotlib colors.
    """

    empty: str = "#2D1A19"
    vegetation: str = "#009933"
    burning: str = "#EA4335"
    burnt: str = "#646464"

    def color(self, state: CellState) -> str:
        return {
            CellState.Empty: self.empty,
            CellState.Vegetation: self.vegetation,
            CellState.Burning: self.burning,
            CellState.Burnt: self.burnt,
        }[state]

    def cmap(self) -> ListedColormap:
        """Colormap indexed by ``CellState`` value."""
        return ListedColormap([self.color(state) for state in CellState], name="fire_states")


DEFAULT_PALETTE = StatePalette()
