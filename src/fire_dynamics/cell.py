"""Cell states of the wildfire cellular automaton."""

from enum import IntEnum


class CellState(IntEnum):
    """Possible states of a grid cell.

    Integer valued so a whole grid can be held in a numpy ``int8`` array.
    """
    Empty = 0
    Vegetation = 1
    Burning = 2
    Burnt = 3

    def is_flammable(self) -> bool:
        """Return True if the cell can still be set on fire."""
        return self is CellState.Vegetation

    def is_fire(self) -> bool:
        """Return True for cells touched by fire (burning or burnt out)."""
        return self in (CellState.Burning, CellState.Burnt)
