"""
Wildfire dynamics simulation using cellular automata.

A stochastic cellular automaton in which fire spreads from burning cells to
neighboring vegetation and burns out at random, updated synchronously on a
square grid.
"""

from .cell import CellState
from .config import SimulationConfig
from .exceptions import FireDynamicsError, InvalidConfiguration, OutOfBounds
from .model import FireGrid
from .random_source import RandomSource, SequenceRandomSource
from .simulator import FireSimulator

__version__ = "0.1.0"

__all__ = [
    "CellState",
    "FireGrid",
    "FireSimulator",
    "SimulationConfig",
    "RandomSource",
    "SequenceRandomSource",
    "FireDynamicsError",
    "InvalidConfiguration",
    "OutOfBounds",
]
