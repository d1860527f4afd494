"""Sources of uniform random draws for the automaton.

Anything with a ``random()`` method returning a float in [0, 1) can drive
a :class:`~fire_dynamics.model.FireGrid`, including :class:`random.Random`.
"""

from __future__ import annotations

from itertools import cycle
from typing import Iterable, Protocol, runtime_checkable

from .exceptions import InvalidConfiguration


@runtime_checkable
class RandomSource(Protocol):
    """Supplies uniform draws in [0, 1)."""

    def random(self) -> float:
        ...


class SequenceRandomSource:
    """Replays a fixed sequence of draws, starting over when exhausted.

    Useful in tests where the outcome of every trial has to be known in
    advance.

    Attributes:
        draws: Number of values handed out so far.
    """

    def __init__(self, values: Iterable[float]):
        """
        Args:
            values: Draws to replay, each in [0, 1). Must not be empty.
        """
        self.values = [float(v) for v in values]
        if not self.values:
            raise InvalidConfiguration("SequenceRandomSource needs at least one value")
        for value in self.values:
            if not 0.0 <= value < 1.0:
                raise InvalidConfiguration(f"Draw {value} is outside [0, 1)")
        self._values = cycle(self.values)
        self.draws = 0

    def random(self) -> float:
        self.draws += 1
        return next(self._values)
