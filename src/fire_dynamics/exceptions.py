"""Errors raised by the fire dynamics engine."""


class FireDynamicsError(Exception):
    """Base class for all engine errors."""


class InvalidConfiguration(FireDynamicsError, ValueError):
    """Raised for a bad grid size, probability, speed or scale."""


class OutOfBounds(FireDynamicsError, IndexError):
    """Raised when a coordinate falls outside ``[0, size)``."""

    def __init__(self, x: int, y: int, size: int):
        super().__init__(f"Cell ({x}, {y}) is outside the {size}x{size} grid")
        self.x = x
        self.y = y
        self.size = size
