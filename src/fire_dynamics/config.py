"""Default parameters and validated configuration for a simulation run."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .exceptions import InvalidConfiguration
from .model import FireGrid, validate_probability
from .random_source import RandomSource

# ============================================================================
# DEFAULT SIMULATION PARAMETERS
# ============================================================================

DEFAULT_SIZE: int = 100                             # Cells along each side
DEFAULT_VEGETATION_PROBABILITY: float = 0.6         # Chance a cell holds vegetation
DEFAULT_IGNITION_PROBABILITY: float = 0.5           # Chance fire jumps to a neighbor
DEFAULT_BURNOUT_PROBABILITY: float = 0.3            # Chance a burning cell burns out
DEFAULT_SIM_SPEED: float = 10                       # Sweeps per second
DEFAULT_SCALE: float = 4                            # Pixels per cell


@dataclass
class SimulationConfig:
    """Parameters of one simulation run."""
    size: int = DEFAULT_SIZE
    vegetation_probability: float = DEFAULT_VEGETATION_PROBABILITY
    ignition_probability: float = DEFAULT_IGNITION_PROBABILITY
    burnout_probability: float = DEFAULT_BURNOUT_PROBABILITY
    sim_speed: float = DEFAULT_SIM_SPEED
    scale: float = DEFAULT_SCALE
    seed: Optional[int] = None

    def __post_init__(self):
        if isinstance(self.size, bool) or not isinstance(self.size, int) or self.size <= 0:
            raise InvalidConfiguration(f"size must be a positive integer, got {self.size!r}")
        self.vegetation_probability = validate_probability(
            "vegetation_probability", self.vegetation_probability
        )
        self.ignition_probability = validate_probability(
            "ignition_probability", self.ignition_probability
        )
        self.burnout_probability = validate_probability(
            "burnout_probability", self.burnout_probability
        )
        validate_positive("sim_speed", self.sim_speed)
        validate_positive("scale", self.scale)

    @classmethod
    def from_percentages(
        cls,
        vegetation: float,
        ignition: float,
        burnout: float,
        **kwargs,
    ) -> "SimulationConfig":
        """
        Build a config from probabilities given as percentages (0-100),
        the unit the UI sliders work in.
        """
        return cls(
            vegetation_probability=percent_to_probability("vegetation", vegetation),
            ignition_probability=percent_to_probability("ignition", ignition),
            burnout_probability=percent_to_probability("burnout", burnout),
            **kwargs,
        )

    def build_grid(self, random_source: RandomSource | None = None) -> FireGrid:
        """Create an unseeded FireGrid with these parameters."""
        return FireGrid(
            self.size,
            self.vegetation_probability,
            self.ignition_probability,
            self.burnout_probability,
            random_source=random_source,
            seed=self.seed,
        )


def validate_positive(name: str, value) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)) or not value > 0:
        raise InvalidConfiguration(f"{name} must be a positive number, got {value!r}")
    return float(value)


def percent_to_probability(name: str, percent: float) -> float:
    if isinstance(percent, bool) or not isinstance(percent, (int, float)) or not 0 <= percent <= 100:
        raise InvalidConfiguration(f"{name} percentage must be in [0, 100], got {percent!r}")
    return percent / 100.0
