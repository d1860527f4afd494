#!/usr/bin/env python3
"""Main script to run the fire dynamics simulation in the console."""

import logging
import sys
from pathlib import Path

# Add the src directory to the Python path
project_root = Path(__file__).parent.parent
src_path = project_root / "src"
sys.path.insert(0, str(src_path))

from fire_dynamics import CellState, FireSimulator, SimulationConfig

SYMBOLS = {
    CellState.Empty: "⬜",
    CellState.Vegetation: "🌲",
    CellState.Burning: "🔥",
    CellState.Burnt: "⬛",
}


def print_grid(simulator: FireSimulator) -> None:
    """
    Print a simple representation of the grid to console.

    Args:
        simulator: The simulator whose grid should be printed
    """
    grid = simulator.grid
    grid_str = ""
    for y in range(grid.size):
        for x in range(grid.size):
            grid_str += SYMBOLS[grid.state_at(x, y)]
        grid_str += "\n"
    print(grid_str)


def main():
    """Run the fire dynamics simulation."""
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s [%(levelname)s] %(message)s",
    )

    # Simulation parameters
    STEPS = 50
    config = SimulationConfig(
        size=15,
        vegetation_probability=0.7,
        ignition_probability=0.4,
        burnout_probability=0.3,
        seed=42,
    )

    print("--- CREATING GRID ---")
    simulator = FireSimulator(config.build_grid(), sim_speed=config.sim_speed)
    simulator.reset()

    # Set starting fire point
    x_start = y_start = config.size // 2
    if simulator.ignite(x_start, y_start):
        print(f"Ignited cell at position ({x_start}, {y_start})")
    else:
        print("Cannot ignite starting cell.")
        return

    print("--- INITIAL STATE (AFTER IGNITION) ---")
    print_grid(simulator)

    # Main simulation loop
    for i in range(STEPS):
        print(f"\n--- STEP {i + 1} ---")
        simulator.step()
        print_grid(simulator)

        if not simulator.is_burning:
            print("\nFire has been extinguished.")
            break

    census = simulator.grid.census()
    print(", ".join(f"{state.name}: {count}" for state, count in census.items()))


if __name__ == "__main__":
    main()
