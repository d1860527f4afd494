#!/usr/bin/env python3
"""Headless run that saves the final grid and burn history as a PNG."""

from __future__ import annotations

import logging
import sys
from pathlib import Path

import matplotlib

matplotlib.use("Agg")

# Ensure src/ is on path when running from repo root
REPO_ROOT = Path(__file__).resolve().parents[1]
SRC_PATH = REPO_ROOT / "src"
if str(SRC_PATH) not in sys.path:
    sys.path.insert(0, str(SRC_PATH))

from fire_dynamics import FireSimulator, SimulationConfig
from fire_dynamics.visualisation import GridVisualizer


# --- Simple config (edit these values if you want different outputs) ---
OUT_DIR = REPO_ROOT / "_outputs"
MAX_STEPS = 500
CONFIG = SimulationConfig(
    size=200,
    vegetation_probability=0.65,
    ignition_probability=0.45,
    burnout_probability=0.35,
    seed=7,
)


def main() -> None:
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s [%(levelname)s] %(message)s",
    )
    OUT_DIR.mkdir(parents=True, exist_ok=True)

    simulator = FireSimulator(CONFIG.build_grid())
    simulator.reset()
    centre = CONFIG.size // 2
    if not simulator.ignite(centre, centre):
        # Fall back to the nearest vegetation cell to the centre.
        grid = simulator.grid
        candidates = sorted(
            ((x, y) for x in range(grid.size) for y in range(grid.size) if grid.state_at(x, y).is_flammable()),
            key=lambda c: (c[0] - centre) ** 2 + (c[1] - centre) ** 2,
        )
        if not candidates:
            raise SystemExit("Grid holds no vegetation; nothing to burn.")
        simulator.ignite(*candidates[0])

    steps = simulator.run(MAX_STEPS)

    viz = GridVisualizer()
    fig = viz.plot_run(simulator.grid.snapshot(), simulator.history)
    out_path = OUT_DIR / f"run_seed{CONFIG.seed}_step{steps}.png"
    viz.save(fig, str(out_path))
    print(f"Saved: {out_path}")


if __name__ == "__main__":
    main()
