"""Simulation engine: headless runs over the sparse field."""

from sparse_life.simulation.engine import SimulationResult, run_simulation

__all__ = ["SimulationResult", "run_simulation"]
