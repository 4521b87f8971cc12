"""Gambler's-ruin simulation under alternative betting strategies."""

from ruin.sim.config import SimulationConfig
from ruin.sim.strategies import BoldPlay, FlatBet, KellyFraction
from ruin.sim.sweep import PROBABILITY_GRID, run_sweep
from ruin.stats.aggregate import ProbabilityResult, SweepResult

__all__ = [
    "SimulationConfig",
    "BoldPlay",
    "FlatBet",
    "KellyFraction",
    "PROBABILITY_GRID",
    "run_sweep",
    "ProbabilityResult",
    "SweepResult",
]
