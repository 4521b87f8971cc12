from __future__ import annotations

import numpy as np

from ruin.sim.config import SimulationConfig
from ruin.sim.player import simulate_player
from ruin.sim.rng import UniformSource


def run_batch(
    p: float,
    n_players: int,
    config: SimulationConfig,
    rng: UniformSource,
) -> np.ndarray:
    """Simulate ``n_players`` independent players at win probability ``p``.

    Returns the final bankrolls in play order (unsorted), shape ``(n_players,)``.
    """
    if n_players < 0:
        raise ValueError(f"n_players must be >= 0, got {n_players}")
    out = np.empty(n_players, dtype=np.float64)
    for idx in range(n_players):
        out[idx] = simulate_player(
            config.max_games,
            p,
            config.strategy,
            config.starting_bankroll,
            rng,
        )
    return out


__all__ = ["run_batch"]
