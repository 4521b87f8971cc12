"""Sweep the win probability over 0.01..0.49 and aggregate each batch."""

from __future__ import annotations

import logging
import os
import time
from concurrent.futures import ThreadPoolExecutor
from typing import List, Optional, Sequence

import numpy as np

from ruin.sim.batch import run_batch
from ruin.sim.config import SimulationConfig
from ruin.sim.rng import spawn_rngs
from ruin.stats.aggregate import ProbabilityResult, SweepResult, aggregate_batch

logger = logging.getLogger(__name__)

# Whole-percent probabilities strictly below a fair coin.
PROBABILITY_GRID: tuple[float, ...] = tuple(i / 100 for i in range(1, 50))


def _resolve_workers(requested: int | str | None, task_count: int) -> int:
    """Translate a worker request into a concrete pool size."""
    if requested is None:
        return 1
    if isinstance(requested, int):
        return max(1, requested)
    if isinstance(requested, str) and requested.lower() != "auto":
        raise ValueError("worker hint must be 'auto' or a positive integer")
    cpu = os.cpu_count() or 1
    if task_count <= 0:
        return max(1, cpu)
    return max(1, min(cpu, task_count))


def _run_probability(
    p: float,
    config: SimulationConfig,
    rng: np.random.Generator,
) -> ProbabilityResult:
    bankrolls = run_batch(p, config.players_per_probability, config, rng)
    result = aggregate_batch(p, bankrolls, config.starting_bankroll)
    logger.debug(
        "[sweep] p=%.2f ruined=%.3f ahead=%.3f p50=%.1f avg=%.2f",
        p,
        result.fraction_ruined,
        result.fraction_positive,
        result.p50,
        result.average,
    )
    return result


def run_sweep(
    config: SimulationConfig,
    *,
    seed: Optional[int] = None,
    workers: int | str | None = None,
    probabilities: Sequence[float] = PROBABILITY_GRID,
) -> SweepResult:
    """
    Run one batch per probability and aggregate it.

    Each probability draws from its own generator spawned from ``seed``, so
    the output is identical for any ``workers`` value. Results come back in
    the order of ``probabilities``.
    """
    probs = [float(p) for p in probabilities]
    rngs = spawn_rngs(seed, len(probs))
    resolved_workers = _resolve_workers(workers, len(probs))

    logger.info(
        "[sweep] %s: %d probabilities x %d players, max_games=%d, bankroll=%g, workers=%d",
        config.strategy.display_name(),
        len(probs),
        config.players_per_probability,
        config.max_games,
        config.starting_bankroll,
        resolved_workers,
    )
    started = time.perf_counter()

    results: List[ProbabilityResult]
    if resolved_workers > 1 and len(probs) > 1:
        with ThreadPoolExecutor(max_workers=resolved_workers, thread_name_prefix="sweep") as executor:
            futures = [
                executor.submit(_run_probability, p, config, rng) for p, rng in zip(probs, rngs)
            ]
            results = [future.result() for future in futures]
    else:
        results = [_run_probability(p, config, rng) for p, rng in zip(probs, rngs)]

    logger.info("[sweep] finished in %.2fs", time.perf_counter() - started)

    return SweepResult(
        results=results,
        strategy_display_name=config.strategy.display_name(),
        starting_bankroll=config.starting_bankroll,
        players_per_probability=config.players_per_probability,
    )


__all__ = ["PROBABILITY_GRID", "run_sweep"]
