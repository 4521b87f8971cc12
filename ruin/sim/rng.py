"""Random trial generation.

The simulator never touches a global generator. Callers pass in any object
with a ``random()`` method returning a float in [0, 1); in practice that is a
``numpy.random.Generator``. Independent per-worker streams are derived from a
single ``SeedSequence`` so a seeded sweep is reproducible however it is split.
"""

from __future__ import annotations

from typing import List, Optional, Protocol

import numpy as np


class UniformSource(Protocol):
    def random(self) -> float:
        ...


def bernoulli_trial(p: float, source: UniformSource) -> bool:
    """Return True with probability ``p``."""
    if not 0.0 <= p <= 1.0:
        raise ValueError(f"probability must be in [0, 1], got {p}")
    return source.random() < p


def make_rng(seed: Optional[int] = None) -> np.random.Generator:
    return np.random.default_rng(seed)


def spawn_rngs(seed: Optional[int], n: int) -> List[np.random.Generator]:
    """Derive ``n`` statistically independent generators from one seed."""
    if n < 0:
        raise ValueError("n must be non-negative")
    children = np.random.SeedSequence(seed).spawn(n)
    return [np.random.default_rng(child) for child in children]


__all__ = ["UniformSource", "bernoulli_trial", "make_rng", "spawn_rngs"]
