"""Per-probability summary statistics over a batch of final bankrolls."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import List, Sequence

import numpy as np
import pandas as pd

PERCENTILES = (0.50, 0.90, 0.99)

SERIES_FIELDS = (
    "variance",
    "fraction_positive",
    "fraction_ruined",
    "p50",
    "p90",
    "p99",
    "average",
)


@dataclass(frozen=True)
class ProbabilityResult:
    """Aggregate outcome of one batch at a fixed win probability."""

    p: float
    variance: float  # 4 p (1 - p), the per-round variance of a unit even-money bet
    fraction_positive: float  # ended strictly above the starting bankroll
    fraction_ruined: float  # ended at exactly zero
    p50: float
    p90: float
    p99: float
    average: float
    final_bankrolls: np.ndarray = field(repr=False)  # sorted ascending

    @property
    def n_players(self) -> int:
        return int(self.final_bankrolls.size)

    def to_dict(self, include_bankrolls: bool = False) -> dict:
        payload = {
            "p": round(self.p, 2),
            "variance": round(self.variance, 6),
            "fraction_positive": self.fraction_positive,
            "fraction_ruined": self.fraction_ruined,
            "p50": self.p50,
            "p90": self.p90,
            "p99": self.p99,
            "average": self.average,
            "n_players": self.n_players,
        }
        if include_bankrolls:
            payload["final_bankrolls"] = self.final_bankrolls.tolist()
        return payload


@dataclass
class SweepResult:
    """One ProbabilityResult per swept p, ordered by increasing p."""

    results: List[ProbabilityResult] = field(default_factory=list)
    strategy_display_name: str = ""
    starting_bankroll: float = 0.0
    players_per_probability: int = 0

    def __len__(self) -> int:
        return len(self.results)

    def __iter__(self):
        return iter(self.results)

    def __getitem__(self, index: int) -> ProbabilityResult:
        return self.results[index]

    @property
    def probabilities(self) -> List[float]:
        return [r.p for r in self.results]

    def series(self, name: str) -> List[float]:
        """Per-p values of one summary field, as plotted on the line charts."""
        if name not in SERIES_FIELDS:
            raise KeyError(f"Unknown series {name!r}. Available: {list(SERIES_FIELDS)}")
        return [float(getattr(r, name)) for r in self.results]

    def to_frame(self) -> pd.DataFrame:
        rows = [r.to_dict(include_bankrolls=False) for r in self.results]
        columns = ["p", *SERIES_FIELDS, "n_players"]
        return pd.DataFrame(rows, columns=columns)


def nearest_rank_percentile(sorted_values: Sequence[float] | np.ndarray, q: float) -> float:
    """Value at zero-based index ``floor(q * (n - 1))`` of ascending data."""
    arr = np.asarray(sorted_values)
    n = arr.size
    if n == 0:
        raise ValueError("percentile of an empty batch is undefined")
    if not 0.0 <= q <= 1.0:
        raise ValueError(f"q must be in [0, 1], got {q}")
    return float(arr[int(math.floor(q * (n - 1)))])


def aggregate_batch(
    p: float,
    bankrolls: Sequence[float] | np.ndarray,
    starting_bankroll: float,
) -> ProbabilityResult:
    """Summarize one batch. The input is copied and sorted; it is not mutated."""
    values = np.sort(np.asarray(bankrolls, dtype=np.float64))
    n = values.size
    if n == 0:
        raise ValueError("cannot aggregate an empty batch")

    p50, p90, p99 = (nearest_rank_percentile(values, q) for q in PERCENTILES)

    return ProbabilityResult(
        p=p,
        variance=4.0 * p * (1.0 - p),
        fraction_positive=float(np.count_nonzero(values > starting_bankroll)) / n,
        fraction_ruined=float(np.count_nonzero(values == 0)) / n,
        p50=p50,
        p90=p90,
        p99=p99,
        average=float(values.sum()) / n,
        final_bankrolls=values,
    )


__all__ = [
    "PERCENTILES",
    "SERIES_FIELDS",
    "ProbabilityResult",
    "SweepResult",
    "nearest_rank_percentile",
    "aggregate_batch",
]
