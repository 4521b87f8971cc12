"""Histogram plus Pareto overlay for one swept probability."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List

from ruin.stats.aggregate import ProbabilityResult, SweepResult
from ruin.stats.histogram import HistogramBins, bin_bankrolls
from ruin.stats.pareto import ParetoFit, pareto_overlay


@dataclass(frozen=True)
class DistributionView:
    p: float
    variance: float
    histogram: HistogramBins
    pareto: ParetoFit
    pareto_counts: List[float]

    @property
    def title(self) -> str:
        return f"Win Probability (p): {self.p:.2f} (variance = {self.variance:.3f})"

    def to_dict(self) -> dict:
        return {
            "p": round(self.p, 2),
            "variance": round(self.variance, 6),
            "title": self.title,
            "labels": list(self.histogram.labels),
            "counts": list(self.histogram.counts),
            "pareto": self.pareto.to_dict(),
            "pareto_counts": list(self.pareto_counts),
        }


def build_distribution(result: ProbabilityResult, total_players: int | None = None) -> DistributionView:
    total = result.n_players if total_players is None else int(total_players)
    histogram = bin_bankrolls(result.final_bankrolls)
    fit, overlay = pareto_overlay(result.final_bankrolls, histogram.labels, total)
    return DistributionView(
        p=result.p,
        variance=result.variance,
        histogram=histogram,
        pareto=fit,
        pareto_counts=overlay,
    )


def distribution_at(sweep: SweepResult, index: int) -> DistributionView:
    """Distribution view for the ``index``-th probability of a sweep."""
    if not 0 <= index < len(sweep):
        raise IndexError(f"probability index {index} out of range [0, {len(sweep) - 1}]")
    return build_distribution(sweep[index], sweep.players_per_probability or None)


__all__ = ["DistributionView", "build_distribution", "distribution_at"]
