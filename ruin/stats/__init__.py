"""Batch statistics: aggregation, histogram binning and Pareto tail fitting."""

from .aggregate import ProbabilityResult, SweepResult, aggregate_batch, nearest_rank_percentile
from .histogram import BIN_EDGES, HistogramBins, bin_bankrolls
from .pareto import ParetoFit, fit_pareto, pareto_overlay

__all__ = [
    "ProbabilityResult",
    "SweepResult",
    "aggregate_batch",
    "nearest_rank_percentile",
    "BIN_EDGES",
    "HistogramBins",
    "bin_bankrolls",
    "ParetoFit",
    "fit_pareto",
    "pareto_overlay",
]
