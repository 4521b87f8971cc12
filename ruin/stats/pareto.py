"""Pareto Type-I tail fit of the winners' bankrolls.

Maximum-likelihood estimates on the strictly positive subset::

    xm    = min(x)
    alpha = n / sum(ln(x / xm))

The fit is only used to overlay an expected-count curve on the histogram, so
an undefined fit (fewer than two positive values, or all positive values
equal) is reported as ``alpha=None`` with an all-zero overlay rather than
raised.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Optional, Sequence

import numpy as np

from ruin.stats.histogram import bin_midpoints

logger = logging.getLogger(__name__)

MIN_POSITIVE_FOR_FIT = 2


@dataclass(frozen=True)
class ParetoFit:
    alpha: Optional[float]
    xm: Optional[float]
    n_positive: int

    @property
    def is_defined(self) -> bool:
        return self.alpha is not None and self.xm is not None

    def to_dict(self) -> dict:
        return {"alpha": self.alpha, "xm": self.xm, "n_positive": self.n_positive}


def fit_pareto(bankrolls: Sequence[float] | np.ndarray) -> ParetoFit:
    values = np.asarray(bankrolls, dtype=np.float64)
    positive = values[values > 0]
    n = int(positive.size)
    if n < MIN_POSITIVE_FOR_FIT:
        return ParetoFit(alpha=None, xm=None, n_positive=n)

    xm = float(positive.min())
    sum_log = float(np.log(positive / xm).sum())
    if sum_log <= 0.0:
        # Every positive value equals xm; the shape is unbounded.
        logger.debug("[pareto] degenerate sample (n=%d, all equal to xm=%.4g)", n, xm)
        return ParetoFit(alpha=None, xm=xm, n_positive=n)
    return ParetoFit(alpha=n / sum_log, xm=xm, n_positive=n)


def pareto_density(x: Sequence[float] | np.ndarray, alpha: float, xm: float) -> np.ndarray:
    """``alpha * xm**alpha / x**(alpha + 1)`` for ``x >= xm``, else 0."""
    x_arr = np.asarray(x, dtype=np.float64)
    out = np.zeros_like(x_arr)
    mask = x_arr >= xm
    # Work in log space so large alpha does not overflow xm**alpha.
    log_pdf = np.log(alpha) + alpha * np.log(xm) - (alpha + 1.0) * np.log(x_arr[mask])
    out[mask] = np.exp(log_pdf)
    return out


def pareto_overlay(
    bankrolls: Sequence[float] | np.ndarray,
    labels: Sequence[str],
    total_players: int,
) -> tuple[ParetoFit, List[float]]:
    """Fit the positive tail and return the density at each bin midpoint times ``total_players``."""
    fit = fit_pareto(bankrolls)
    if not fit.is_defined:
        return fit, [0.0] * len(labels)
    midpoints = bin_midpoints(labels)
    density = pareto_density(midpoints, fit.alpha, fit.xm) * float(total_players)
    return fit, [float(v) for v in density]


__all__ = [
    "MIN_POSITIVE_FOR_FIT",
    "ParetoFit",
    "fit_pareto",
    "pareto_density",
    "pareto_overlay",
]
