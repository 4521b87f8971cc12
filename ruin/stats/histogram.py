"""Fixed-range histogram of final bankrolls."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import List, Sequence

import numpy as np

BIN_EDGES = (0, 10, 50, 100, 200, 500, 1000, 2000, 5000, 10000, 20000, math.inf)

# Synthetic width used to place a midpoint in the unbounded top bin.
OPEN_BIN_SPAN = 10000


@dataclass(frozen=True)
class HistogramBins:
    labels: List[str]
    counts: List[int]

    def __post_init__(self):
        if len(self.labels) != len(self.counts):
            raise ValueError("labels and counts must have the same length")

    @property
    def total(self) -> int:
        return int(sum(self.counts))

    def to_dict(self) -> dict:
        return {"labels": list(self.labels), "counts": list(self.counts)}


def bin_labels(edges: Sequence[float] = BIN_EDGES) -> List[str]:
    """Inclusive integer range labels, e.g. ``"10-49"``; the open bin ends in ``∞``."""
    labels: List[str] = []
    for low, high in zip(edges[:-1], edges[1:]):
        high_label = "∞" if math.isinf(high) else f"{int(high) - 1}"
        labels.append(f"{int(low)}-{high_label}")
    return labels


def bin_bankrolls(
    bankrolls: Sequence[float] | np.ndarray,
    edges: Sequence[float] = BIN_EDGES,
) -> HistogramBins:
    """Count bankrolls per half-open bin ``[edges[i], edges[i+1])``.

    Values below the first edge fall in no bin; final bankrolls are never
    negative so with the default edges the counts sum to the batch size.
    """
    values = np.asarray(bankrolls, dtype=np.float64)
    edge_arr = np.asarray(edges, dtype=np.float64)
    # side="right" puts a value equal to an edge in the bin that starts there.
    idx = np.searchsorted(edge_arr, values, side="right") - 1
    in_range = (idx >= 0) & (idx < edge_arr.size - 1)
    counts = np.bincount(idx[in_range], minlength=edge_arr.size - 1)
    return HistogramBins(labels=bin_labels(edges), counts=[int(c) for c in counts])


def bin_midpoints(labels: Sequence[str]) -> List[float]:
    """Representative x per bin, read back from its label.

    A label's upper number is the inclusive high value (edge - 1); the
    open top bin uses ``low + OPEN_BIN_SPAN`` as its high.
    """
    midpoints: List[float] = []
    for label in labels:
        low_text, high_text = label.split("-", 1)
        low = float(low_text)
        try:
            high = float(high_text)
        except ValueError:
            high = low + OPEN_BIN_SPAN
        midpoints.append((low + high) / 2.0)
    return midpoints


__all__ = [
    "BIN_EDGES",
    "OPEN_BIN_SPAN",
    "HistogramBins",
    "bin_labels",
    "bin_bankrolls",
    "bin_midpoints",
]
