"""Equal-width histogram binning with adaptive range detection."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

import numpy as np

from stat_curve_engine.exceptions import ParameterError

DEFAULT_BIN_COUNT = 40


@dataclass(frozen=True)
class Histogram:
    """Bin edges (``bin_count + 1``) and per-bin counts (``bin_count``).

    Bins are half-open ``[lo, hi)`` except the last, which also holds the
    maximum value.
    """

    bins: np.ndarray
    counts: np.ndarray

    @property
    def bin_count(self) -> int:
        return int(self.counts.size)

    @property
    def total(self) -> int:
        return int(self.counts.sum())

    @property
    def max_count(self) -> int:
        """Tallest bar, never below 1 so it can be used as a divisor."""
        return max(int(self.counts.max()) if self.counts.size else 0, 1)

    @property
    def degenerate(self) -> bool:
        return self.bins.size > 0 and bool(self.bins[0] == self.bins[-1])

    def to_dict(self) -> dict:
        return {"bins": self.bins.tolist(), "counts": self.counts.tolist()}


def histogram(data: Iterable[float] | np.ndarray, bin_count: int = DEFAULT_BIN_COUNT) -> Histogram:
    """Bin ``data`` into ``bin_count`` equal-width bins spanning its own range.

    All-equal data produces a degenerate histogram: every edge equals the
    shared value and all mass sits in bin 0. Empty data yields empty arrays.
    """
    if isinstance(bin_count, bool) or not isinstance(bin_count, (int, np.integer)) or bin_count < 1:
        raise ParameterError(f"bin_count must be an integer >= 1, got {bin_count!r}")

    values = np.asarray(list(data) if not isinstance(data, np.ndarray) else data, dtype=float).ravel()
    if values.size == 0:
        return Histogram(bins=np.empty(0, dtype=float), counts=np.empty(0, dtype=np.int64))

    lo = float(values.min())
    hi = float(values.max())
    counts = np.zeros(bin_count, dtype=np.int64)

    if lo == hi:
        counts[0] = values.size
        return Histogram(bins=np.full(bin_count + 1, lo, dtype=float), counts=counts)

    bins = lo + (hi - lo) * (np.arange(bin_count + 1) / bin_count)
    idx = np.floor((values - lo) / (hi - lo) * bin_count).astype(np.int64)
    # v == hi maps to bin_count; fold it into the last bin
    idx = np.clip(idx, 0, bin_count - 1)
    counts += np.bincount(idx, minlength=bin_count)
    return Histogram(bins=bins, counts=counts)


__all__ = ["Histogram", "histogram", "DEFAULT_BIN_COUNT"]
