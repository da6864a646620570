"""Descriptive statistics for sample sets."""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Iterable

import numpy as np
from scipy.stats import kurtosis, skew

from stat_curve_engine.exceptions import ParameterError


@dataclass(frozen=True)
class SampleSummary:
    count: int
    mean: float
    variance: float
    std: float
    skewness: float
    excess_kurtosis: float
    minimum: float
    maximum: float

    def to_dict(self) -> dict:
        return asdict(self)


def summarize(data: Iterable[float] | np.ndarray) -> SampleSummary:
    """Mean, unbiased variance, skewness and excess kurtosis of ``data``.

    Skewness and excess kurtosis both tend to 0 for normal data, which makes
    them a quick check on how far a set of group means has converged.
    Shape statistics are NaN for constant data.
    """
    values = np.asarray(list(data) if not isinstance(data, np.ndarray) else data, dtype=float).ravel()
    if values.size == 0:
        raise ParameterError("cannot summarize an empty sample")
    variance = float(values.var(ddof=1)) if values.size > 1 else 0.0
    constant = bool(values.min() == values.max())
    return SampleSummary(
        count=int(values.size),
        mean=float(values.mean()),
        variance=variance,
        std=float(np.sqrt(variance)),
        skewness=float("nan") if constant else float(skew(values)),
        excess_kurtosis=float("nan") if constant else float(kurtosis(values, fisher=True)),
        minimum=float(values.min()),
        maximum=float(values.max()),
    )


__all__ = ["SampleSummary", "summarize"]
