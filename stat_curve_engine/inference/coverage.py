"""Monte Carlo coverage of repeated confidence intervals."""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Iterable, List, Tuple

import numpy as np

from stat_curve_engine.distributions.models import Normal
from stat_curve_engine.inference.critical import critical_z
from stat_curve_engine.inference.ztest import standard_error
from stat_curve_engine.interfaces.random_source import UniformSource
from stat_curve_engine.mc.generator import generate_samples
from stat_curve_engine.utils.logging import get_logger

log = get_logger(__name__, component="coverage")


@dataclass(frozen=True)
class CoverageResult:
    covered: int
    missed: int
    total: int
    z: float
    standard_error: float

    @property
    def fraction(self) -> float:
        return self.covered / self.total if self.total else 0.0

    def to_dict(self) -> dict:
        payload = asdict(self)
        payload["fraction"] = self.fraction
        return payload


def confidence_intervals(means: Iterable[float], z: float, se: float) -> List[Tuple[float, float]]:
    return [(m - z * se, m + z * se) for m in np.asarray(list(means), dtype=float).tolist()]


def interval_coverage(means: Iterable[float], z: float, se: float, true_mean: float = 0.0) -> CoverageResult:
    """Count intervals ``[m - z*se, m + z*se]`` that contain ``true_mean`` (bounds inclusive)."""
    intervals = confidence_intervals(means, z, se)
    covered = sum(1 for lo, hi in intervals if lo <= true_mean <= hi)
    return CoverageResult(
        covered=covered,
        missed=len(intervals) - covered,
        total=len(intervals),
        z=z,
        standard_error=se,
    )


def simulate_coverage(
    confidence: float,
    sample_count: int,
    sample_size: int,
    source: UniformSource | int | None = None,
) -> tuple[CoverageResult, np.ndarray]:
    """Draw standard-normal sample means and report how many intervals cover 0.

    Returns the coverage and the simulated means. Over many repetitions the
    covered fraction approaches ``confidence / 100``.
    """
    z = critical_z(confidence, "two")
    se = standard_error(1.0, sample_size)
    result = generate_samples(Normal(0.0, 1.0), sample_count, sample_size, source)
    coverage = interval_coverage(result.means, z, se, true_mean=0.0)
    log.info(
        "Coverage simulated",
        extra={"sample_count": sample_count, "sample_size": sample_size, "fraction": coverage.fraction},
    )
    return coverage, result.means


__all__ = ["CoverageResult", "confidence_intervals", "interval_coverage", "simulate_coverage"]
