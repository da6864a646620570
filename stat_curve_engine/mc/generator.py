"""Monte Carlo sample generator for central-limit-theorem runs."""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from stat_curve_engine.distributions.models import DistributionSpec
from stat_curve_engine.interfaces.random_source import UniformSource, as_source
from stat_curve_engine.sampling.dispatch import Sampler, get_sampler
from stat_curve_engine.utils.logging import get_logger
from stat_curve_engine.utils.profiling import track_time
from stat_curve_engine.utils.resources import MAX_VARIATES, enforce_work_limit, require_count

log = get_logger(__name__, component="mc_generator")


@dataclass(frozen=True)
class SampleResult:
    raw: np.ndarray
    means: np.ndarray
    sample_count: int
    sample_size: int

    def groups(self) -> np.ndarray:
        """Raw variates reshaped to ``(sample_count, sample_size)``."""
        return self.raw.reshape(self.sample_count, self.sample_size)


def generate_samples(
    distribution: DistributionSpec | Sampler,
    sample_count: int,
    sample_size: int,
    source: UniformSource | int | None = None,
    *,
    max_variates: int = MAX_VARIATES,
) -> SampleResult:
    """Draw ``sample_count`` groups of ``sample_size`` variates and average each group.

    As ``sample_size`` grows the distribution of ``means`` approaches a normal
    curve whatever the parent family.

    Args:
        distribution: a distribution variant, or a bare sampler taking a source.
        sample_count: number of groups (length of ``means``).
        sample_size: variates per group.
        source: uniform source, int seed or None for an unseeded generator.
        max_variates: cap on ``sample_count * sample_size``.

    Raises:
        ParameterError: when counts are not integers >= 1.
        ResourceLimitError: when the run would exceed ``max_variates``.
    """

    sample_count = require_count("sample_count", sample_count)
    sample_size = require_count("sample_size", sample_size)
    total = enforce_work_limit(sample_count, sample_size, max_variates)

    sampler = distribution if callable(distribution) else get_sampler(distribution)
    family = getattr(distribution, "family", "custom")
    rng = as_source(source)

    with track_time("generate_samples", family=family, sample_count=sample_count, sample_size=sample_size):
        raw = np.empty(total, dtype=float)
        means = np.empty(sample_count, dtype=float)
        for i in range(sample_count):
            start = i * sample_size
            for j in range(sample_size):
                raw[start + j] = sampler(rng)
            group = raw[start : start + sample_size]
            # summation can drift one ulp past a constant group's value
            means[i] = min(max(group.sum() / sample_size, group.min()), group.max())

    log.info(
        "Samples generated",
        extra={"family": family, "sample_count": sample_count, "sample_size": sample_size},
    )
    return SampleResult(raw=raw, means=means, sample_count=sample_count, sample_size=sample_size)


__all__ = ["SampleResult", "generate_samples"]
