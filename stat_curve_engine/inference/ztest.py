"""One-sample z-test evaluation."""

from __future__ import annotations

import math
from dataclasses import asdict, dataclass
from typing import List, Tuple

from stat_curve_engine.curves.domain import DomainScale, ztest_domain
from stat_curve_engine.exceptions import ParameterError
from stat_curve_engine.inference.critical import (
    Decision,
    Tail,
    critical_z_for_alpha,
    decision,
    p_value,
    validate_tail,
)
from stat_curve_engine.utils.logging import get_logger

log = get_logger(__name__, component="ztest")

Region = Tuple[float, float]


@dataclass(frozen=True)
class TestResult:
    __test__ = False  # keep pytest from collecting this as a test class

    z_statistic: float
    z_critical: float
    p_value: float
    reject_null: bool
    tail: Tail
    alpha: float

    @property
    def decision(self) -> Decision:
        return "reject" if self.reject_null else "fail-to-reject"

    def to_dict(self) -> dict:
        payload = asdict(self)
        payload["decision"] = self.decision
        return payload


def standard_error(sigma: float, n: int) -> float:
    if not sigma > 0:
        raise ParameterError(f"sigma must be > 0, got {sigma}")
    if n < 1:
        raise ParameterError(f"n must be >= 1, got {n}")
    return sigma / math.sqrt(n)


def z_statistic(sample_mean: float, mu: float, sigma: float, n: int) -> float:
    return (sample_mean - mu) / standard_error(sigma, n)


def evaluate(z: float, alpha: float, tail: Tail = "two") -> TestResult:
    """Decide a test from an observed z statistic."""
    validate_tail(tail)
    z_crit = critical_z_for_alpha(alpha, tail)
    p = p_value(z, tail)
    return TestResult(
        z_statistic=z,
        z_critical=z_crit,
        p_value=p,
        reject_null=decision(p, alpha) == "reject",
        tail=tail,
        alpha=alpha,
    )


def evaluate_z_test(
    sample_mean: float, mu: float, sigma: float, n: int, alpha: float = 5, tail: Tail = "two"
) -> TestResult:
    """Test H0: population mean == ``mu`` given a sample mean of ``n`` draws with known ``sigma``."""
    result = evaluate(z_statistic(sample_mean, mu, sigma, n), alpha, tail)
    log.debug("z-test evaluated", extra=result.to_dict())
    return result


def critical_regions(
    mu: float, sigma: float, n: int, z_critical: float, tail: Tail, domain: DomainScale
) -> List[Region]:
    """Rejection regions on the sample-mean axis, clipped to ``domain``."""
    validate_tail(tail)
    se = standard_error(sigma, n)
    x_min, x_max = domain.min_x, domain.max_x
    if tail == "left":
        left = min(mu - z_critical * se, x_max)
        return [(x_min, max(x_min, left))]
    if tail == "right":
        right = max(mu + z_critical * se, x_min)
        return [(min(x_max, right), x_max)]
    left = min(mu - abs(z_critical) * se, x_max)
    right = max(mu + abs(z_critical) * se, x_min)
    return [(x_min, max(x_min, left)), (min(x_max, right), x_max)]


def plot_domain(result: TestResult, mu: float, sigma: float) -> DomainScale:
    return ztest_domain(mu, sigma, result.z_statistic, result.z_critical, result.tail)


__all__ = [
    "TestResult",
    "standard_error",
    "z_statistic",
    "evaluate",
    "evaluate_z_test",
    "critical_regions",
    "plot_domain",
]
