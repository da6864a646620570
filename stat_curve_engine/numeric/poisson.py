"""Poisson mass and cumulative functions evaluated in log space."""

from __future__ import annotations

import math

from stat_curve_engine.exceptions import DomainError


def log_factorial(n: int) -> float:
    """ln(n!) as a running sum of logarithms; 0 for n < 2."""
    res = 0.0
    for i in range(2, int(n) + 1):
        res += math.log(i)
    return res


def poisson_pmf(k: int, lam: float) -> float:
    if not lam > 0:
        raise DomainError(f"lambda must be > 0, got {lam}")
    if k < 0:
        return 0.0
    log_p = -lam + k * math.log(lam) - log_factorial(k)
    return math.exp(log_p)


def poisson_cdf(k: int, lam: float) -> float:
    if not lam > 0:
        raise DomainError(f"lambda must be > 0, got {lam}")
    total = sum(poisson_pmf(i, lam) for i in range(int(math.floor(k)) + 1))
    return float(total)


__all__ = ["log_factorial", "poisson_pmf", "poisson_cdf"]
