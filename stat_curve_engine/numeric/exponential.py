"""Exponential density and CDF."""

from __future__ import annotations

import math

from stat_curve_engine.exceptions import DomainError


def _check_rate(lam: float) -> None:
    if not lam > 0:
        raise DomainError(f"lambda must be > 0, got {lam}")


def exponential_pdf(x: float, lam: float) -> float:
    _check_rate(lam)
    if x < 0:
        return 0.0
    return lam * math.exp(-lam * x)


def exponential_cdf(x: float, lam: float) -> float:
    _check_rate(lam)
    if x < 0:
        return 0.0
    return 1.0 - math.exp(-lam * x)


def exponential_quantile(p: float, lam: float) -> float:
    """Return x with ``exponential_cdf(x, lam) == p``."""
    _check_rate(lam)
    if not 0 <= p < 1:
        raise DomainError(f"p must be in [0, 1), got {p}")
    return -math.log(1 - p) / lam


__all__ = ["exponential_pdf", "exponential_cdf", "exponential_quantile"]
