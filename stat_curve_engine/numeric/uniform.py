"""Continuous and discrete uniform distributions."""

from __future__ import annotations

import math

from stat_curve_engine.exceptions import DomainError


def _check_bounds(a: float, b: float) -> None:
    if not a <= b:
        raise DomainError(f"a must be <= b, got a={a}, b={b}")


def uniform_pdf(x: float, a: float, b: float) -> float:
    """Density of U(a, b). A zero-width interval is a point mass (infinite density at ``a``)."""
    _check_bounds(a, b)
    if x < a or x > b:
        return 0.0
    if a == b:
        return math.inf
    return 1.0 / (b - a)


def uniform_cdf(x: float, a: float, b: float) -> float:
    _check_bounds(a, b)
    if x < a:
        return 0.0
    if x >= b:
        return 1.0
    return (x - a) / (b - a)


def uniform_discrete_pmf(k: float, a: int, b: int) -> float:
    """Mass of the discrete uniform on ``a..b``; zero off the integer support."""
    _check_bounds(a, b)
    if k < a or k > b:
        return 0.0
    if k != math.floor(k):
        return 0.0
    if a == b:
        return 1.0
    return 1.0 / (b - a + 1)


def uniform_discrete_cdf(k: float, a: int, b: int) -> float:
    _check_bounds(a, b)
    if k < a:
        return 0.0
    if k >= b:
        return 1.0
    return (math.floor(k) - a + 1) / (b - a + 1)


__all__ = ["uniform_pdf", "uniform_cdf", "uniform_discrete_pmf", "uniform_discrete_cdf"]
