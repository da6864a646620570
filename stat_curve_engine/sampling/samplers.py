"""Scalar variate generators driven by an injected uniform source."""

from __future__ import annotations

import math

from stat_curve_engine.interfaces.random_source import UniformSource, as_source


def _nonzero(source: UniformSource) -> float:
    u = 0.0
    while u == 0.0:
        u = source.uniform()
    return u


def sample_normal(mu: float, sigma: float, source: UniformSource | None = None) -> float:
    """Box-Muller transform; both uniforms are redrawn while exactly 0."""
    source = as_source(source)
    u = _nonzero(source)
    v = _nonzero(source)
    z = math.sqrt(-2.0 * math.log(u)) * math.cos(2.0 * math.pi * v)
    return mu + sigma * z


def sample_exponential(lam: float, source: UniformSource | None = None) -> float:
    """Inverse-transform sampling, ``-ln(u) / lam``."""
    source = as_source(source)
    u = _nonzero(source)
    return -math.log(u) / lam


def sample_uniform(a: float, b: float, source: UniformSource | None = None) -> float:
    source = as_source(source)
    return a + (b - a) * source.uniform()


def sample_uniform_discrete(a: int, b: int, source: UniformSource | None = None) -> int:
    source = as_source(source)
    k = a + math.floor(source.uniform() * (b - a + 1))
    return min(k, b)


def sample_poisson(lam: float, source: UniformSource | None = None) -> int:
    """Knuth's multiplication method.

    Draws uniforms until their running product falls to ``exp(-lam)`` or
    below and returns the number of draws minus one. Expected draws grow
    linearly with ``lam``.
    """
    source = as_source(source)
    limit = math.exp(-lam)
    k = 0
    p = 1.0
    while True:
        k += 1
        p *= source.uniform()
        if p <= limit:
            return k - 1


__all__ = [
    "sample_normal",
    "sample_exponential",
    "sample_uniform",
    "sample_uniform_discrete",
    "sample_poisson",
]
