"""Sampler selection over the closed set of distribution variants."""

from __future__ import annotations

from functools import partial
from typing import Callable

from stat_curve_engine.distributions.models import (
    DistributionSpec,
    Exponential,
    Normal,
    Poisson,
    Uniform,
    UniformDiscrete,
)
from stat_curve_engine.exceptions import ParameterError
from stat_curve_engine.interfaces.random_source import UniformSource
from stat_curve_engine.sampling.samplers import (
    sample_exponential,
    sample_normal,
    sample_poisson,
    sample_uniform,
    sample_uniform_discrete,
)

Sampler = Callable[[UniformSource], float]


def get_sampler(distribution: DistributionSpec) -> Sampler:
    """Return a one-argument sampler bound to the variant's parameters."""
    if isinstance(distribution, Normal):
        return partial(sample_normal, distribution.mu, distribution.sigma)
    if isinstance(distribution, Exponential):
        return partial(sample_exponential, distribution.lam)
    if isinstance(distribution, Uniform):
        return partial(sample_uniform, distribution.a, distribution.b)
    if isinstance(distribution, Poisson):
        return partial(sample_poisson, distribution.lam)
    if isinstance(distribution, UniformDiscrete):
        return partial(sample_uniform_discrete, distribution.a, distribution.b)
    raise ParameterError(f"No sampler for {type(distribution).__name__}")


__all__ = ["Sampler", "get_sampler"]
