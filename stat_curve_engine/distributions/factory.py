"""Factory for distribution variants keyed by family name."""

from __future__ import annotations

from stat_curve_engine.distributions.models import (
    DistributionSpec,
    Exponential,
    Normal,
    Poisson,
    Uniform,
    UniformDiscrete,
)
from stat_curve_engine.exceptions import ParameterError

_ALIASES = {
    "normal": "normal",
    "gaussian": "normal",
    "exponential": "exponential",
    "exp": "exponential",
    "uniform": "uniform",
    "poisson": "poisson",
    "uniform_discrete": "uniform_discrete",
    "uniform-discrete": "uniform_discrete",
    "discrete_uniform": "uniform_discrete",
}


def canonical_family(name: str) -> str:
    key = name.strip().lower()
    if key not in _ALIASES:
        raise ParameterError(f"Unknown distribution: {name}")
    return _ALIASES[key]


def _param(params: dict, *names: str, default: float) -> float:
    for name in names:
        if name in params and params[name] is not None:
            return params[name]
    return default


def get_distribution(name: str, **params) -> DistributionSpec:
    """Build a variant from a family name and keyword parameters.

    ``lambda`` may be passed as ``lam`` or ``lambda_`` (or via ``**{"lambda": x}``).
    Missing parameters take the defaults used by the visualizers.
    """
    family = canonical_family(name)
    if family == "normal":
        return Normal(mu=_param(params, "mu", default=0.0), sigma=_param(params, "sigma", default=1.0))
    if family == "exponential":
        return Exponential(lam=_param(params, "lam", "lambda", "lambda_", default=1.0))
    if family == "uniform":
        return Uniform(a=_param(params, "a", default=0.0), b=_param(params, "b", default=5.0))
    if family == "poisson":
        return Poisson(lam=_param(params, "lam", "lambda", "lambda_", default=1.0))
    if family == "uniform_discrete":
        return UniformDiscrete(a=_param(params, "a", default=0), b=_param(params, "b", default=5))
    raise ParameterError(f"Unknown distribution: {name}")
