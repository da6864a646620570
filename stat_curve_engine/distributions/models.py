"""The closed set of distribution variants."""

from __future__ import annotations

from typing import Dict, Tuple, Type, Union

from stat_curve_engine.distributions.exponential import Exponential
from stat_curve_engine.distributions.normal import Normal
from stat_curve_engine.distributions.poisson import Poisson
from stat_curve_engine.distributions.uniform import Uniform, UniformDiscrete

DistributionSpec = Union[Normal, Exponential, Uniform, Poisson, UniformDiscrete]

VARIANTS: Tuple[Type[DistributionSpec], ...] = (Normal, Exponential, Uniform, Poisson, UniformDiscrete)

VARIANTS_BY_FAMILY: Dict[str, Type[DistributionSpec]] = {cls.family: cls for cls in VARIANTS}

# Positional parameter order used by compact forms like ``normal(0, 1)``.
PARAM_ORDER: Dict[str, Tuple[str, ...]] = {
    "normal": ("mu", "sigma"),
    "exponential": ("lambda",),
    "uniform": ("a", "b"),
    "poisson": ("lambda",),
    "uniform_discrete": ("a", "b"),
}


__all__ = [
    "DistributionSpec",
    "Normal",
    "Exponential",
    "Uniform",
    "Poisson",
    "UniformDiscrete",
    "VARIANTS",
    "VARIANTS_BY_FAMILY",
    "PARAM_ORDER",
]
