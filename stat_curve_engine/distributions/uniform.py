"""Continuous and discrete uniform distribution models."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, Dict

from stat_curve_engine.distributions.params import require_integer, require_ordered
from stat_curve_engine.interfaces.distribution import Distribution, Family
from stat_curve_engine.interfaces.random_source import UniformSource
from stat_curve_engine.numeric import (
    uniform_cdf,
    uniform_discrete_cdf,
    uniform_discrete_pmf,
    uniform_pdf,
)
from stat_curve_engine.sampling.samplers import sample_uniform, sample_uniform_discrete


@dataclass(frozen=True, slots=True)
class Uniform(Distribution):
    a: float = 0.0
    b: float = 1.0

    family: ClassVar[Family] = "uniform"

    def __post_init__(self) -> None:
        require_ordered(self.a, self.b)

    def pdf(self, x: float) -> float:
        return uniform_pdf(x, self.a, self.b)

    def cdf(self, x: float) -> float:
        return uniform_cdf(x, self.a, self.b)

    def sample(self, source: UniformSource) -> float:
        return sample_uniform(self.a, self.b, source)

    @property
    def mean(self) -> float:
        return (self.a + self.b) / 2

    @property
    def variance(self) -> float:
        return (self.b - self.a) ** 2 / 12

    def params(self) -> Dict[str, float]:
        return {"a": self.a, "b": self.b}


@dataclass(frozen=True, slots=True)
class UniformDiscrete(Distribution):
    """Equal mass on every integer in ``a..b`` (inclusive)."""

    a: int = 0
    b: int = 5

    family: ClassVar[Family] = "uniform_discrete"
    discrete: ClassVar[bool] = True

    def __post_init__(self) -> None:
        a = require_integer("a", self.a)
        b = require_integer("b", self.b)
        require_ordered(a, b)
        object.__setattr__(self, "a", a)
        object.__setattr__(self, "b", b)

    @property
    def support_size(self) -> int:
        return self.b - self.a + 1

    def pdf(self, x: float) -> float:
        return uniform_discrete_pmf(x, self.a, self.b)

    def cdf(self, x: float) -> float:
        return uniform_discrete_cdf(x, self.a, self.b)

    def sample(self, source: UniformSource) -> float:
        return sample_uniform_discrete(self.a, self.b, source)

    @property
    def mean(self) -> float:
        return (self.a + self.b) / 2

    @property
    def variance(self) -> float:
        return (self.support_size**2 - 1) / 12

    def params(self) -> Dict[str, float]:
        return {"a": self.a, "b": self.b}
