"""Poisson distribution model."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, Dict

from stat_curve_engine.distributions.params import require_positive
from stat_curve_engine.interfaces.distribution import Distribution, Family
from stat_curve_engine.interfaces.random_source import UniformSource
from stat_curve_engine.numeric import poisson_cdf, poisson_pmf
from stat_curve_engine.sampling.samplers import sample_poisson


@dataclass(frozen=True, slots=True)
class Poisson(Distribution):
    lam: float = 1.0

    family: ClassVar[Family] = "poisson"
    discrete: ClassVar[bool] = True

    def __post_init__(self) -> None:
        require_positive("lambda", self.lam)

    def pdf(self, x: float) -> float:
        if x != int(x):
            return 0.0
        return poisson_pmf(int(x), self.lam)

    def cdf(self, x: float) -> float:
        return poisson_cdf(x, self.lam)

    def sample(self, source: UniformSource) -> float:
        return sample_poisson(self.lam, source)

    @property
    def mean(self) -> float:
        return self.lam

    @property
    def variance(self) -> float:
        return self.lam

    def params(self) -> Dict[str, float]:
        return {"lambda": self.lam}
