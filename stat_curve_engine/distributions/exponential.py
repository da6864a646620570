"""Exponential distribution model."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, Dict

from stat_curve_engine.distributions.params import require_positive
from stat_curve_engine.interfaces.distribution import Distribution, Family
from stat_curve_engine.interfaces.random_source import UniformSource
from stat_curve_engine.numeric import exponential_cdf, exponential_pdf
from stat_curve_engine.sampling.samplers import sample_exponential


@dataclass(frozen=True, slots=True)
class Exponential(Distribution):
    lam: float = 1.0

    family: ClassVar[Family] = "exponential"

    def __post_init__(self) -> None:
        require_positive("lambda", self.lam)

    def pdf(self, x: float) -> float:
        return exponential_pdf(x, self.lam)

    def cdf(self, x: float) -> float:
        return exponential_cdf(x, self.lam)

    def sample(self, source: UniformSource) -> float:
        return sample_exponential(self.lam, source)

    @property
    def mean(self) -> float:
        return 1.0 / self.lam

    @property
    def variance(self) -> float:
        return 1.0 / self.lam**2

    def params(self) -> Dict[str, float]:
        return {"lambda": self.lam}
