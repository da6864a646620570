"""Normal distribution model."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import ClassVar, Dict

from stat_curve_engine.distributions.params import require_finite, require_positive
from stat_curve_engine.interfaces.distribution import Distribution, Family
from stat_curve_engine.interfaces.random_source import UniformSource
from stat_curve_engine.numeric import normal_cdf, normal_pdf
from stat_curve_engine.sampling.samplers import sample_normal


@dataclass(frozen=True, slots=True)
class Normal(Distribution):
    mu: float = 0.0
    sigma: float = 1.0

    family: ClassVar[Family] = "normal"

    def __post_init__(self) -> None:
        require_finite("mu", self.mu)
        require_positive("sigma", self.sigma)

    def pdf(self, x: float) -> float:
        return normal_pdf(x, self.mu, self.sigma)

    def cdf(self, x: float) -> float:
        return normal_cdf(x, self.mu, self.sigma)

    def sample(self, source: UniformSource) -> float:
        return sample_normal(self.mu, self.sigma, source)

    @property
    def mean(self) -> float:
        return self.mu

    @property
    def variance(self) -> float:
        return self.sigma**2

    def params(self) -> Dict[str, float]:
        return {"mu": self.mu, "sigma": self.sigma}

    @property
    def peak_density(self) -> float:
        return 1.0 / (self.sigma * math.sqrt(2 * math.pi))
