"""Distribution interface shared by all parametric families."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import ClassVar, Dict, Literal

from stat_curve_engine.interfaces.random_source import UniformSource

Family = Literal["normal", "exponential", "uniform", "poisson", "uniform_discrete"]


class Distribution(ABC):
    """Base class for every parameterization the engine can sample and plot.

    Concrete families are frozen dataclasses carrying only their own
    parameters. Each one must provide density/mass, CDF, a sampler driven by
    an injected ``UniformSource`` and its first two moments, so callers can
    treat any family uniformly.
    """

    __slots__ = ()

    family: ClassVar[Family]
    discrete: ClassVar[bool] = False

    @abstractmethod
    def pdf(self, x: float) -> float:
        """Density for continuous families, mass for discrete ones."""

    @abstractmethod
    def cdf(self, x: float) -> float:
        """P(X <= x)."""

    @abstractmethod
    def sample(self, source: UniformSource) -> float:
        """Draw a single variate using ``source`` as the only entropy."""

    @property
    @abstractmethod
    def mean(self) -> float:
        ...

    @property
    @abstractmethod
    def variance(self) -> float:
        ...

    @abstractmethod
    def params(self) -> Dict[str, float]:
        """Parameters in their canonical order."""

    def describe(self) -> str:
        """Compact form such as ``normal(0, 1)``."""
        args = ", ".join(f"{v:g}" for v in self.params().values())
        return f"{self.family}({args})"


__all__ = ["Distribution", "Family"]
