"""Uniform random sources used as the only entropy primitive for sampling."""

from __future__ import annotations

from abc import ABC, abstractmethod
from itertools import cycle
from typing import Iterable

from numpy.random import PCG64, Generator

from stat_curve_engine.exceptions import ParameterError


class UniformSource(ABC):
    """Produces floats in [0, 1).

    Samplers guard against an exact 0 where a logarithm is taken, so sources
    may return 0.0.
    """

    @abstractmethod
    def uniform(self) -> float:
        """Return the next uniform draw."""


class GeneratorSource(UniformSource):
    """Numpy PCG64 generator, seeded for reproducibility when ``seed`` is set."""

    def __init__(self, seed: int | None = None) -> None:
        self.seed = seed
        self._rng = Generator(PCG64(seed))

    def uniform(self) -> float:
        return float(self._rng.random())


class SequenceSource(UniformSource):
    """Replays a fixed list of draws, cycling when exhausted.

    Useful for pinning exact sampler outputs in tests.
    """

    def __init__(self, values: Iterable[float]) -> None:
        self.values = [float(v) for v in values]
        if not self.values:
            raise ParameterError("SequenceSource requires at least one value")
        for v in self.values:
            if not 0 <= v < 1:
                raise ParameterError(f"uniform draws must be in [0, 1), got {v}")
        self._it = cycle(self.values)
        self.draws = 0

    def uniform(self) -> float:
        self.draws += 1
        return next(self._it)


def as_source(source: UniformSource | int | None = None) -> UniformSource:
    """Coerce ``None`` (unseeded), an int seed or an existing source into a UniformSource."""
    if source is None:
        return GeneratorSource()
    if isinstance(source, UniformSource):
        return source
    if isinstance(source, int) and not isinstance(source, bool):
        return GeneratorSource(seed=source)
    raise ParameterError(f"Unsupported random source: {source!r}")


__all__ = ["UniformSource", "GeneratorSource", "SequenceSource", "as_source"]
