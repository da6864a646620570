"""Simulation configuration schema and validation."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from stat_curve_engine.distributions.models import DistributionSpec
from stat_curve_engine.exceptions import ConfigValidationError, DomainError, ParameterError
from stat_curve_engine.query.codec import SAMPLE_SIZE_RANGE, parse_distribution


@dataclass(slots=True)
class SimulationConfig:
    distribution: str = "normal(0,1)"
    sample_count: int = 1000
    sample_size: int = 10
    bin_count: int = 40
    seed: Optional[int] = None

    def __post_init__(self) -> None:
        if self.sample_count <= 0:
            raise ConfigValidationError("sample_count must be > 0")
        lo, hi = SAMPLE_SIZE_RANGE
        if not lo <= self.sample_size <= hi:
            raise ConfigValidationError(f"sample_size must be between {lo} and {hi}")
        if self.bin_count <= 0:
            raise ConfigValidationError("bin_count must be > 0")
        if self.seed is not None and self.seed < 0:
            raise ConfigValidationError("seed must be non-negative when set")
        if not self.distribution or not self.distribution.strip():
            raise ConfigValidationError("distribution is required")
        try:
            self.to_distribution()
        except (ParameterError, DomainError) as exc:
            raise ConfigValidationError(f"invalid distribution: {exc}") from exc

    def to_distribution(self) -> DistributionSpec:
        return parse_distribution(self.distribution)

    @classmethod
    def from_dict(cls, data: dict) -> "SimulationConfig":
        unknown = set(data) - {"distribution", "sample_count", "sample_size", "bin_count", "seed"}
        if unknown:
            raise ConfigValidationError(f"unknown fields: {', '.join(sorted(unknown))}")
        return cls(**data)

    def to_dict(self) -> dict:
        return {
            "distribution": self.distribution,
            "sample_count": self.sample_count,
            "sample_size": self.sample_size,
            "bin_count": self.bin_count,
            "seed": self.seed,
        }
