"""CLI validation helpers."""

from __future__ import annotations

from stat_curve_engine.exceptions import ConfigValidationError
from stat_curve_engine.inference.critical import TAILS


def require_positive(name: str, value: int | float) -> None:
    if value <= 0:
        raise ConfigValidationError(f"{name} must be > 0")


def require_percent(name: str, value: float) -> None:
    if not 0 < value < 100:
        raise ConfigValidationError(f"{name} must be between 0 and 100 (exclusive)")


def validate_clt_inputs(*, sample_count: int, sample_size: int, bins: int, seed: int | None) -> None:
    require_positive("sample_count", sample_count)
    require_positive("sample_size", sample_size)
    require_positive("bins", bins)
    if seed is not None and seed < 0:
        raise ConfigValidationError("seed must be non-negative")


def validate_interval_inputs(*, confidence: float, sample_count: int, sample_size: int) -> None:
    require_percent("confidence", confidence)
    require_positive("sample_count", sample_count)
    require_positive("sample_size", sample_size)


def validate_ztest_inputs(*, alpha: float, tail: str, sigma: float, n: int) -> None:
    require_percent("alpha", alpha)
    if tail not in TAILS:
        raise ConfigValidationError(f"tail must be one of {list(TAILS)}")
    require_positive("sigma", sigma)
    require_positive("n", n)
