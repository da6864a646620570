"""Work-size estimation and limits for sampling runs."""

from __future__ import annotations

from stat_curve_engine.exceptions import ParameterError, ResourceLimitError

# Upper bound on variates drawn by a single run.
MAX_VARIATES = 10_000_000


def estimate_footprint_mb(sample_count: int, sample_size: int) -> float:
    """Estimate memory for raw variates plus means (float64) in megabytes."""
    return (sample_count * sample_size + sample_count) * 8 / 1e6


def require_count(name: str, value: object) -> int:
    """Return ``value`` as an int >= 1 or raise ParameterError."""
    if isinstance(value, bool) or not isinstance(value, int):
        if isinstance(value, float) and value.is_integer():
            value = int(value)
        else:
            raise ParameterError(f"{name} must be an integer >= 1, got {value!r}")
    if value < 1:
        raise ParameterError(f"{name} must be >= 1, got {value}")
    return value


def enforce_work_limit(sample_count: int, sample_size: int, max_variates: int = MAX_VARIATES) -> int:
    """Return the total variate count, raising when it exceeds ``max_variates``."""
    total = sample_count * sample_size
    if total > max_variates:
        raise ResourceLimitError(
            f"Requested {total} variates ({sample_count} x {sample_size}) exceeds limit of {max_variates} "
            f"(~{estimate_footprint_mb(sample_count, sample_size):.1f} MB)."
        )
    return total
