"""Parameter validation shared by the distribution variants."""

from __future__ import annotations

import math
import numbers

from stat_curve_engine.exceptions import ParameterError


def require_finite(name: str, value: float) -> None:
    if isinstance(value, bool) or not isinstance(value, numbers.Real) or not math.isfinite(value):
        raise ParameterError(f"{name} must be a finite number, got {value!r}")


def require_positive(name: str, value: float) -> None:
    require_finite(name, value)
    if value <= 0:
        raise ParameterError(f"{name} must be > 0, got {value}")


def require_ordered(a: float, b: float) -> None:
    require_finite("a", a)
    require_finite("b", b)
    if a > b:
        raise ParameterError(f"a must be <= b, got a={a}, b={b}")


def require_integer(name: str, value: float) -> int:
    require_finite(name, value)
    if float(value) != math.floor(value):
        raise ParameterError(f"{name} must be an integer, got {value}")
    return int(value)


__all__ = ["require_finite", "require_positive", "require_ordered", "require_integer"]
