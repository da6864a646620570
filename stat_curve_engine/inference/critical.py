"""Critical values, p-values and reject/retain decisions on the standard normal scale."""

from __future__ import annotations

from typing import Dict, Literal

from stat_curve_engine.exceptions import DomainError, ParameterError
from stat_curve_engine.numeric import norm_s_inv, normal_cdf

Tail = Literal["left", "right", "two"]
Decision = Literal["reject", "fail-to-reject"]

TAILS = ("left", "right", "two")

# Two-sided critical values for the common confidence levels
Z_TABLE: Dict[float, float] = {90: 1.645, 95: 1.96, 99: 2.576}


def validate_tail(tail: str) -> Tail:
    if tail not in TAILS:
        raise ParameterError(f"tail must be one of {TAILS}, got {tail!r}")
    return tail  # type: ignore[return-value]


def _check_percent(name: str, value: float) -> None:
    if not 0 < value < 100:
        raise DomainError(f"{name} must be a percentage in (0, 100), got {value}")


def critical_z(confidence: float, tail: Tail = "two") -> float:
    """Critical z for a confidence level given in percent.

    Two-sided 90/95/99 use the textbook table; any other level is computed
    from the inverse normal CDF. One-sided levels put all of the remaining
    mass in one tail.
    """
    _check_percent("confidence", confidence)
    validate_tail(tail)
    if tail == "two":
        if confidence in Z_TABLE:
            return Z_TABLE[confidence]
        return norm_s_inv(1 - (1 - confidence / 100) / 2)
    return norm_s_inv(confidence / 100)


def critical_z_for_alpha(alpha: float, tail: Tail = "two") -> float:
    """Critical z for a significance level in percent (``alpha=5`` means 5%)."""
    _check_percent("alpha", alpha)
    validate_tail(tail)
    a = alpha / 100
    if tail == "two":
        return norm_s_inv(1 - a / 2)
    return norm_s_inv(1 - a)


def p_value(z: float, tail: Tail = "two") -> float:
    validate_tail(tail)
    if tail == "left":
        return normal_cdf(z)
    if tail == "right":
        return 1 - normal_cdf(z)
    return 2 * (1 - normal_cdf(abs(z)))


def decision(p: float, alpha: float) -> Decision:
    """Reject H0 only when ``p`` is strictly below ``alpha`` percent."""
    _check_percent("alpha", alpha)
    return "reject" if p < alpha / 100 else "fail-to-reject"


__all__ = [
    "Tail",
    "Decision",
    "TAILS",
    "Z_TABLE",
    "validate_tail",
    "critical_z",
    "critical_z_for_alpha",
    "p_value",
    "decision",
]
