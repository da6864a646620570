"""Confidence-interval and hypothesis-test statistics."""

from __future__ import annotations

from .coverage import CoverageResult, confidence_intervals, interval_coverage, simulate_coverage
from .critical import (
    TAILS,
    Z_TABLE,
    critical_z,
    critical_z_for_alpha,
    decision,
    p_value,
    validate_tail,
)
from .ztest import TestResult, critical_regions, evaluate, evaluate_z_test, standard_error, z_statistic

__all__ = [
    "TAILS",
    "Z_TABLE",
    "critical_z",
    "critical_z_for_alpha",
    "decision",
    "p_value",
    "validate_tail",
    "TestResult",
    "critical_regions",
    "evaluate",
    "evaluate_z_test",
    "standard_error",
    "z_statistic",
    "CoverageResult",
    "confidence_intervals",
    "interval_coverage",
    "simulate_coverage",
]
