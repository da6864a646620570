"""Curve configuration, shared domains, ticks and pixel mapping."""

from __future__ import annotations

from .domain import (
    DomainScale,
    exponential_domain,
    normal_domain,
    poisson_domain,
    resolve_domain,
    uniform_discrete_domain,
    uniform_domain,
    ztest_domain,
)
from .models import COMMON_COLORS, CurveConfig, next_color, normalize_color
from .scale import ChartGeometry, LinearScale
from .ticks import discrete_tick_visibility, discrete_ticks, linear_ticks, sigma_ticks, y_ticks

__all__ = [
    "COMMON_COLORS",
    "CurveConfig",
    "next_color",
    "normalize_color",
    "DomainScale",
    "normal_domain",
    "exponential_domain",
    "poisson_domain",
    "uniform_discrete_domain",
    "uniform_domain",
    "resolve_domain",
    "ztest_domain",
    "ChartGeometry",
    "LinearScale",
    "linear_ticks",
    "y_ticks",
    "discrete_tick_visibility",
    "discrete_ticks",
    "sigma_ticks",
]
