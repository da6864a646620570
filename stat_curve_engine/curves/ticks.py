"""Axis tick placement policies."""

from __future__ import annotations

import math
from typing import List

from stat_curve_engine.exceptions import ParameterError

DISCRETE_LABEL_THRESHOLD = 30
DISCRETE_LABEL_TARGET = 20
AXIS_WIDTH_PX = 420
MIN_TICK_SPACING_PX = 60


def linear_ticks(min_x: float, max_x: float, divisions: int = 8) -> List[float]:
    """``divisions + 1`` evenly spaced values from ``min_x`` to ``max_x``."""
    if divisions < 1:
        raise ParameterError(f"divisions must be >= 1, got {divisions}")
    return [min_x + (i / divisions) * (max_x - min_x) for i in range(divisions + 1)]


def y_ticks(max_y: float, count: int = 5) -> List[float]:
    """``count + 1`` values from 0 to ``max_y``."""
    if count < 1:
        raise ParameterError(f"count must be >= 1, got {count}")
    return [max_y * i / count for i in range(count + 1)]


def discrete_tick_visibility(total: int) -> List[bool]:
    """Which category labels to draw on a discrete axis with ``total`` categories.

    Up to 30 categories every label is shown. Beyond that only every
    ``ceil(total / 20)``-th label is kept (always including the first), and
    of the final two labels exactly one is shown so the ends never crowd.
    """
    if total <= 0:
        return []
    show = [True] * total
    if total > DISCRETE_LABEL_THRESHOLD:
        step = math.ceil(total / DISCRETE_LABEL_TARGET)
        show = [i % step == 0 or i == 0 for i in range(total)]
        show[total - 1] = not show[total - 2]
    return show


def discrete_ticks(min_k: int, max_k: int) -> List[tuple[int, bool]]:
    """``(k, labelled)`` for every integer category in ``min_k..max_k``."""
    categories = list(range(int(min_k), int(max_k) + 1))
    return list(zip(categories, discrete_tick_visibility(len(categories))))


def sigma_ticks(
    mu: float,
    sigma: float,
    min_x: float,
    max_x: float,
    *,
    axis_width_px: float = AXIS_WIDTH_PX,
    min_spacing_px: float = MIN_TICK_SPACING_PX,
) -> List[float]:
    """Ticks on multiples of ``sigma`` aligned so one lands on ``mu``.

    The step starts at one sigma and doubles until the ticks fit the axis
    at the minimum pixel spacing.
    """
    if not sigma > 0:
        raise ParameterError(f"sigma must be > 0, got {sigma}")
    max_ticks = math.floor(axis_width_px / min_spacing_px)
    step = sigma
    while math.floor((max_x - min_x) / step) > max_ticks:
        step *= 2
    first = mu + math.ceil((min_x - mu) / step) * step
    last = mu + math.floor((max_x - mu) / step) * step
    ticks = []
    x = first
    while x <= last + 1e-8:
        ticks.append(round(x, 8))
        x += step
    return ticks


__all__ = [
    "linear_ticks",
    "y_ticks",
    "discrete_tick_visibility",
    "discrete_ticks",
    "sigma_ticks",
]
