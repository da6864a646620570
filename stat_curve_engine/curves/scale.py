"""Data-to-pixel coordinate mapping for the chart layer."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Tuple

from stat_curve_engine.aggregation.histogram import Histogram
from stat_curve_engine.curves.domain import DomainScale
from stat_curve_engine.distributions.models import DistributionSpec
from stat_curve_engine.exceptions import ParameterError

Point = Tuple[float, float]


@dataclass(frozen=True)
class LinearScale:
    """Affine map from ``[domain_min, domain_max]`` onto ``[range_min, range_max]``.

    A zero-width domain maps with a span of 1 so it never divides by zero.
    """

    domain_min: float
    domain_max: float
    range_min: float
    range_max: float

    def __call__(self, value: float) -> float:
        span = (self.domain_max - self.domain_min) or 1.0
        return self.range_min + (value - self.domain_min) / span * (self.range_max - self.range_min)

    def invert(self, pixel: float) -> float:
        span = (self.range_max - self.range_min) or 1.0
        return self.domain_min + (pixel - self.range_min) / span * (self.domain_max - self.domain_min)


@dataclass(frozen=True)
class BarSlot:
    category: int
    center: float
    left: float
    width: float


@dataclass(frozen=True)
class Bar:
    x0: float
    x1: float
    y: float
    height: float


@dataclass(frozen=True)
class ChartGeometry:
    width: float = 600
    height: float = 300
    padding: float = 40
    offset: float = 15

    @property
    def plot_width(self) -> float:
        return self.width - 2 * self.padding

    @property
    def plot_height(self) -> float:
        return self.height - 2 * self.padding

    @property
    def baseline(self) -> float:
        return self.height - self.padding

    def x_scale(self, domain: DomainScale, *, offset: bool = True) -> LinearScale:
        left = self.padding + (self.offset if offset else 0)
        return LinearScale(domain.min_x, domain.max_x, left, left + self.plot_width)

    def y_scale(self, max_y: float) -> LinearScale:
        # a zero max_y (no curves) maps with a divisor of 1
        return LinearScale(0.0, max_y or 1.0, self.baseline, self.baseline - self.plot_height)

    def curve_points(
        self, distribution: DistributionSpec, domain: DomainScale, n: int = 200, *, cumulative: bool = False
    ) -> List[Point]:
        """Pixel polyline of ``distribution`` over ``n + 1`` evenly spaced x values."""
        if n < 1:
            raise ParameterError(f"n must be >= 1, got {n}")
        fx = self.x_scale(domain)
        fy = self.y_scale(domain.max_y)
        fn = distribution.cdf if cumulative else distribution.pdf
        points = []
        for i in range(n + 1):
            x = domain.min_x + (domain.max_x - domain.min_x) * (i / n)
            points.append((fx(x), fy(fn(x))))
        return points

    def bar_slots(self, min_k: int, max_k: int, *, shrink: float = 0.5, min_width: float = 2.0) -> List[BarSlot]:
        """One slot per integer category; bars are narrowed by ``shrink`` around the slot centre."""
        total = int(max_k) - int(min_k) + 1
        if total < 1:
            return []
        slot = self.plot_width / total
        bar_width = max(min_width, slot * shrink)
        left0 = self.padding + self.offset
        slots = []
        for i in range(total):
            center = left0 + i * slot + slot / 2
            slots.append(BarSlot(category=int(min_k) + i, center=center, left=center - bar_width / 2, width=bar_width))
        return slots

    def histogram_bars(self, hist: Histogram) -> List[Bar]:
        """Rectangles for ``hist`` scaled so the tallest bin fills the plot height."""
        n = hist.bin_count
        if n == 0:
            return []
        top = hist.max_count
        bars = []
        for i, count in enumerate(hist.counts.tolist()):
            x0 = self.padding + (i / n) * self.plot_width
            x1 = self.padding + ((i + 1) / n) * self.plot_width
            height = count / top * self.plot_height
            bars.append(Bar(x0=x0, x1=x1, y=self.baseline - height, height=height))
        return bars


__all__ = ["LinearScale", "ChartGeometry", "BarSlot", "Bar", "Point"]
