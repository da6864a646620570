"""Shared x-domain and y-range resolution for overlaid curves."""

from __future__ import annotations

import math
from dataclasses import asdict, dataclass
from typing import Callable, Iterable, List, Literal, Optional, Sequence, Type, TypeVar, Union

from stat_curve_engine.curves.models import CurveConfig
from stat_curve_engine.distributions.models import (
    DistributionSpec,
    Exponential,
    Normal,
    Poisson,
    Uniform,
    UniformDiscrete,
)
from stat_curve_engine.exceptions import ConfigValidationError, ParameterError
from stat_curve_engine.numeric import normal_pdf
from stat_curve_engine.utils.logging import get_logger

log = get_logger(__name__, component="curve_domain")

NORMAL_GRID = 200
EXPONENTIAL_GRID = 300
UNIFORM_GRID = 200
NORMAL_SPAN_SIGMAS = 4
EXPONENTIAL_TAIL_MASS = 0.01
EXPONENTIAL_MIN_X = 5
POISSON_SPAN_SIGMAS = 4
POISSON_MIN_K = 5
POISSON_FALLBACK_K = 10
ZTEST_MARGIN_SIGMAS = 0.5
ZTEST_MAX_SIGMAS = 10

CurveLike = Union[CurveConfig, DistributionSpec]
Tail = Literal["left", "right", "two"]
D = TypeVar("D")


@dataclass(frozen=True)
class DomainScale:
    min_x: float
    max_x: float
    max_y: float

    @property
    def width(self) -> float:
        return self.max_x - self.min_x

    def to_dict(self) -> dict:
        return asdict(self)


def _distributions(curves: Iterable[CurveLike], expected: Type[D]) -> List[D]:
    out = []
    for curve in curves or ():
        dist = curve.distribution if isinstance(curve, CurveConfig) else curve
        if not isinstance(dist, expected):
            raise ConfigValidationError(
                f"Expected {expected.__name__} curves, got {type(dist).__name__}"
            )
        out.append(dist)
    return out


def _fn(dist: DistributionSpec, cumulative: bool) -> Callable[[float], float]:
    return dist.cdf if cumulative else dist.pdf


def _grid_max_y(dists: Sequence[DistributionSpec], min_x: float, max_x: float, n: int, cumulative: bool) -> float:
    max_y = 0.0
    for i in range(n + 1):
        x = min_x + (max_x - min_x) * (i / n)
        for dist in dists:
            y = _fn(dist, cumulative)(x)
            if math.isfinite(y) and y > max_y:
                max_y = y
    return max_y


def _integer_max_y(dists: Sequence[DistributionSpec], min_k: int, max_k: int, cumulative: bool) -> float:
    max_y = 0.0
    for k in range(min_k, max_k + 1):
        for dist in dists:
            y = _fn(dist, cumulative)(k)
            if y > max_y:
                max_y = y
    return max_y


def normal_domain(curves: Iterable[CurveLike], *, cumulative: bool = False, resolution: int = NORMAL_GRID) -> DomainScale:
    """``[min(mu - 4 sigma), max(mu + 4 sigma)]``, or ``[-4, 4]`` when there is nothing to span."""
    dists = _distributions(curves, Normal)
    min_x = min((d.mu - NORMAL_SPAN_SIGMAS * d.sigma for d in dists), default=math.inf)
    max_x = max((d.mu + NORMAL_SPAN_SIGMAS * d.sigma for d in dists), default=-math.inf)
    if not math.isfinite(min_x) or not math.isfinite(max_x):
        min_x, max_x = -4.0, 4.0
    return DomainScale(min_x, max_x, _grid_max_y(dists, min_x, max_x, resolution, cumulative))


def exponential_domain(
    curves: Iterable[CurveLike], *, cumulative: bool = False, resolution: int = EXPONENTIAL_GRID
) -> DomainScale:
    """``[0, max_x]`` where ``max_x`` is the slowest curve's 99th percentile, at least 5."""
    dists = _distributions(curves, Exponential)
    min_x = 0.0
    max_x = float(EXPONENTIAL_MIN_X)
    for d in dists:
        max_x = max(max_x, float(math.ceil(-math.log(EXPONENTIAL_TAIL_MASS) / d.lam)))
    return DomainScale(min_x, max_x, _grid_max_y(dists, min_x, max_x, resolution, cumulative))


def poisson_domain(curves: Iterable[CurveLike], *, cumulative: bool = False) -> DomainScale:
    """``[0, max(ceil(lam + 4 sqrt(lam)))]``; bounds below 5 or non-finite become 10."""
    dists = _distributions(curves, Poisson)
    max_k: float = 0
    for d in dists:
        max_k = max(max_k, math.ceil(d.lam + POISSON_SPAN_SIGMAS * math.sqrt(d.lam)))
    if not math.isfinite(max_k) or max_k < POISSON_MIN_K:
        max_k = POISSON_FALLBACK_K
    max_k = int(max_k)
    return DomainScale(0, max_k, _integer_max_y(dists, 0, max_k, cumulative))


def uniform_discrete_domain(curves: Iterable[CurveLike], *, cumulative: bool = False) -> DomainScale:
    """``[min(a), max(b)]``, or ``[0, 5]`` for an empty curve list."""
    dists = _distributions(curves, UniformDiscrete)
    if dists:
        min_k = min(d.a for d in dists)
        max_k = max(d.b for d in dists)
    else:
        min_k, max_k = 0, 5
    return DomainScale(min_k, max_k, _integer_max_y(dists, min_k, max_k, cumulative))


def uniform_domain(curves: Iterable[CurveLike], *, cumulative: bool = False, resolution: int = UNIFORM_GRID) -> DomainScale:
    dists = _distributions(curves, Uniform)
    if dists:
        min_x = float(min(d.a for d in dists))
        max_x = float(max(d.b for d in dists))
    else:
        min_x, max_x = 0.0, 1.0
    if min_x == max_x:
        min_x, max_x = min_x - 0.5, max_x + 0.5
    max_y = _grid_max_y(dists, min_x, max_x, resolution, cumulative)
    if not cumulative:
        # grid points can miss narrow supports; the flat top is known exactly
        widths = [d.b - d.a for d in dists if d.b > d.a]
        if widths:
            max_y = max(max_y, 1.0 / min(widths))
    return DomainScale(min_x, max_x, max_y)


_RESOLVERS = {
    "normal": normal_domain,
    "exponential": exponential_domain,
    "poisson": poisson_domain,
    "uniform_discrete": uniform_discrete_domain,
    "uniform": uniform_domain,
}


def resolve_domain(
    curves: Iterable[CurveLike], family: Optional[str] = None, *, cumulative: bool = False
) -> DomainScale:
    """Resolve one shared domain for curves that all belong to the same family.

    ``family`` picks the fallback domain for an empty list and, when given,
    must match every curve. Defaults to normal.
    """
    curves = list(curves or ())
    families = {c.family for c in curves}
    if len(families) > 1:
        raise ConfigValidationError(f"Cannot overlay curves of different families: {sorted(families)}")
    if family is not None and families and family not in families:
        raise ConfigValidationError(f"Curves are {families.pop()}, expected {family}")
    chosen = family or (families.pop() if families else "normal")
    if chosen not in _RESOLVERS:
        raise ConfigValidationError(f"Unknown curve family: {chosen}")
    domain = _RESOLVERS[chosen](curves, cumulative=cumulative)
    log.debug(
        "Domain resolved",
        extra={"family": chosen, "curves": len(curves), **domain.to_dict()},
    )
    return domain


def ztest_domain(mu: float, sigma: float, z: float, z_critical: float, tail: Tail = "two") -> DomainScale:
    """Display domain for a z-test plot centred on ``mu``.

    The half width covers the observed statistic, the critical value and
    four sigma, plus half a sigma of margin, capped at ten sigma.
    """
    if not sigma > 0:
        raise ParameterError(f"sigma must be > 0, got {sigma}")
    candidates = [z * sigma, z_critical * sigma, -z_critical * sigma, -4 * sigma, 4 * sigma]
    if tail == "two":
        candidates += [abs(z) * sigma, -abs(z) * sigma]
    max_delta = max(abs(c) for c in candidates) + ZTEST_MARGIN_SIGMAS * sigma
    if max_delta > ZTEST_MAX_SIGMAS * sigma:
        max_delta = ZTEST_MAX_SIGMAS * sigma
    return DomainScale(mu - max_delta, mu + max_delta, normal_pdf(0) / sigma)


__all__ = [
    "DomainScale",
    "normal_domain",
    "exponential_domain",
    "poisson_domain",
    "uniform_discrete_domain",
    "uniform_domain",
    "resolve_domain",
    "ztest_domain",
]
