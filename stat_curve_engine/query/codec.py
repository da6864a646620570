"""Decode and encode the visualizers' shareable URL query strings.

Formats handled::

    dist=normal(0,1)&sampleCount=1000&sampleSize=10          CLT visualizer
    curve1=0,1,2563eb,A&curve2=2,1,e11d48,B                  normal curves
    curve1=1,2563eb,A                                        exponential / poisson curves
    curve1=1,6,2563eb,A                                      discrete uniform curves
    curves=[{"mu":0,"sigma":1,"color":"#2563eb","name":"A"}] any family, JSON form
    confLevel=95&sampleSize=1&sampleCount=30                 confidence intervals
    alpha=5&tail=two&mu=1&sigma=1&n=30&sampleMean=1.2        z-test
"""

from __future__ import annotations

import json
import math
import re
from dataclasses import dataclass
from typing import Dict, List, Mapping, Optional, Union
from urllib.parse import parse_qsl, quote

from stat_curve_engine.curves.models import CurveConfig
from stat_curve_engine.distributions.factory import canonical_family, get_distribution
from stat_curve_engine.distributions.models import PARAM_ORDER, DistributionSpec
from stat_curve_engine.exceptions import ParameterError, QueryDecodeError
from stat_curve_engine.inference.critical import TAILS, Tail

QueryInput = Union[str, Mapping[str, str]]

_DIST_PATTERN = re.compile(r"^(\w+)\(([^)]*)\)$")

# Defaults the visualizers start from
DEFAULT_PARAMS: Dict[str, float] = {"mu": 0.0, "sigma": 1.0, "lambda": 1.0, "a": 0.0, "b": 5.0}
SAMPLE_SIZE_RANGE = (1, 10_000)
SAMPLE_COUNT_RANGE = (1, 1_000_000)
INTERVAL_COUNT_RANGE = (1, 1_000)
PERCENT_RANGE = (1, 99)
ZTEST_SIGMA_RANGE = (0.1, 1000.0)


def _params(query: QueryInput) -> Dict[str, str]:
    if isinstance(query, Mapping):
        return {str(k): str(v) for k, v in query.items()}
    return dict(parse_qsl(query.lstrip("?"), keep_blank_values=True))


def _number(value: Optional[str]) -> Optional[float]:
    if value is None:
        return None
    text = value.strip()
    if not text:
        return None
    try:
        number = float(text)
    except ValueError:
        return None
    return number if math.isfinite(number) else None


def _clamp(value: float, bounds: tuple) -> float:
    lo, hi = bounds
    return max(lo, min(hi, value))


def _build(family: str, params: Dict[str, float]) -> DistributionSpec:
    try:
        return get_distribution(family, **params)
    except ParameterError as exc:
        raise QueryDecodeError(str(exc)) from exc


def parse_distribution(text: str) -> DistributionSpec:
    """Parse ``normal(0,1)``-style text (or a bare family name) into a variant.

    Missing or non-numeric positional values fall back to the visualizer
    defaults.
    """
    text = text.strip()
    match = _DIST_PATTERN.match(text)
    raw_family, raw_args = (match.group(1), match.group(2)) if match else (text, "")
    try:
        family = canonical_family(raw_family)
    except ParameterError as exc:
        raise QueryDecodeError(f"Unknown distribution in {text!r}") from exc

    values = [v.strip() for v in raw_args.split(",")] if raw_args.strip() else []
    params = {name: DEFAULT_PARAMS[name] for name in PARAM_ORDER[family]}
    for name, raw in zip(PARAM_ORDER[family], values):
        number = _number(raw)
        if number is not None:
            params[name] = number
    return _build(family, params)


def format_distribution(distribution: DistributionSpec) -> str:
    args = ",".join(f"{v:g}" for v in distribution.params().values())
    return f"{distribution.family}({args})"


@dataclass(frozen=True)
class CLTQuery:
    distribution: DistributionSpec
    sample_count: int = 1000
    sample_size: int = 10


def parse_clt_query(query: QueryInput) -> CLTQuery:
    params = _params(query)
    distribution = parse_distribution(params["dist"]) if params.get("dist") else get_distribution("normal")
    count = _number(params.get("sampleCount"))
    size = _number(params.get("sampleSize"))
    return CLTQuery(
        distribution=distribution,
        sample_count=int(_clamp(count, SAMPLE_COUNT_RANGE)) if count is not None else 1000,
        sample_size=int(_clamp(size, SAMPLE_SIZE_RANGE)) if size is not None else 10,
    )


def encode_clt_query(query: CLTQuery) -> str:
    return "&".join(
        [
            f"dist={format_distribution(query.distribution)}",
            f"sampleCount={query.sample_count}",
            f"sampleSize={query.sample_size}",
        ]
    )


def _curve_from_json(family: str, item: object) -> Optional[CurveConfig]:
    if not isinstance(item, dict) or not isinstance(item.get("color"), str):
        return None
    values = {}
    for name in PARAM_ORDER[family]:
        value = item.get(name, item.get("lam") if name == "lambda" else None)
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            return None
        values[name] = float(value)
    name = item.get("name") if isinstance(item.get("name"), str) else None
    return CurveConfig(_build(family, values), color=item["color"], name=name)


def _curve_from_csv(family: str, value: str) -> Optional[CurveConfig]:
    order = PARAM_ORDER[family]
    parts = value.split(",")
    if len(parts) < len(order) + 1:
        return None
    raw_values, color, name_parts = parts[: len(order)], parts[len(order)], parts[len(order) + 1 :]
    if not color or any(not v for v in raw_values):
        return None
    values = {}
    for name, raw in zip(order, raw_values):
        number = _number(raw)
        if number is None:
            raise QueryDecodeError(f"Invalid {name} value {raw!r} in curve {value!r}")
        values[name] = number
    name = ",".join(name_parts) if name_parts else None
    return CurveConfig(_build(family, values), color=color, name=name or None)


def parse_curve_query(family: str, query: QueryInput) -> List[CurveConfig]:
    """Decode the curve list of a distribution-curve page.

    The JSON ``curves`` parameter wins over ``curve1``, ``curve2``, ...;
    numbered curves are read until the first missing or incomplete entry.
    JSON entries with missing fields are skipped.
    """
    try:
        family = canonical_family(family)
    except ParameterError as exc:
        raise QueryDecodeError(str(exc)) from exc
    params = _params(query)
    curves: List[CurveConfig] = []

    if params.get("curves"):
        try:
            items = json.loads(params["curves"])
        except json.JSONDecodeError as exc:
            raise QueryDecodeError(f"Invalid curves JSON: {exc}") from exc
        if not isinstance(items, list):
            raise QueryDecodeError("curves must be a JSON array")
        for item in items:
            curve = _curve_from_json(family, item)
            if curve is not None:
                curves.append(curve)
        return curves

    idx = 1
    while params.get(f"curve{idx}"):
        curve = _curve_from_csv(family, params[f"curve{idx}"])
        if curve is None:
            break
        curves.append(curve)
        idx += 1
    return curves


def encode_curve_query(curves: List[CurveConfig]) -> str:
    parts = []
    for i, curve in enumerate(curves, start=1):
        values = ",".join(f"{v:g}" for v in curve.distribution.params().values())
        color = curve.color.lstrip("#")
        name = f",{quote(curve.name, safe='')}" if curve.name else ""
        parts.append(f"curve{i}={values},{color}{name}")
    return "&".join(parts)


@dataclass(frozen=True)
class IntervalQuery:
    confidence: float = 90
    sample_size: int = 1
    sample_count: int = 30


def parse_interval_query(query: QueryInput) -> IntervalQuery:
    params = _params(query)
    conf = _number(params.get("confLevel"))
    size = _number(params.get("sampleSize"))
    count = _number(params.get("sampleCount"))
    return IntervalQuery(
        confidence=_clamp(conf, PERCENT_RANGE) if conf is not None else 90,
        sample_size=int(_clamp(size, SAMPLE_SIZE_RANGE)) if size is not None else 1,
        sample_count=int(_clamp(count, INTERVAL_COUNT_RANGE)) if count is not None else 30,
    )


@dataclass(frozen=True)
class ZTestQuery:
    alpha: float = 5
    tail: Tail = "two"
    sample_mean: float = 1.2
    mu: float = 1.0
    sigma: float = 1.0
    n: int = 30


def parse_ztest_query(query: QueryInput) -> ZTestQuery:
    """Decode z-test inputs, clamping them to the ranges the widget accepts."""
    params = _params(query)
    defaults = ZTestQuery()
    alpha = _number(params.get("alpha"))
    mu = _number(params.get("mu"))
    sigma = _number(params.get("sigma"))
    n = _number(params.get("n"))
    sample_mean = _number(params.get("sampleMean"))
    tail = params.get("tail")
    return ZTestQuery(
        alpha=_clamp(alpha, PERCENT_RANGE) if alpha is not None else defaults.alpha,
        tail=tail if tail in TAILS else defaults.tail,  # type: ignore[arg-type]
        sample_mean=sample_mean if sample_mean is not None else defaults.sample_mean,
        mu=mu if mu is not None else defaults.mu,
        sigma=_clamp(sigma, ZTEST_SIGMA_RANGE) if sigma is not None else defaults.sigma,
        n=int(_clamp(n, SAMPLE_SIZE_RANGE)) if n is not None else defaults.n,
    )


__all__ = [
    "CLTQuery",
    "IntervalQuery",
    "ZTestQuery",
    "parse_distribution",
    "format_distribution",
    "parse_clt_query",
    "encode_clt_query",
    "parse_curve_query",
    "encode_curve_query",
    "parse_interval_query",
    "parse_ztest_query",
]
