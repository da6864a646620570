"""Distribution-curve CLI command wiring."""

from __future__ import annotations

import json
from typing import List, Optional

import typer

from stat_curve_engine.curves import (
    CurveConfig,
    discrete_ticks,
    linear_ticks,
    resolve_domain,
    y_ticks,
)
from stat_curve_engine.distributions.factory import canonical_family, get_distribution
from stat_curve_engine.exceptions import ConfigValidationError, ParameterError
from stat_curve_engine.query.codec import encode_curve_query, parse_curve_query
from stat_curve_engine.utils.logging import get_logger

log = get_logger(__name__, component="cli_curve")


def _values(curve: CurveConfig, domain, points: int, cumulative: bool) -> list[list[float]]:
    dist = curve.distribution
    fn = dist.cdf if cumulative else dist.pdf
    if dist.discrete:
        return [[k, fn(k)] for k in range(int(domain.min_x), int(domain.max_x) + 1)]
    step = domain.width / points
    return [[domain.min_x + i * step, fn(domain.min_x + i * step)] for i in range(points + 1)]


def curve(
    family: str = typer.Argument(..., help="normal, exponential, uniform, poisson or uniform_discrete"),
    curves: Optional[List[str]] = typer.Option(
        None, "--curve", help="Curve as params,color[,name], e.g. 0,1,2563eb,A (repeatable)"
    ),
    query: str | None = typer.Option(None, "--query", help="Shared URL query with curve1=... or curves=[...]"),
    cumulative: bool = typer.Option(False, "--cumulative/--density", help="Plot the CDF instead of the density"),
    points: int = typer.Option(0, "--points", help="Evaluate continuous curves at this many intervals (0 = skip)"),
) -> None:
    """Resolve a shared plotting domain and axis ticks for overlaid curves."""
    try:
        family = canonical_family(family)
    except ParameterError as exc:
        raise ConfigValidationError(str(exc)) from exc
    if points < 0:
        raise ConfigValidationError("points must be >= 0")

    if curves:
        configs = parse_curve_query(family, {f"curve{i}": spec for i, spec in enumerate(curves, start=1)})
        if len(configs) != len(curves):
            raise ConfigValidationError("Each --curve needs every parameter and a color")
    elif query:
        configs = parse_curve_query(family, query)
    else:
        configs = [CurveConfig(get_distribution(family))]

    domain = resolve_domain(configs, family, cumulative=cumulative)
    if configs and configs[0].distribution.discrete:
        x_ticks = [k for k, visible in discrete_ticks(int(domain.min_x), int(domain.max_x)) if visible]
    else:
        x_ticks = linear_ticks(domain.min_x, domain.max_x)

    payload = {
        "family": family,
        "cumulative": cumulative,
        "domain": domain.to_dict(),
        "x_ticks": x_ticks,
        "y_ticks": y_ticks(domain.max_y),
        "query": encode_curve_query(configs),
        "curves": [],
    }
    for cfg in configs:
        entry = {
            "name": cfg.name,
            "color": cfg.color,
            "params": cfg.distribution.params(),
            "mean": cfg.distribution.mean,
            "variance": cfg.distribution.variance,
        }
        if points or cfg.distribution.discrete:
            entry["values"] = _values(cfg, domain, max(points, 1), cumulative)
        payload["curves"].append(entry)

    log.info("Curves resolved", extra={"family": family, "curves": len(configs)})
    typer.echo(json.dumps(payload, indent=2, default=str))
