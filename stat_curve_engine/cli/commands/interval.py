"""Confidence-interval coverage CLI command wiring."""

from __future__ import annotations

import json
from pathlib import Path

import typer

from stat_curve_engine.cli.validation import validate_interval_inputs
from stat_curve_engine.config.loader import load_config_with_precedence
from stat_curve_engine.inference import confidence_intervals, simulate_coverage
from stat_curve_engine.query.codec import parse_interval_query
from stat_curve_engine.utils.logging import get_logger
from stat_curve_engine.utils.profiling import track_time

log = get_logger(__name__, component="cli_interval")


def interval(
    config: Path | None = typer.Option(None, "--config", help="Optional YAML/JSON config path"),
    query: str | None = typer.Option(None, "--query", help="Shared URL query, e.g. confLevel=95&sampleCount=30"),
    confidence: float | None = typer.Option(None, "--confidence", help="Confidence level in percent"),
    sample_count: int | None = typer.Option(None, "--sample-count", help="Number of intervals"),
    sample_size: int | None = typer.Option(None, "--sample-size", help="Standard-normal draws per interval"),
    seed: int | None = typer.Option(None, help="Random seed"),
    show_intervals: bool = typer.Option(False, "--intervals", help="Include every interval in the output"),
) -> None:
    """Draw repeated standard-normal samples and count intervals covering the true mean."""
    defaults = {"confidence": 90.0, "sample_count": 30, "sample_size": 1, "seed": None}

    if query:
        decoded = parse_interval_query(query)
        confidence = decoded.confidence if confidence is None else confidence
        sample_count = decoded.sample_count if sample_count is None else sample_count
        sample_size = decoded.sample_size if sample_size is None else sample_size

    cli_values = {
        "confidence": confidence,
        "sample_count": sample_count,
        "sample_size": sample_size,
        "seed": seed,
    }
    casters = {"confidence": float, "sample_count": int, "sample_size": int, "seed": int}
    cfg = load_config_with_precedence(
        config_path=config,
        env_prefix="SCE_",
        cli_values=cli_values,
        defaults=defaults,
        casters=casters,
    )
    validate_interval_inputs(
        confidence=cfg["confidence"],
        sample_count=cfg["sample_count"],
        sample_size=cfg["sample_size"],
    )

    with track_time("cli_interval", sample_count=cfg["sample_count"], sample_size=cfg["sample_size"]):
        coverage, means = simulate_coverage(cfg["confidence"], cfg["sample_count"], cfg["sample_size"], cfg["seed"])

    payload = {"config": cfg, "coverage": coverage.to_dict()}
    if show_intervals:
        payload["intervals"] = [
            {"mean": m, "lower": lo, "upper": hi, "covers": lo <= 0.0 <= hi}
            for m, (lo, hi) in zip(means.tolist(), confidence_intervals(means, coverage.z, coverage.standard_error))
        ]
    typer.echo(json.dumps(payload, indent=2, default=str))
