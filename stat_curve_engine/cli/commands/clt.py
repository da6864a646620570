"""CLT CLI command wiring."""

from __future__ import annotations

import json
from pathlib import Path

import typer

from stat_curve_engine.aggregation import histogram, summarize
from stat_curve_engine.cli.validation import validate_clt_inputs
from stat_curve_engine.config.loader import load_config_with_precedence
from stat_curve_engine.mc.generator import generate_samples
from stat_curve_engine.query.codec import CLTQuery, encode_clt_query, format_distribution, parse_clt_query
from stat_curve_engine.schema.run_config import SimulationConfig
from stat_curve_engine.utils.logging import get_logger
from stat_curve_engine.utils.profiling import track_time

log = get_logger(__name__, component="cli_clt")


def clt(
    config: Path | None = typer.Option(None, "--config", help="Optional YAML/JSON config path"),
    query: str | None = typer.Option(None, "--query", help="Shared URL query, e.g. dist=normal(0,1)&sampleSize=10"),
    dist: str | None = typer.Option(None, "--dist", help="Distribution, e.g. exponential(1)"),
    sample_count: int | None = typer.Option(None, "--sample-count", help="Number of sample means"),
    sample_size: int | None = typer.Option(None, "--sample-size", help="Draws averaged per mean"),
    bins: int | None = typer.Option(None, "--bins", help="Histogram bin count"),
    seed: int | None = typer.Option(None, help="Random seed"),
    output: Path | None = typer.Option(None, help="Write the JSON result to this path"),
) -> None:
    """Simulate sample means and bin both the raw draws and the means."""
    defaults = SimulationConfig().to_dict()

    # a shared query seeds values the explicit flags can still override
    if query:
        decoded = parse_clt_query(query)
        dist = dist or format_distribution(decoded.distribution)
        sample_count = decoded.sample_count if sample_count is None else sample_count
        sample_size = decoded.sample_size if sample_size is None else sample_size

    cli_values = {
        "distribution": dist,
        "sample_count": sample_count,
        "sample_size": sample_size,
        "bin_count": bins,
        "seed": seed,
    }
    casters = {"distribution": str, "sample_count": int, "sample_size": int, "bin_count": int, "seed": int}

    cfg = load_config_with_precedence(
        config_path=config,
        env_prefix="SCE_",
        cli_values=cli_values,
        defaults=defaults,
        casters=casters,
    )
    validate_clt_inputs(
        sample_count=cfg["sample_count"],
        sample_size=cfg["sample_size"],
        bins=cfg["bin_count"],
        seed=cfg["seed"],
    )
    run = SimulationConfig.from_dict(cfg)
    distribution = run.to_distribution()

    with track_time("cli_clt", family=distribution.family):
        result = generate_samples(distribution, run.sample_count, run.sample_size, run.seed)
        payload = {
            "config": run.to_dict(),
            "query": encode_clt_query(CLTQuery(distribution, run.sample_count, run.sample_size)),
            "theoretical": {
                "mean": distribution.mean,
                "variance": distribution.variance,
                "mean_variance": distribution.variance / run.sample_size,
            },
            "raw": {
                "summary": summarize(result.raw).to_dict(),
                "histogram": histogram(result.raw, run.bin_count).to_dict(),
            },
            "means": {
                "summary": summarize(result.means).to_dict(),
                "histogram": histogram(result.means, run.bin_count).to_dict(),
            },
        }

    text = json.dumps(payload, indent=2, default=str)
    if output:
        output.parent.mkdir(parents=True, exist_ok=True)
        output.write_text(text)
        log.info("CLT result written", extra={"path": str(output)})
    typer.echo(text)
