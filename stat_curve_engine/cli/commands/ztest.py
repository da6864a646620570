"""Z-test CLI command wiring."""

from __future__ import annotations

import json
from pathlib import Path

import typer
from rich.console import Console
from rich.table import Table

from stat_curve_engine.cli.validation import validate_ztest_inputs
from stat_curve_engine.config.loader import load_config_with_precedence
from stat_curve_engine.curves import sigma_ticks
from stat_curve_engine.inference import critical_regions, evaluate_z_test, standard_error
from stat_curve_engine.inference.ztest import plot_domain
from stat_curve_engine.query.codec import parse_ztest_query
from stat_curve_engine.utils.logging import get_logger

log = get_logger(__name__, component="cli_ztest")
console = Console()


def ztest(
    config: Path | None = typer.Option(None, "--config", help="Optional YAML/JSON config path"),
    query: str | None = typer.Option(None, "--query", help="Shared URL query, e.g. alpha=5&tail=two&n=30"),
    sample_mean: float | None = typer.Option(None, "--sample-mean", help="Observed sample mean"),
    mu: float | None = typer.Option(None, help="Hypothesized population mean"),
    sigma: float | None = typer.Option(None, help="Known population standard deviation"),
    n: int | None = typer.Option(None, "-n", "--n", help="Sample size"),
    alpha: float | None = typer.Option(None, help="Significance level in percent"),
    tail: str | None = typer.Option(None, help="left, right or two"),
    as_json: bool = typer.Option(False, "--json", help="Emit JSON instead of a table"),
) -> None:
    """Evaluate a one-sample z-test with known sigma."""
    defaults = {"sample_mean": 1.2, "mu": 1.0, "sigma": 1.0, "n": 30, "alpha": 5.0, "tail": "two"}

    if query:
        decoded = parse_ztest_query(query)
        sample_mean = decoded.sample_mean if sample_mean is None else sample_mean
        mu = decoded.mu if mu is None else mu
        sigma = decoded.sigma if sigma is None else sigma
        n = decoded.n if n is None else n
        alpha = decoded.alpha if alpha is None else alpha
        tail = decoded.tail if tail is None else tail

    cli_values = {"sample_mean": sample_mean, "mu": mu, "sigma": sigma, "n": n, "alpha": alpha, "tail": tail}
    casters = {"sample_mean": float, "mu": float, "sigma": float, "n": int, "alpha": float, "tail": str}
    cfg = load_config_with_precedence(
        config_path=config,
        env_prefix="SCE_",
        cli_values=cli_values,
        defaults=defaults,
        casters=casters,
    )
    validate_ztest_inputs(alpha=cfg["alpha"], tail=cfg["tail"], sigma=cfg["sigma"], n=cfg["n"])

    result = evaluate_z_test(cfg["sample_mean"], cfg["mu"], cfg["sigma"], cfg["n"], cfg["alpha"], cfg["tail"])
    se = standard_error(cfg["sigma"], cfg["n"])
    domain = plot_domain(result, cfg["mu"], cfg["sigma"])
    regions = critical_regions(cfg["mu"], cfg["sigma"], cfg["n"], result.z_critical, result.tail, domain)
    log.info("z-test completed", extra={"segment": "ztest"})

    if as_json:
        payload = {
            "config": cfg,
            "result": result.to_dict(),
            "standard_error": se,
            "domain": domain.to_dict(),
            "critical_regions": [list(r) for r in regions],
            "x_ticks": sigma_ticks(cfg["mu"], cfg["sigma"], domain.min_x, domain.max_x),
        }
        typer.echo(json.dumps(payload, indent=2, default=str))
        return

    table = Table(title=f"One-sample z-test ({result.tail}-tailed, alpha={result.alpha:g}%)")
    table.add_column("Statistic")
    table.add_column("Value", justify="right")
    table.add_row("z statistic", f"{result.z_statistic:.4f}")
    table.add_row("z critical", f"{result.z_critical:.4f}")
    table.add_row("p-value", f"{result.p_value:.4f}")
    table.add_row("standard error", f"{se:.4f}")
    table.add_row("decision", result.decision)
    console.print(table)
