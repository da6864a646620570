"""Typer CLI entrypoint with structured error handling."""

from __future__ import annotations

import sys

import typer

from stat_curve_engine.cli.commands.clt import clt
from stat_curve_engine.cli.commands.curve import curve
from stat_curve_engine.cli.commands.interval import interval
from stat_curve_engine.cli.commands.ztest import ztest
from stat_curve_engine.exceptions import (
    ConfigError,
    DomainError,
    ParameterError,
    ResourceLimitError,
)
from stat_curve_engine.utils.logging import configure_logging, get_logger

app = typer.Typer(help="Statistical sampling and distribution-curve engine")


app.command()(clt)
app.command()(curve)
app.command()(interval)
app.command()(ztest)


log = get_logger(__name__, component="cli")


def main() -> None:
    configure_logging(component="cli")
    try:
        app()
    except ConfigError as exc:
        log.error(str(exc))
        sys.exit(1)
    except (DomainError, ParameterError) as exc:
        log.error(f"Invalid parameters: {exc}")
        sys.exit(2)
    except ResourceLimitError as exc:
        log.error(f"Resource limit exceeded: {exc}")
        sys.exit(4)
    except KeyboardInterrupt:
        log.info("Interrupted")
        sys.exit(130)
    except Exception:
        log.exception("Unhandled exception")
        sys.exit(255)


if __name__ == "__main__":
    sys.exit(main())
