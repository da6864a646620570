"""Structured logging utilities with JSON output."""

from __future__ import annotations

import json
import logging
import sys
from datetime import datetime, timezone
from typing import Any, Dict, Optional

DEFAULT_FIELDS = {
    "component",
    "family",
    "sample_count",
    "sample_size",
    "bin_count",
    "curves",
    "segment",
    "duration_ms",
}


class JSONFormatter(logging.Formatter):
    """JSON formatter adding common contextual fields when present."""

    def format(self, record: logging.LogRecord) -> str:  # type: ignore[override]
        payload: Dict[str, Any] = {
            "timestamp": datetime.now(timezone.utc).isoformat().replace("+00:00", "Z"),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        for field in DEFAULT_FIELDS:
            if hasattr(record, field):
                payload[field] = getattr(record, field)
        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)
        return json.dumps(payload, default=str)


class ContextFilter(logging.Filter):
    """Attach a default component to records that do not carry one."""

    def __init__(self, component: Optional[str] = None) -> None:
        super().__init__()
        self.component = component

    def filter(self, record: logging.LogRecord) -> bool:  # type: ignore[override]
        if self.component and not hasattr(record, "component"):
            record.component = self.component
        return True


def configure_logging(component: Optional[str] = None, level: int = logging.INFO) -> None:
    """Configure root logger with structured JSON output on stderr.

    Replaces any existing root handlers; call it from entry points, not library code.

    Stdout is reserved for command results so JSON payloads stay parseable.
    """

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(JSONFormatter())
    handler.addFilter(ContextFilter(component))

    root = logging.getLogger()
    root.handlers.clear()
    root.setLevel(level)
    root.addHandler(handler)


def get_logger(name: str, component: Optional[str] = None) -> logging.Logger:
    """Convenience helper to fetch a logger with an optional component default."""

    logger = logging.getLogger(name)
    if component and not any(
        isinstance(f, ContextFilter) and f.component == component for f in logger.filters
    ):
        logger.addFilter(ContextFilter(component))
    return logger
