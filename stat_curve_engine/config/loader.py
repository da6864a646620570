"""Layered configuration: CLI > environment > config file > defaults."""

from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Any, Callable, Dict, Mapping, Optional

import yaml

from stat_curve_engine.exceptions import ConfigValidationError
from stat_curve_engine.utils.logging import get_logger

log = get_logger(__name__, component="config")

Caster = Callable[[Any], Any]


def load_config_file(path: Path) -> Dict[str, Any]:
    """Read a JSON or YAML mapping from ``path``."""
    if not path.exists():
        raise ConfigValidationError(f"Config file not found: {path}")
    suffix = path.suffix.lower()
    text = path.read_text()
    try:
        if suffix == ".json":
            content = json.loads(text)
        elif suffix in {".yml", ".yaml"}:
            content = yaml.safe_load(text)
        else:
            raise ConfigValidationError("Config file must be JSON or YAML")
    except (json.JSONDecodeError, yaml.YAMLError) as exc:
        raise ConfigValidationError(f"Could not parse config file {path}: {exc}") from exc
    if content is None:
        return {}
    if not isinstance(content, dict):
        raise ConfigValidationError(f"Config file {path} must contain a mapping")
    return content


def _cast(key: str, value: Any, casters: Mapping[str, Caster], source: str) -> Any:
    caster = casters.get(key)
    if caster is None or value is None:
        return value
    try:
        return caster(value)
    except (TypeError, ValueError) as exc:
        raise ConfigValidationError(f"Invalid value for {key} from {source}: {value!r}") from exc


def load_config_with_precedence(
    config_path: Optional[Path],
    env_prefix: str,
    cli_values: Mapping[str, Any],
    defaults: Mapping[str, Any],
    casters: Optional[Mapping[str, Caster]] = None,
) -> Dict[str, Any]:
    """Merge configuration layers for the keys named in ``defaults``.

    A CLI value of ``None`` means "not given" and falls through to the
    environment variable ``{env_prefix}{KEY}``, then the config file, then
    the default. Unknown keys in the config file are rejected.
    """
    casters = casters or {}
    merged: Dict[str, Any] = dict(defaults)
    sources = {key: "default" for key in defaults}

    if config_path is not None:
        file_values = load_config_file(Path(config_path))
        unknown = sorted(set(file_values) - set(defaults))
        if unknown:
            raise ConfigValidationError(f"Unknown config keys: {', '.join(unknown)}")
        for key, value in file_values.items():
            merged[key] = _cast(key, value, casters, "file")
            sources[key] = "file"

    for key in defaults:
        raw = os.environ.get(f"{env_prefix}{key.upper()}")
        if raw is not None and raw != "":
            merged[key] = _cast(key, raw, casters, "env")
            sources[key] = "env"

    for key, value in cli_values.items():
        if value is not None:
            merged[key] = _cast(key, value, casters, "cli")
            sources[key] = "cli"

    log.debug("Config resolved", extra={"sources": sources})
    return merged


__all__ = ["load_config_file", "load_config_with_precedence"]
