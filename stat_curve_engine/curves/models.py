"""Curve configuration and palette handling."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Optional, Sequence

from stat_curve_engine.distributions.models import DistributionSpec
from stat_curve_engine.exceptions import ConfigValidationError
from stat_curve_engine.interfaces.random_source import UniformSource, as_source

COMMON_COLORS = (
    "#2563eb",  # blue-600
    "#e11d48",  # rose-600
    "#059669",  # emerald-600
    "#f59e42",  # amber-500
    "#a21caf",  # purple-700
    "#0e7490",  # cyan-700
    "#f43f5e",  # pink-600
    "#b45309",  # yellow-700
    "#52525b",  # zinc-600
)

DEFAULT_COLOR = COMMON_COLORS[0]


def normalize_color(color: str) -> str:
    """Return ``#rrggbb`` for inputs with or without the leading hash."""
    value = color.strip().lstrip("#").lower()
    if len(value) not in (3, 6) or any(c not in "0123456789abcdef" for c in value):
        raise ConfigValidationError(f"Invalid color: {color!r}")
    return f"#{value}"


@dataclass(frozen=True)
class CurveConfig:
    distribution: DistributionSpec
    color: str = DEFAULT_COLOR
    name: Optional[str] = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "color", normalize_color(self.color))

    @property
    def family(self) -> str:
        return self.distribution.family


def next_color(used: Iterable[str], source: UniformSource | int | None = None, palette: Sequence[str] = COMMON_COLORS) -> str:
    """Pick a random palette colour not in ``used``; any palette colour once all are taken."""
    taken = {normalize_color(c) for c in used}
    available = [c for c in palette if c not in taken] or list(palette)
    rng = as_source(source)
    idx = min(int(rng.uniform() * len(available)), len(available) - 1)
    return available[idx]


__all__ = ["COMMON_COLORS", "DEFAULT_COLOR", "CurveConfig", "next_color", "normalize_color"]
