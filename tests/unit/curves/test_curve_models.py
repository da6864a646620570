import pytest

from stat_curve_engine.curves import COMMON_COLORS, CurveConfig, next_color, normalize_color
from stat_curve_engine.distributions.models import Normal, Poisson
from stat_curve_engine.exceptions import ConfigValidationError
from stat_curve_engine.interfaces.random_source import SequenceSource


def test_normalize_color():
    assert normalize_color("2563EB") == "#2563eb"
    assert normalize_color("#abc") == "#abc"
    for bad in ("zzz", "#12345", ""):
        with pytest.raises(ConfigValidationError):
            normalize_color(bad)


def test_curve_config_normalizes_color():
    curve = CurveConfig(Poisson(2.0), "e11d48", "A")
    assert curve.color == "#e11d48"
    assert curve.family == "poisson"
    assert CurveConfig(Normal()).color == COMMON_COLORS[0]


def test_next_color_prefers_unused():
    used = [c.upper() for c in COMMON_COLORS[:-1]]
    assert next_color(used, SequenceSource([0.99])) == COMMON_COLORS[-1]


def test_next_color_reuses_palette_when_exhausted():
    assert len(COMMON_COLORS) == 9
    assert next_color(COMMON_COLORS, SequenceSource([0.0])) == COMMON_COLORS[0]
    assert next_color([], SequenceSource([0.5])) == COMMON_COLORS[4]
