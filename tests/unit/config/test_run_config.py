import pytest

from stat_curve_engine.distributions.models import Poisson
from stat_curve_engine.exceptions import ConfigValidationError
from stat_curve_engine.schema.run_config import SimulationConfig


def test_defaults_round_trip():
    cfg = SimulationConfig()
    assert SimulationConfig.from_dict(cfg.to_dict()) == cfg
    assert cfg.to_dict()["bin_count"] == 40


def test_to_distribution():
    cfg = SimulationConfig(distribution="poisson(3)", sample_count=10, sample_size=2, seed=1)
    assert cfg.to_distribution() == Poisson(3.0)


@pytest.mark.parametrize(
    "overrides",
    [
        {"sample_count": 0},
        {"sample_size": 0},
        {"sample_size": 10_001},
        {"bin_count": 0},
        {"seed": -1},
        {"distribution": ""},
        {"distribution": "normal(0,0)"},
        {"distribution": "cauchy(1)"},
    ],
)
def test_invalid_values(overrides):
    with pytest.raises(ConfigValidationError):
        SimulationConfig(**overrides)


def test_from_dict_rejects_unknown_fields():
    with pytest.raises(ConfigValidationError):
        SimulationConfig.from_dict({"n_paths": 10})
