import pytest

from stat_curve_engine.exceptions import DomainError, ParameterError
from stat_curve_engine.inference import critical_z, critical_z_for_alpha, decision, p_value, validate_tail


def test_two_sided_table_values():
    assert critical_z(90) == 1.645
    assert critical_z(95) == 1.96
    assert critical_z(99) == 2.576


def test_two_sided_computed_values():
    assert critical_z(93) == pytest.approx(1.8119, abs=1e-4)
    assert critical_z(80) == pytest.approx(1.281552, abs=1e-6)


def test_one_sided_levels_skip_the_table():
    assert critical_z(95, "right") == pytest.approx(1.644854, abs=1e-6)
    assert critical_z(90, "left") == pytest.approx(1.281552, abs=1e-6)


def test_critical_z_for_alpha():
    assert critical_z_for_alpha(5, "two") == pytest.approx(1.959964, abs=1e-6)
    assert critical_z_for_alpha(5, "left") == pytest.approx(1.644854, abs=1e-6)
    assert critical_z_for_alpha(1, "right") == pytest.approx(2.326348, abs=1e-6)


@pytest.mark.parametrize("level", [0, 100, -5, 150])
def test_percentages_outside_open_interval(level):
    with pytest.raises(DomainError):
        critical_z(level)
    with pytest.raises(DomainError):
        critical_z_for_alpha(level)


def test_unknown_tail():
    with pytest.raises(ParameterError):
        validate_tail("both")
    with pytest.raises(ParameterError):
        critical_z(95, "up")


def test_two_tailed_p_value_at_196():
    p = p_value(1.96, "two")
    assert p == pytest.approx(0.05, abs=1e-4)
    assert decision(0.05, 5) == "fail-to-reject"
    assert decision(0.0499, 5) == "reject"


def test_one_tailed_p_values():
    assert p_value(-1.0, "left") == pytest.approx(0.158655, abs=1e-6)
    assert p_value(1.0, "right") == pytest.approx(0.158655, abs=1e-6)
    assert p_value(-1.0, "two") == p_value(1.0, "two")
