import math

import pytest

from stat_curve_engine.curves.domain import DomainScale
from stat_curve_engine.exceptions import ParameterError
from stat_curve_engine.inference import critical_regions, evaluate, evaluate_z_test, standard_error, z_statistic
from stat_curve_engine.inference.ztest import plot_domain


def test_standard_error_and_statistic():
    assert standard_error(2.0, 4) == 1.0
    assert z_statistic(1.2, 1.0, 1.0, 30) == pytest.approx(0.2 * math.sqrt(30))
    with pytest.raises(ParameterError):
        standard_error(0.0, 10)
    with pytest.raises(ParameterError):
        standard_error(1.0, 0)


def test_default_widget_inputs_fail_to_reject():
    result = evaluate_z_test(1.2, 1.0, 1.0, 30, alpha=5, tail="two")
    assert result.z_statistic == pytest.approx(1.095445, abs=1e-6)
    assert result.p_value == pytest.approx(0.2733, abs=1e-3)
    assert not result.reject_null
    assert result.decision == "fail-to-reject"
    payload = result.to_dict()
    assert payload["decision"] == "fail-to-reject"
    assert payload["tail"] == "two"


def test_large_shift_rejects():
    result = evaluate_z_test(1.5, 1.0, 1.0, 100, alpha=5, tail="right")
    assert result.z_statistic == pytest.approx(5.0)
    assert result.reject_null
    assert result.z_critical == pytest.approx(1.644854, abs=1e-6)


def test_evaluate_at_boundary():
    result = evaluate(1.96, 5, "two")
    assert result.p_value == pytest.approx(0.05, abs=1e-4)
    assert result.decision == "fail-to-reject"


def test_critical_regions_two_tailed():
    domain = DomainScale(-4.5, 4.5, 0.4)
    regions = critical_regions(0.0, 1.0, 4, 1.96, "two", domain)
    assert regions == [(-4.5, pytest.approx(-0.98)), (pytest.approx(0.98), 4.5)]


def test_critical_regions_single_tails():
    domain = DomainScale(-4.5, 4.5, 0.4)
    assert critical_regions(0.0, 1.0, 4, 1.645, "left", domain) == [(-4.5, pytest.approx(-0.8225))]
    assert critical_regions(0.0, 1.0, 4, 1.645, "right", domain) == [(pytest.approx(0.8225), 4.5)]


def test_critical_regions_clip_to_domain():
    domain = DomainScale(-4.5, 4.5, 0.4)
    assert critical_regions(0.0, 1.0, 1, 20.0, "two", domain) == [(-4.5, -4.5), (4.5, 4.5)]


def test_plot_domain_uses_result():
    result = evaluate(2.0, 5, "two")
    domain = plot_domain(result, 0.0, 1.0)
    assert (domain.min_x, domain.max_x) == (-4.5, 4.5)
