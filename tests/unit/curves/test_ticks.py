import pytest

from stat_curve_engine.curves import discrete_tick_visibility, discrete_ticks, linear_ticks, sigma_ticks, y_ticks
from stat_curve_engine.exceptions import ParameterError


def test_linear_ticks():
    assert linear_ticks(0.0, 8.0) == [0.0, 1.0, 2.0, 3.0, 4.0, 5.0, 6.0, 7.0, 8.0]
    assert linear_ticks(-1.0, 1.0, divisions=2) == [-1.0, 0.0, 1.0]


def test_y_ticks():
    assert y_ticks(1.0) == pytest.approx([0.0, 0.2, 0.4, 0.6, 0.8, 1.0])
    assert y_ticks(0.0, count=2) == [0.0, 0.0, 0.0]


def test_tick_counts_must_be_positive():
    with pytest.raises(ParameterError):
        linear_ticks(0.0, 1.0, divisions=0)
    with pytest.raises(ParameterError):
        y_ticks(1.0, count=0)


def test_small_discrete_axes_label_everything():
    assert discrete_tick_visibility(10) == [True] * 10
    assert discrete_tick_visibility(30) == [True] * 30
    assert discrete_tick_visibility(0) == []


def test_large_discrete_axes_are_decimated():
    show = discrete_tick_visibility(45)
    # step is ceil(45 / 20) == 3
    assert show[0] and show[3] and not show[1]
    assert show[43] is False
    assert show[44] is True

    show = discrete_tick_visibility(40)
    assert show[38] is True
    assert show[39] is False


def test_discrete_ticks_pairs_categories():
    assert discrete_ticks(0, 3) == [(0, True), (1, True), (2, True), (3, True)]
    assert discrete_ticks(3, 2) == []


def test_sigma_ticks_align_on_mu():
    assert sigma_ticks(0.0, 1.0, -4.5, 4.5) == [-4.0, -2.0, 0.0, 2.0, 4.0]
    assert sigma_ticks(10.0, 2.0, 5.0, 15.0) == [6.0, 8.0, 10.0, 12.0, 14.0]


def test_sigma_ticks_requires_positive_sigma():
    with pytest.raises(ParameterError):
        sigma_ticks(0.0, 0.0, -1.0, 1.0)
