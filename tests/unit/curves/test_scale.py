import pytest

from stat_curve_engine.aggregation import histogram
from stat_curve_engine.curves import ChartGeometry, LinearScale
from stat_curve_engine.curves.domain import DomainScale
from stat_curve_engine.distributions.models import Normal
from stat_curve_engine.exceptions import ParameterError


def test_linear_scale_and_inverse():
    scale = LinearScale(0.0, 10.0, 40.0, 560.0)
    assert scale(5.0) == 300.0
    assert scale.invert(300.0) == 5.0


def test_zero_width_domain_does_not_divide_by_zero():
    assert LinearScale(3.0, 3.0, 0.0, 100.0)(3.0) == 0.0


def test_chart_geometry_defaults():
    geom = ChartGeometry()
    assert (geom.plot_width, geom.plot_height, geom.baseline) == (520, 220, 260)
    fx = geom.x_scale(DomainScale(0.0, 10.0, 1.0))
    assert (fx(0.0), fx(10.0)) == (55.0, 575.0)
    assert geom.x_scale(DomainScale(0.0, 10.0, 1.0), offset=False)(0.0) == 40.0
    fy = geom.y_scale(0.5)
    assert (fy(0.0), fy(0.5)) == (260.0, 40.0)
    assert geom.y_scale(0.0)(0.0) == 260.0


def test_curve_points_peak_at_top():
    dist = Normal()
    domain = DomainScale(-4.0, 4.0, dist.peak_density)
    points = ChartGeometry().curve_points(dist, domain, n=4)
    assert len(points) == 5
    assert points[0][0] == 55.0
    assert points[2] == pytest.approx((315.0, 40.0))
    with pytest.raises(ParameterError):
        ChartGeometry().curve_points(dist, domain, n=0)


def test_bar_slots():
    slots = ChartGeometry().bar_slots(0, 3)
    assert [s.category for s in slots] == [0, 1, 2, 3]
    assert slots[0].center == 120.0
    assert slots[0].width == 65.0
    assert slots[0].left == 87.5
    assert slots[-1].center == 510.0
    assert ChartGeometry().bar_slots(5, 4) == []


def test_histogram_bars_scale_to_tallest_bin():
    bars = ChartGeometry().histogram_bars(histogram([0.0, 1.0, 1.0], bin_count=2))
    assert [(b.x0, b.x1) for b in bars] == [(40.0, 300.0), (300.0, 560.0)]
    assert [b.height for b in bars] == [110.0, 220.0]
    assert [b.y for b in bars] == [150.0, 40.0]
    assert ChartGeometry().histogram_bars(histogram([])) == []
