import math

import numpy as np
import pytest

from stat_curve_engine.distributions.models import Exponential, Normal, Poisson, Uniform, UniformDiscrete
from stat_curve_engine.exceptions import ParameterError
from stat_curve_engine.interfaces.random_source import GeneratorSource, SequenceSource
from stat_curve_engine.sampling.dispatch import get_sampler
from stat_curve_engine.sampling.samplers import (
    sample_exponential,
    sample_normal,
    sample_poisson,
    sample_uniform,
    sample_uniform_discrete,
)


def test_box_muller_exact_value():
    source = SequenceSource([math.exp(-0.5), 0.5])
    # sqrt(-2 ln u) == 1 and cos(pi) == -1
    assert sample_normal(3.0, 2.0, source) == pytest.approx(1.0)


def test_exponential_inverse_transform():
    assert sample_exponential(2.0, SequenceSource([0.5])) == pytest.approx(math.log(2) / 2)


def test_zero_uniforms_are_redrawn():
    source = SequenceSource([0.0, 0.5])
    assert sample_exponential(1.0, source) == pytest.approx(math.log(2))
    assert source.draws == 2

    source = SequenceSource([0.0, math.exp(-0.5), 0.0, 0.5])
    assert math.isfinite(sample_normal(0.0, 1.0, source))
    assert source.draws == 4


def test_uniform_maps_linearly():
    assert sample_uniform(2.0, 4.0, SequenceSource([0.25])) == 2.5


def test_uniform_discrete_covers_both_ends():
    assert sample_uniform_discrete(1, 5, SequenceSource([0.0])) == 1
    assert sample_uniform_discrete(1, 5, SequenceSource([0.5])) == 3
    assert sample_uniform_discrete(1, 5, SequenceSource([0.999999])) == 5


def test_poisson_knuth_counts_draws():
    # exp(-1) ~= 0.368: 0.5 stays above, 0.25 falls below
    assert sample_poisson(1.0, SequenceSource([0.5])) == 1
    assert sample_poisson(1.0, SequenceSource([0.1])) == 0
    source = SequenceSource([0.9])
    k = sample_poisson(2.0, source)
    assert source.draws == k + 1


def test_normal_moments_over_many_draws():
    source = GeneratorSource(seed=7)
    draws = np.array([sample_normal(0.0, 1.0, source) for _ in range(100_000)])
    assert abs(draws.mean()) < 0.02
    assert abs(draws.var() - 1.0) < 0.03


def test_exponential_and_poisson_means():
    source = GeneratorSource(seed=11)
    exp_draws = [sample_exponential(2.0, source) for _ in range(50_000)]
    assert np.mean(exp_draws) == pytest.approx(0.5, abs=0.02)
    poisson_draws = [sample_poisson(4.0, source) for _ in range(20_000)]
    assert np.mean(poisson_draws) == pytest.approx(4.0, abs=0.08)
    assert min(poisson_draws) >= 0


def test_uniform_discrete_hits_every_value():
    source = GeneratorSource(seed=3)
    values = {sample_uniform_discrete(-2, 2, source) for _ in range(2_000)}
    assert values == {-2, -1, 0, 1, 2}


@pytest.mark.parametrize(
    "dist",
    [Normal(1.0, 2.0), Exponential(3.0), Uniform(0.0, 2.0), Poisson(2.5), UniformDiscrete(1, 6)],
)
def test_dispatch_matches_variant_sample(dist):
    sampler = get_sampler(dist)
    assert sampler(SequenceSource([0.3, 0.6])) == dist.sample(SequenceSource([0.3, 0.6]))


def test_dispatch_rejects_unknown_type():
    with pytest.raises(ParameterError):
        get_sampler(object())
