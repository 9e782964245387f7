import random
from collections import Counter

import pytest

from src.level.region import Region
from src.level.region_set import RegionSet
from src.level.spawn_sampler import SamplingPolicy, choose_region, sample_spawn_x


@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture
def narrow_and_wide():
    # [0, 1] and [2, 100]
    return RegionSet.with_sorted(0.0, 100.0, [Region(1.0, 2.0)])


@pytest.mark.parametrize("policy", list(SamplingPolicy))
def test_empty_set_reports_no_position(rng, policy):
    rs = RegionSet.with_sorted(0.0, 100.0, [Region(0.0, 100.0)])
    assert sample_spawn_x(rs, rng, policy) is None


@pytest.mark.parametrize("policy", list(SamplingPolicy))
def test_sample_always_inside_a_region(rng, policy):
    rs = RegionSet.with_sorted(0.0, 100.0, [Region(20.0, 30.0), Region(60.0, 70.0)])
    for _ in range(500):
        x = sample_spawn_x(rs, rng, policy)
        assert any(r.contains(x) for r in rs)


def test_index_uniform_ignores_width(rng, narrow_and_wide):
    counts = Counter(choose_region(narrow_and_wide, rng) for _ in range(2000))
    # Roughly half each despite the 1:98 width ratio
    assert 800 < counts[Region(0.0, 1.0)] < 1200


def test_width_weighted_prefers_wide_regions(rng, narrow_and_wide):
    counts = Counter(
        choose_region(narrow_and_wide, rng, SamplingPolicy.WIDTH_WEIGHTED) for _ in range(2000)
    )
    assert counts[Region(2.0, 100.0)] > 1800


def test_min_width_filters_regions(rng, narrow_and_wide):
    for _ in range(100):
        x = sample_spawn_x(narrow_and_wide, rng, min_width=5.0)
        assert 2.0 <= x <= 100.0


def test_min_width_can_exclude_everything(rng, narrow_and_wide):
    assert sample_spawn_x(narrow_and_wide, rng, min_width=500.0) is None


def test_sampling_is_deterministic_for_seed(narrow_and_wide):
    a = [sample_spawn_x(narrow_and_wide, random.Random(9)) for _ in range(5)]
    b = [sample_spawn_x(narrow_and_wide, random.Random(9)) for _ in range(5)]
    assert a == b


def test_policy_from_name():
    assert SamplingPolicy.from_name("index") is SamplingPolicy.INDEX_UNIFORM
    assert SamplingPolicy.from_name("width") is SamplingPolicy.WIDTH_WEIGHTED
    with pytest.raises(ValueError):
        SamplingPolicy.from_name("nearest")
