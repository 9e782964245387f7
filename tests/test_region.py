import pytest

from src.level.region import Region

# --- Regions on either side of zero and across it ---

REGIONS = [
    Region(25.0, 50.0),
    Region(-300.0, -120.0),
    Region(-20.0, 10.0),
]


def point_inside(r):
    return (r.lower + r.upper) / 2.0


@pytest.mark.parametrize("region", REGIONS)
def test_exclude_below_point_inside(region):
    mid = point_inside(region)
    assert region.exclude_below_point(mid) == Region(mid, region.upper)


@pytest.mark.parametrize("region", REGIONS)
def test_exclude_below_point_below_keeps_region(region):
    assert region.exclude_below_point(region.lower - 5.0) == region


@pytest.mark.parametrize("region", REGIONS)
def test_exclude_below_point_above_is_none(region):
    assert region.exclude_below_point(region.upper + 5.0) is None


@pytest.mark.parametrize("region", REGIONS)
def test_exclude_above_point_inside(region):
    mid = point_inside(region)
    assert region.exclude_above_point(mid) == Region(region.lower, mid)


@pytest.mark.parametrize("region", REGIONS)
def test_exclude_above_point_below_is_none(region):
    assert region.exclude_above_point(region.lower - 5.0) is None


@pytest.mark.parametrize("region", REGIONS)
def test_exclude_above_point_above_keeps_region(region):
    assert region.exclude_above_point(region.upper + 5.0) == region


@pytest.mark.parametrize("region", REGIONS)
def test_touching_boundary_is_empty(region):
    # Zero-width leftovers are never valid regions
    assert region.exclude_below_point(region.upper) is None
    assert region.exclude_above_point(region.lower) is None


@pytest.mark.parametrize("region", REGIONS)
def test_point_at_own_boundary_keeps_region(region):
    assert region.exclude_below_point(region.lower) == region
    assert region.exclude_above_point(region.upper) == region


def test_width_midpoint_and_contains():
    r = Region(-20.0, 10.0)
    assert r.width == 30.0
    assert r.midpoint == -5.0
    assert r.contains(-20.0)
    assert r.contains(10.0)
    assert not r.contains(10.5)


def test_region_is_immutable():
    r = Region(0.0, 1.0)
    with pytest.raises(AttributeError):
        r.lower = 0.5
