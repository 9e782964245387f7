import pytest

from src.level.platform_field import PlatformField
from src.systems.camera import Camera, ViewBounds


@pytest.fixture
def field():
    return PlatformField(platform_w=96, platform_h=12)


def test_spawn_at_centres_rect(field):
    rect = field.spawn_at(200.4, -30.0)
    assert rect.centerx == 200
    assert rect.top == -30
    assert rect.width == 96
    assert field.positions() == [(200.0, -30.0)]


def test_ground_counts_as_platform(field):
    ground = field.add_ground(0, 480, 960, 60)
    assert field.ground is ground
    assert field.positions() == [(480.0, 480.0)]


def test_despawn_below_view(field):
    field.add_ground(0, 480, 960, 60)
    field.spawn_at(100, 100)
    field.spawn_at(300, 600)
    removed = field.despawn_below(500)
    assert removed == 1
    assert [p.top for p in field.platforms] == [480, 100]

    removed = field.despawn_below(200)
    assert removed == 1
    assert field.ground is None
    assert len(field) == 1


def test_clear(field):
    field.add_ground(0, 480, 960, 60)
    field.spawn_at(100, 100)
    field.clear()
    assert len(field) == 0
    assert field.ground is None


# --- Camera ---

def test_camera_scrolls_upward():
    cam = Camera(scroll_speed=10.0)
    cam.update(0.5)
    assert cam.y == pytest.approx(-5.0)


def test_view_bounds_and_spawn_line():
    cam = Camera(x=0.0, y=-100.0, spawn_margin=20.0, view_w=960, view_h=540)
    assert cam.view_bounds() == ViewBounds(0.0, 960.0, -100.0, 440.0)
    assert cam.spawn_line() == -120.0


def test_to_screen_round_trip_offsets():
    cam = Camera(x=10.0, y=-100.0)
    assert cam.to_screen((20.0, -90.0)) == (10, 10)
