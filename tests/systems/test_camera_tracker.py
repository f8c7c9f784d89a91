"""
test_camera_tracker.py
----------------------
Unit tests for camera follow smoothing, clamping and screen mapping.
"""

import pytest

from platformer.systems.camera_tracker import CameraTracker


@pytest.fixture
def camera():
    return CameraTracker((320.0, 120.0), (160.0, 120.0), (1024.0, 768.0), 0.2)


def test_first_update_clamps_origin_into_bounds(camera):
    camera.update((0.0, 0.0))
    assert tuple(camera.target) == (80.0, 60.0)


def test_follow_closes_fixed_fraction_per_tick(camera):
    camera.target.update(80.0, 60.0)

    camera.update((300.0, 100.0))

    assert camera.target.x == pytest.approx(124.0)
    # world height equals viewport height: y is pinned
    assert camera.target.y == pytest.approx(60.0)


def test_follow_does_not_scale_with_dt(camera):
    camera.target.update(100.0, 60.0)
    camera.update((200.0, 60.0))
    assert camera.target.x == pytest.approx(120.0)


def test_follow_converges_on_player(camera):
    for _ in range(100):
        camera.update((150.0, 60.0))
    assert camera.target.x == pytest.approx(150.0)


@pytest.mark.parametrize("player_pos", [
    (-1e6, -1e6), (1e6, 1e6), (0.0, 120.0), (320.0, 0.0), (160.0, 60.0)
])
def test_target_stays_inside_clamp_range(camera, player_pos):
    for _ in range(20):
        camera.update(player_pos)
        assert 80.0 <= camera.target.x <= 240.0
        assert camera.target.y == pytest.approx(60.0)


def test_world_smaller_than_viewport_pins_target():
    small = CameraTracker((100.0, 50.0), (160.0, 120.0), (1024.0, 768.0), 0.2)

    for pos in [(0.0, 0.0), (100.0, 50.0), (-500.0, 900.0)]:
        small.update(pos)
        assert tuple(small.target) == (80.0, 60.0)


def test_scale_and_world_to_screen(camera):
    camera.update((0.0, 0.0))

    assert tuple(camera.scale) == pytest.approx((6.4, 6.4))
    assert tuple(camera.offset) == pytest.approx((0.0, 0.0))
    assert tuple(camera.world_to_screen((80.0, 60.0))) == pytest.approx((512.0, 384.0))

    camera.target.update(240.0, 60.0)
    assert tuple(camera.offset) == pytest.approx((-1024.0, 0.0))
