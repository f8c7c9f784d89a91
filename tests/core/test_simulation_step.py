"""
test_simulation_step.py
-----------------------
Tests for the per-tick orchestrator: stage order, edges and snapshots.
"""

import dataclasses
from unittest.mock import MagicMock

import pytest

from platformer.core.runtime.simulation_step import Simulation, background_tiles
from platformer.core.services.input_manager import InputId, InputManager


# ===========================================================
# Tick Ordering
# ===========================================================

class TestTickOrder:

    def test_stages_run_once_in_fixed_order(self, simulation):
        calls = MagicMock()
        simulation.player.process_inputs = calls.process_inputs
        simulation.player.update = calls.player_update
        simulation.bullets.update = calls.bullets_update
        simulation.camera.update = calls.camera_update

        held = frozenset({InputId.JUMP})
        simulation.tick(0.016, held)

        names = [c[0] for c in calls.mock_calls]
        assert names == ["process_inputs", "player_update", "bullets_update", "camera_update"]
        calls.process_inputs.assert_called_once_with(held)
        calls.player_update.assert_called_once_with(0.016)
        calls.bullets_update.assert_called_once_with(0.016)

    def test_camera_observes_post_update_player_position(self, simulation):
        seen = []
        simulation.camera.update = lambda pos: seen.append(tuple(pos))
        simulation.player.velocity = (120.0, 0.0)

        simulation.tick(0.5)

        assert seen == [tuple(simulation.player.position)]
        assert seen[0][0] > 20.0

    def test_frame_counter_increments(self, simulation):
        for _ in range(3):
            simulation.tick(1 / 60)
        assert simulation.frame == 3


# ===========================================================
# dt Handling
# ===========================================================

class TestDeltaTime:

    def test_negative_dt_rejected(self, simulation):
        with pytest.raises(ValueError):
            simulation.tick(-0.1)
        assert simulation.frame == 0

    def test_nan_dt_rejected(self, simulation):
        with pytest.raises(ValueError):
            simulation.tick(float("nan"))

    def test_zero_dt_is_noop_like(self, simulation):
        before = tuple(simulation.player.position)
        simulation.tick(0.0)
        assert tuple(simulation.player.position) == before


# ===========================================================
# Edges
# ===========================================================

class TestEdges:

    def test_release_fire_spawns_bullet_that_flies(self, simulation):
        bullet = simulation.release_fire()
        start_x = bullet.center.x

        simulation.tick(0.1)

        assert simulation.bullets.active == [bullet]
        assert bullet.center.x == pytest.approx(start_x + 16.0)

    def test_release_fire_on_cooldown_returns_none(self, simulation):
        simulation.release_fire()
        assert simulation.release_fire() is None

    def test_set_aim_lock_toggles_player(self, simulation):
        simulation.set_aim_lock(True)
        assert simulation.player.is_aiming
        simulation.set_aim_lock(False)
        assert not simulation.player.is_aiming


# ===========================================================
# Snapshots
# ===========================================================

def test_snapshot_reflects_state_and_is_frozen(simulation):
    simulation.release_fire()
    simulation.tick(1 / 60)

    snap = simulation.snapshot()

    assert snap.frame == 1
    assert snap.player.position == tuple(simulation.player.position)
    assert snap.player.size == (10.0, 18.0)
    assert snap.player.charge_fraction == 0.0
    assert len(snap.bullets) == 1
    assert snap.camera.viewport == (160.0, 120.0)
    assert snap.camera.scale == pytest.approx((6.4, 6.4))

    with pytest.raises(dataclasses.FrozenInstanceError):
        snap.frame = 99

    simulation.player.position.x = 200.0
    assert snap.player.position[0] != 200.0


def test_background_tiles_cover_world(simulation):
    tiles = simulation.background_tiles()

    assert len(tiles) == 16 * 6
    assert tiles[0] == (0.0, 0.0, 20.0, 20.0)
    assert max(t[0] for t in tiles) == 300.0
    assert background_tiles((25.0, 10.0), (20.0, 20.0)) == [
        (0.0, 0.0, 20.0, 20.0), (20.0, 0.0, 20.0, 20.0)
    ]


# ===========================================================
# Scenarios
# ===========================================================

@pytest.mark.integration
def test_charge_jump_and_shoot_session(simulation):
    """Land, charge, jump while still charging and fire through the input seam."""
    inputs = InputManager(edge_sink=simulation)

    for _ in range(600):
        simulation.tick(1 / 60, inputs.held())
    assert simulation.player.is_grounded
    assert simulation.player.jump_counter == 0

    inputs.press(InputId.CHARGE_FIRE)
    for _ in range(50):
        simulation.tick(1 / 60, inputs.held())
    assert simulation.player.charging_time == 50

    inputs.press(InputId.JUMP)
    simulation.tick(1 / 60, inputs.held())
    inputs.release(InputId.JUMP)
    assert simulation.player.jump_counter == 1
    assert simulation.player.velocity.y < 0

    inputs.release(InputId.CHARGE_FIRE)
    assert len(simulation.bullets) == 1
    bullet = simulation.bullets.active[0]
    assert tuple(bullet.half_extents) == pytest.approx((2.53, 2.53))
    assert simulation.player.charging_time == 0

    for _ in range(240):
        simulation.tick(1 / 60, inputs.held())
        pos = simulation.player.position
        assert 0.0 <= pos.x <= 310.0
        assert 0.0 <= pos.y <= 102.0
        cam = simulation.camera.target
        assert 80.0 <= cam.x <= 240.0

    assert len(simulation.bullets) == 0
