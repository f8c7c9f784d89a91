"""
test_input_manager.py
---------------------
Tests for key -> InputId mapping, held-set tracking and edge forwarding.
"""

from unittest.mock import MagicMock

import pygame
import pytest

from platformer.core.runtime.simulation_step import Simulation
from platformer.core.services.input_manager import InputId, InputManager


@pytest.fixture
def sink():
    return MagicMock()


@pytest.fixture
def inputs(sink):
    return InputManager(edge_sink=sink)


def key_down(key):
    return pygame.event.Event(pygame.KEYDOWN, key=key)


def key_up(key):
    return pygame.event.Event(pygame.KEYUP, key=key)


# ===========================================================
# Held Set
# ===========================================================

class TestHeldSet:

    def test_keydown_adds_and_keyup_removes(self, inputs):
        assert inputs.handle_event(key_down(pygame.K_SPACE))
        assert inputs.held() == frozenset({InputId.JUMP})

        assert inputs.handle_event(key_up(pygame.K_SPACE))
        assert inputs.held() == frozenset()

    def test_alternate_bindings_map_to_same_input(self, inputs):
        inputs.handle_event(key_down(pygame.K_a))
        inputs.handle_event(key_down(pygame.K_LEFT))
        assert inputs.held() == frozenset({InputId.MOVE_LEFT})

    def test_held_returns_immutable_copy(self, inputs):
        inputs.press(InputId.AIM_UP)
        snapshot = inputs.held()
        inputs.release(InputId.AIM_UP)

        assert snapshot == frozenset({InputId.AIM_UP})
        assert isinstance(snapshot, frozenset)

    def test_unbound_and_non_key_events_are_ignored(self, inputs):
        assert not inputs.handle_event(key_down(pygame.K_F12))
        assert not inputs.handle_event(pygame.event.Event(pygame.QUIT))
        assert inputs.held() == frozenset()

    def test_reset_clears_without_edges(self, inputs, sink):
        inputs.press(InputId.CHARGE_FIRE)
        inputs.reset()

        assert inputs.held() == frozenset()
        sink.release_fire.assert_not_called()


# ===========================================================
# Edge Forwarding
# ===========================================================

class TestEdges:

    def test_fire_release_forwards_edge(self, inputs, sink):
        inputs.handle_event(key_down(pygame.K_x))
        sink.release_fire.assert_not_called()

        inputs.handle_event(key_up(pygame.K_x))
        sink.release_fire.assert_called_once_with()

    def test_release_without_press_is_ignored(self, inputs, sink):
        inputs.handle_event(key_up(pygame.K_x))
        sink.release_fire.assert_not_called()

    def test_aim_lock_press_and_release(self, inputs, sink):
        inputs.handle_event(key_down(pygame.K_LSHIFT))
        inputs.handle_event(key_down(pygame.K_LSHIFT))  # key repeat
        inputs.handle_event(key_up(pygame.K_LSHIFT))

        assert [c.args for c in sink.set_aim_lock.call_args_list] == [(True,), (False,)]

    def test_no_sink_is_allowed(self):
        inputs = InputManager()
        inputs.press(InputId.AIM_LOCK)
        inputs.release(InputId.AIM_LOCK)
        inputs.press(InputId.CHARGE_FIRE)
        inputs.release(InputId.CHARGE_FIRE)
        assert inputs.held() == frozenset()


def test_duplicate_binding_keeps_first():
    bindings = {
        InputId.JUMP: [pygame.K_SPACE],
        InputId.CHARGE_FIRE: [pygame.K_SPACE, pygame.K_x],
    }
    inputs = InputManager(key_bindings=bindings)

    assert inputs.lookup(pygame.K_SPACE) is InputId.JUMP
    assert inputs.lookup(pygame.K_x) is InputId.CHARGE_FIRE


# ===========================================================
# Alternate Keys On One Input
# ===========================================================

class TestAlternateKeys:

    def test_fire_stays_held_until_last_key_lifts(self, inputs, sink):
        inputs.handle_event(key_down(pygame.K_x))
        inputs.handle_event(key_down(pygame.K_j))
        inputs.handle_event(key_up(pygame.K_j))

        assert inputs.held() == frozenset({InputId.CHARGE_FIRE})
        sink.release_fire.assert_not_called()

        inputs.handle_event(key_up(pygame.K_x))
        assert inputs.held() == frozenset()
        sink.release_fire.assert_called_once_with()

    def test_aim_lock_edges_span_both_shift_keys(self, inputs, sink):
        inputs.handle_event(key_down(pygame.K_LSHIFT))
        inputs.handle_event(key_down(pygame.K_RSHIFT))
        inputs.handle_event(key_up(pygame.K_LSHIFT))
        assert [c.args for c in sink.set_aim_lock.call_args_list] == [(True,)]

        inputs.handle_event(key_up(pygame.K_RSHIFT))
        assert [c.args for c in sink.set_aim_lock.call_args_list] == [(True,), (False,)]

    def test_move_held_while_other_binding_down(self, inputs):
        inputs.handle_event(key_down(pygame.K_LEFT))
        inputs.handle_event(key_down(pygame.K_a))
        inputs.handle_event(key_up(pygame.K_LEFT))

        assert inputs.held() == frozenset({InputId.MOVE_LEFT})

    def test_charge_survives_switching_fire_keys(self):
        simulation = Simulation()
        inputs = InputManager(edge_sink=simulation)

        inputs.handle_event(key_down(pygame.K_x))
        for _ in range(5):
            simulation.tick(1 / 60, inputs.held())
        inputs.handle_event(key_down(pygame.K_j))
        inputs.handle_event(key_up(pygame.K_x))
        simulation.tick(1 / 60, inputs.held())

        assert len(simulation.bullets) == 0
        assert simulation.player.charging_time == 6
