"""
input_manager.py
----------------
Maps keyboard events onto simulation input identifiers.

Provides:
- InputId, the closed set of inputs the simulation understands
- Default key bindings (pygame key codes)
- A held-input set for continuous actions (move, aim, charge, jump)
- Discrete edge forwarding for fire release and aim-lock toggling
"""

from enum import Enum

import pygame

from platformer.core.debug.debug_logger import DebugLogger


class InputId(Enum):
    """Recognized simulation inputs."""
    JUMP = "jump"
    CHARGE_FIRE = "charge_fire"
    MOVE_LEFT = "move_left"
    MOVE_RIGHT = "move_right"
    AIM_UP = "aim_up"
    AIM_DOWN = "aim_down"
    AIM_LOCK = "aim_lock"


# ===========================================================
# Default Key Bindings
# ===========================================================

DEFAULT_KEY_BINDINGS = {
    InputId.JUMP: [pygame.K_SPACE],
    InputId.CHARGE_FIRE: [pygame.K_x, pygame.K_j],
    InputId.MOVE_LEFT: [pygame.K_LEFT, pygame.K_a],
    InputId.MOVE_RIGHT: [pygame.K_RIGHT, pygame.K_d],
    InputId.AIM_UP: [pygame.K_UP, pygame.K_w],
    InputId.AIM_DOWN: [pygame.K_DOWN, pygame.K_s],
    InputId.AIM_LOCK: [pygame.K_LSHIFT, pygame.K_RSHIFT],
}


class InputManager:
    """
    Collects held inputs between ticks and forwards key edges.

    Usage:
        for event in pygame.event.get():
            input_manager.handle_event(event)
        simulation.tick(dt, input_manager.held())

    Edge sink (usually the Simulation) must provide:
        release_fire()          called when CHARGE_FIRE is released
        set_aim_lock(bool)      called when AIM_LOCK is pressed/released
    """

    # ===========================================================
    # Initialization
    # ===========================================================

    def __init__(self, edge_sink=None, key_bindings=None):
        DebugLogger.init_entry("InputManager")

        self.edge_sink = edge_sink
        self.key_bindings = key_bindings or DEFAULT_KEY_BINDINGS
        self._held = {}  # InputId -> keys currently holding it

        self._init_lookup_table()

    def _init_lookup_table(self):
        """Build key -> InputId lookup, warning on keys bound twice."""
        self._key_to_input = {}
        for input_id, keys in self.key_bindings.items():
            for key in keys:
                if key in self._key_to_input:
                    DebugLogger.warn(
                        f"Key {key} bound to both {self._key_to_input[key].name} and {input_id.name}",
                        category="input"
                    )
                    continue
                self._key_to_input[key] = input_id

    # ===========================================================
    # Public API
    # ===========================================================

    def held(self) -> frozenset:
        """Snapshot of the inputs currently held down."""
        return frozenset(self._held)

    def lookup(self, key):
        """Return the InputId bound to a key code, or None."""
        return self._key_to_input.get(key)

    def handle_event(self, event) -> bool:
        """
        Route one pygame event.

        Returns:
            bool: True if the event mapped to a simulation input.
        """
        if event.type not in (pygame.KEYDOWN, pygame.KEYUP):
            return False

        input_id = self.lookup(event.key)
        if input_id is None:
            return False

        if event.type == pygame.KEYDOWN:
            self.press(input_id, event.key)
        else:
            self.release(input_id, event.key)
        return True

    def press(self, input_id: InputId, key=None):
        """
        Mark a source held for an input; aim-lock engages on the rising edge.

        Args:
            input_id (InputId): Input the source is bound to.
            key (int | None): Physical key code. None stands for the input itself.
        """
        sources = self._held.setdefault(input_id, set())
        rising = not sources
        sources.add(input_id if key is None else key)

        if rising and input_id is InputId.AIM_LOCK and self.edge_sink is not None:
            self.edge_sink.set_aim_lock(True)

    def release(self, input_id: InputId, key=None):
        """
        Clear one held source. The input stays held while any bound key is
        still down; fire and aim-lock edges go out when the last one lifts.
        """
        sources = self._held.get(input_id)
        source = input_id if key is None else key
        if not sources or source not in sources:
            return
        sources.discard(source)
        if sources:
            return
        del self._held[input_id]

        if self.edge_sink is None:
            return
        if input_id is InputId.CHARGE_FIRE:
            self.edge_sink.release_fire()
        elif input_id is InputId.AIM_LOCK:
            self.edge_sink.set_aim_lock(False)

    def reset(self):
        """Drop all held inputs without emitting edges (e.g. on focus loss)."""
        self._held.clear()
        DebugLogger.state("Held inputs cleared", category="input")
