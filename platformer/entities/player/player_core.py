"""
player_core.py
--------------
Defines the Player controller used by the simulation each tick.
"""

import math

import pygame

from platformer.core.debug.debug_logger import DebugLogger
from platformer.core.runtime.simulation_config import SimulationConfig
from platformer.core.services.input_manager import InputId
from platformer.entities.kinematic_body import KinematicBody
from .player_movement import try_jump, apply_move_impulse, update_movement
from .player_combat import accumulate_charge, fire_release


# Screen coordinates: up is -y
_AIM_VECTORS = {
    InputId.MOVE_LEFT: (-1, 0),
    InputId.MOVE_RIGHT: (1, 0),
    InputId.AIM_UP: (0, -1),
    InputId.AIM_DOWN: (0, 1),
}


class Player:
    """Player body plus jump, aim, charge and fire state."""

    def __init__(self, cfg: SimulationConfig = None, bullet_manager=None):
        """
        Args:
            cfg (SimulationConfig): Validated configuration; defaults if None.
            bullet_manager (BulletManager): Receives bullets on fire release.
        """
        self.cfg = cfg or SimulationConfig()
        self.bullet_manager = bullet_manager

        self.body = KinematicBody(self.cfg.player_spawn, (0.0, 0.0), self.cfg.player_size)

        # Spawns airborne: no jumps until a boundary is touched
        self.jump_counter = self.cfg.max_jumps
        self.jump_timer = 0
        self.shoot_timer = 0
        self.charging_time = 0

        self.arm_offset = self.cfg.arm_offset
        self.arm_direction = pygame.Vector2(1, 0)
        self.facing_direction = pygame.Vector2(1, 0)
        self.is_aiming = False

        DebugLogger.init_entry("Player Initialized")

    # ===========================================================
    # Body Accessors
    # ===========================================================
    @property
    def position(self) -> pygame.Vector2:
        return self.body.pos

    @position.setter
    def position(self, value):
        self.body.pos = pygame.Vector2(value)

    @property
    def velocity(self) -> pygame.Vector2:
        return self.body.velocity

    @velocity.setter
    def velocity(self, value):
        self.body.velocity = pygame.Vector2(value)

    @property
    def size(self) -> pygame.Vector2:
        return self.body.size

    @property
    def center(self) -> pygame.Vector2:
        return self.body.pos + self.body.size / 2

    @property
    def arm_position(self) -> pygame.Vector2:
        """Where the renderer draws the gun arm."""
        inset = pygame.Vector2(self.cfg.arm_inset, self.cfg.arm_inset)
        return self.body.pos + (self.body.size - inset) / 2 + self.arm_direction * self.arm_offset

    @property
    def charge_fraction(self) -> float:
        return self.charging_time / self.cfg.max_charge

    @property
    def is_grounded(self) -> bool:
        return self.body.pos.y + self.body.size.y >= self.cfg.world_size[1]

    # ===========================================================
    # Input
    # ===========================================================
    def process_inputs(self, held):
        """
        Apply every held input once. Order-independent.

        Args:
            held (Iterable[InputId]): Inputs held this tick.
        """
        aim = pygame.Vector2(0, 0)

        for input_id in held:
            if input_id is InputId.JUMP:
                try_jump(self)
            elif input_id is InputId.MOVE_LEFT:
                apply_move_impulse(self, -1)
            elif input_id is InputId.MOVE_RIGHT:
                apply_move_impulse(self, 1)
            elif input_id is InputId.CHARGE_FIRE:
                accumulate_charge(self)

            if input_id in _AIM_VECTORS:
                aim += _AIM_VECTORS[input_id]

        if aim.length_squared() > 0:
            self.aim_in_direction(aim.normalize())

    def aim_in_direction(self, direction):
        """
        Point the arm along a direction (full 360 degrees).

        Facing only flips when the direction has a horizontal component.
        A zero vector leaves the aim unchanged.
        """
        dx, dy = direction
        if dx == 0 and dy == 0:
            return
        if dx != 0:
            self.facing_direction.x = math.copysign(1.0, dx)

        angle = math.atan2(dy, dx)
        self.arm_direction = pygame.Vector2(math.cos(angle), math.sin(angle))

    def set_is_aiming(self, is_aiming: bool):
        if is_aiming != self.is_aiming:
            DebugLogger.state(f"Aim lock {'ON' if is_aiming else 'OFF'}", category="player")
        self.is_aiming = bool(is_aiming)

    # ===========================================================
    # Tick
    # ===========================================================
    def update(self, dt: float):
        """Integrate the body, then count cooldown timers down by one tick."""
        update_movement(self, dt)

        if self.shoot_timer > 0:
            self.shoot_timer -= 1
        if self.jump_timer > 0:
            self.jump_timer -= 1

    def on_fire_release(self):
        """Fire a charged shot; returns the bullet, or None while on cooldown."""
        return fire_release(self)
