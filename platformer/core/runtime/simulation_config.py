"""
simulation_config.py
--------------------
Validated, immutable configuration shared by every simulation system.

Responsibilities
----------------
- Collect the tuning constants from game_settings into one value.
- Merge overrides from simulation.json (or any dict) over the defaults.
- Reject degenerate configuration at startup with a ConfigError.
"""

import json
from dataclasses import dataclass, asdict

from platformer.core.debug.debug_logger import DebugLogger
from platformer.core.runtime.game_settings import (
    World, Physics, PlayerDefaults, Bullets, Camera
)
from platformer.core.services.config_manager import load_config


class ConfigError(ValueError):
    """Raised when simulation configuration cannot produce a valid world."""


# ===========================================================
# Defaults
# ===========================================================

DEFAULT_CONFIG = {
    "world": {
        "size": [World.WIDTH, World.HEIGHT],
    },
    "physics": {
        "gravity": Physics.GRAVITY,
        "friction": Physics.FRICTION,
        "aim_lock_friction_mult": Physics.AIM_LOCK_FRICTION_MULT,
    },
    "player": {
        "size": list(PlayerDefaults.SIZE),
        "spawn": list(PlayerDefaults.SPAWN),
        "jump_velocity": PlayerDefaults.JUMP_VELOCITY,
        "max_jumps": PlayerDefaults.MAX_JUMPS,
        "jump_cooldown": PlayerDefaults.JUMP_COOLDOWN,
        "move_impulse": PlayerDefaults.MOVE_IMPULSE,
        "shoot_cooldown": PlayerDefaults.SHOOT_COOLDOWN,
        "max_charge": PlayerDefaults.MAX_CHARGE,
        "arm_offset": PlayerDefaults.ARM_OFFSET,
        "arm_inset": PlayerDefaults.ARM_DRAW_INSET,
    },
    "bullets": {
        "base_speed": Bullets.BASE_SPEED,
        "min_size": Bullets.MIN_SIZE,
        "max_size": Bullets.MAX_SIZE,
        "damage_per_size": Bullets.DAMAGE_PER_SIZE,
    },
    "camera": {
        "resolution": list(Camera.RESOLUTION),
        "window_resolution": list(Camera.WINDOW_RESOLUTION),
        "follow_speed": Camera.FOLLOW_SPEED,
    },
}


# ===========================================================
# Config Value
# ===========================================================

@dataclass(frozen=True)
class SimulationConfig:
    """Fixed configuration; never mutated at runtime."""

    world_size: tuple = (World.WIDTH, World.HEIGHT)
    player_size: tuple = PlayerDefaults.SIZE
    player_spawn: tuple = PlayerDefaults.SPAWN

    gravity: float = Physics.GRAVITY
    friction: float = Physics.FRICTION
    aim_lock_friction_mult: float = Physics.AIM_LOCK_FRICTION_MULT

    jump_velocity: float = PlayerDefaults.JUMP_VELOCITY
    max_jumps: int = PlayerDefaults.MAX_JUMPS
    jump_cooldown: int = PlayerDefaults.JUMP_COOLDOWN
    move_impulse: float = PlayerDefaults.MOVE_IMPULSE
    shoot_cooldown: int = PlayerDefaults.SHOOT_COOLDOWN
    max_charge: int = PlayerDefaults.MAX_CHARGE
    arm_offset: float = PlayerDefaults.ARM_OFFSET
    arm_inset: float = PlayerDefaults.ARM_DRAW_INSET

    bullet_base_speed: float = Bullets.BASE_SPEED
    bullet_min_size: float = Bullets.MIN_SIZE
    bullet_max_size: float = Bullets.MAX_SIZE
    bullet_damage_per_size: float = Bullets.DAMAGE_PER_SIZE

    camera_resolution: tuple = Camera.RESOLUTION
    window_resolution: tuple = Camera.WINDOW_RESOLUTION
    camera_follow_speed: float = Camera.FOLLOW_SPEED

    def __post_init__(self):
        for name in ("world_size", "player_size", "player_spawn",
                     "camera_resolution", "window_resolution"):
            value = getattr(self, name)
            if len(value) != 2:
                raise ConfigError(f"{name} must have two components, got {value!r}")
            object.__setattr__(self, name, (float(value[0]), float(value[1])))
        self.validate()

    # ===========================================================
    # Construction
    # ===========================================================
    @classmethod
    def from_dict(cls, data: dict) -> "SimulationConfig":
        """Build a config from the nested simulation.json layout."""
        world = data.get("world", {})
        physics = data.get("physics", {})
        player = data.get("player", {})
        bullets = data.get("bullets", {})
        camera = data.get("camera", {})
        defaults = cls.__dataclass_fields__

        def pick(section, key, field):
            return section.get(key, defaults[field].default)

        try:
            return cls(
                world_size=tuple(pick(world, "size", "world_size")),
                player_size=tuple(pick(player, "size", "player_size")),
                player_spawn=tuple(pick(player, "spawn", "player_spawn")),
                gravity=float(pick(physics, "gravity", "gravity")),
                friction=float(pick(physics, "friction", "friction")),
                aim_lock_friction_mult=float(
                    pick(physics, "aim_lock_friction_mult", "aim_lock_friction_mult")),
                jump_velocity=float(pick(player, "jump_velocity", "jump_velocity")),
                max_jumps=int(pick(player, "max_jumps", "max_jumps")),
                jump_cooldown=int(pick(player, "jump_cooldown", "jump_cooldown")),
                move_impulse=float(pick(player, "move_impulse", "move_impulse")),
                shoot_cooldown=int(pick(player, "shoot_cooldown", "shoot_cooldown")),
                max_charge=int(pick(player, "max_charge", "max_charge")),
                arm_offset=float(pick(player, "arm_offset", "arm_offset")),
                arm_inset=float(pick(player, "arm_inset", "arm_inset")),
                bullet_base_speed=float(pick(bullets, "base_speed", "bullet_base_speed")),
                bullet_min_size=float(pick(bullets, "min_size", "bullet_min_size")),
                bullet_max_size=float(pick(bullets, "max_size", "bullet_max_size")),
                bullet_damage_per_size=float(
                    pick(bullets, "damage_per_size", "bullet_damage_per_size")),
                camera_resolution=tuple(pick(camera, "resolution", "camera_resolution")),
                window_resolution=tuple(
                    pick(camera, "window_resolution", "window_resolution")),
                camera_follow_speed=float(pick(camera, "follow_speed", "camera_follow_speed")),
            )
        except ConfigError:
            raise
        except (TypeError, ValueError) as e:
            DebugLogger.fail(f"Malformed simulation config: {e}", category="loading")
            raise ConfigError(f"Malformed simulation config: {e}") from e

    @classmethod
    def from_file(cls, filename: str = "simulation.json", strict: bool = False) -> "SimulationConfig":
        """
        Load simulation.json (or another JSON file) merged over the defaults.

        A missing file falls back to the defaults unless strict. A file that
        exists but does not parse raises ConfigError either way.
        """
        try:
            data = load_config(filename, DEFAULT_CONFIG, strict=strict)
        except json.JSONDecodeError as e:
            raise ConfigError(f"Malformed config file {filename}: {e}") from e
        return cls.from_dict(data)

    def to_dict(self) -> dict:
        return asdict(self)

    # ===========================================================
    # Validation
    # ===========================================================
    def validate(self):
        """Raise ConfigError describing the first degenerate setting found."""
        problems = []

        for name in ("world_size", "player_size", "camera_resolution", "window_resolution"):
            w, h = getattr(self, name)
            if w <= 0 or h <= 0:
                problems.append(f"{name} must be positive, got {(w, h)}")

        ww, wh = self.world_size
        pw, ph = self.player_size
        if pw > ww or ph > wh:
            problems.append(f"player_size {(pw, ph)} does not fit world_size {(ww, wh)}")
        else:
            sx, sy = self.player_spawn
            if not (0 <= sx <= ww - pw and 0 <= sy <= wh - ph):
                problems.append(f"player_spawn {(sx, sy)} lies outside the playable area")

        if self.gravity < 0:
            problems.append(f"gravity must be >= 0, got {self.gravity}")
        if self.friction < 0:
            problems.append(f"friction must be >= 0, got {self.friction}")
        if self.aim_lock_friction_mult < 0:
            problems.append(f"aim_lock_friction_mult must be >= 0, got {self.aim_lock_friction_mult}")

        for name in ("max_jumps", "jump_cooldown", "shoot_cooldown"):
            if getattr(self, name) < 0:
                problems.append(f"{name} must be >= 0, got {getattr(self, name)}")
        if self.max_charge <= 0:
            problems.append(f"max_charge must be > 0, got {self.max_charge}")
        if self.arm_offset < 0:
            problems.append(f"arm_offset must be >= 0, got {self.arm_offset}")

        if self.bullet_base_speed <= 0:
            problems.append(f"bullet_base_speed must be > 0, got {self.bullet_base_speed}")
        if self.bullet_min_size <= 0 or self.bullet_max_size < self.bullet_min_size:
            problems.append(
                f"bullet size range [{self.bullet_min_size}, {self.bullet_max_size}] is invalid")

        if not 0 < self.camera_follow_speed <= 1:
            problems.append(f"camera_follow_speed must be in (0, 1], got {self.camera_follow_speed}")

        if problems:
            DebugLogger.fail(f"Invalid simulation config: {problems[0]}", category="loading")
            raise ConfigError("; ".join(problems))
