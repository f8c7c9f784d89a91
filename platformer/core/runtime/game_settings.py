"""
game_settings.py
----------------
Centralized constants for all simulation systems.
"""


# ===========================================================
# World
# ===========================================================

class World:
    """Playfield dimensions in world units."""
    WIDTH: float = 320.0
    HEIGHT: float = 120.0
    BG_TILE_SIZE: tuple = (20.0, 20.0)


# ===========================================================
# Physics & Timing
# ===========================================================

class Physics:
    """Integration constants shared by kinematic bodies."""
    GRAVITY: float = 200.0
    FRICTION: float = 1.0
    AIM_LOCK_FRICTION_MULT: float = 10.0


# ===========================================================
# Player Defaults
# ===========================================================

class PlayerDefaults:
    """Player configuration defaults."""
    SIZE: tuple = (10.0, 18.0)
    SPAWN: tuple = (20.0, 20.0)

    JUMP_VELOCITY: float = -150.0
    MAX_JUMPS: int = 2
    JUMP_COOLDOWN: int = 20      # ticks
    MOVE_IMPULSE: float = 2.0

    SHOOT_COOLDOWN: int = 10     # ticks
    MAX_CHARGE: int = 100
    ARM_OFFSET: float = 8.0
    ARM_DRAW_INSET: float = 5.0


# ===========================================================
# Bullets
# ===========================================================

class Bullets:
    """Projectile spawn tuning."""
    BASE_SPEED: float = 160.0
    MIN_SIZE: float = 1.0
    MAX_SIZE: float = 4.0
    DAMAGE_PER_SIZE: float = 10.0


# ===========================================================
# Camera
# ===========================================================

class Camera:
    """Viewport and follow configuration."""
    RESOLUTION: tuple = (160.0, 120.0)
    WINDOW_RESOLUTION: tuple = (1024.0, 768.0)
    FOLLOW_SPEED: float = 0.2   # fraction of remaining distance per tick
