"""
player_combat.py
----------------
Handles player combat-related systems:
- Charge accumulation while the fire input is held.
- Fire-release shooting and cooldown gating.
"""

import pygame

from platformer.core.debug.debug_logger import DebugLogger
from platformer.entities.bullets.base_bullet import Bullet
from platformer.entities.entity_types import OwnerKind


# ===========================================================
# Charge System
# ===========================================================
def accumulate_charge(player):
    """Add one tick of charge, saturating at the configured maximum."""
    player.charging_time = min(player.charging_time + 1, player.cfg.max_charge)


def bullet_size_for_charge(cfg, charging_time: int) -> float:
    """Linear interpolation from min to max bullet size over the charge range."""
    fade = charging_time / cfg.max_charge
    return cfg.bullet_min_size * (1.0 - fade) + cfg.bullet_max_size * fade


# ===========================================================
# Shooting System
# ===========================================================
def fire_release(player):
    """
    Fire a charged shot when the fire input is released.

    Args:
        player (Player): The player instance controlling the shot.

    Returns:
        Bullet | None: The spawned bullet, or None while on cooldown.
    """
    cfg = player.cfg
    if player.shoot_timer != 0:
        return None

    player.shoot_timer = cfg.shoot_cooldown

    size = bullet_size_for_charge(cfg, player.charging_time)
    aim = player.arm_direction
    direction = aim.normalize() if aim.length_squared() > 0 else pygame.Vector2(player.facing_direction.x, 0)
    speed = cfg.bullet_base_speed + player.velocity.length()

    bullet = Bullet(
        center=player.center + aim * (player.arm_offset + size),
        half_extents=(size, size),
        velocity=direction * speed,
        damage=cfg.bullet_damage_per_size * size,
        owner=OwnerKind.PLAYER,
    )
    player.charging_time = 0

    if player.bullet_manager is not None:
        player.bullet_manager.spawn(bullet)
    else:
        DebugLogger.warn("[PlayerCombat] Fired without BulletManager", category="player")

    DebugLogger.trace(f"[PlayerFire] size={size:.2f} damage={bullet.damage:.1f}", category="player")
    return bullet
