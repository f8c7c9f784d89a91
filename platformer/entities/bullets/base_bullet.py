"""
base_bullet.py
--------------
Defines the Bullet projectile: an axis-aligned box in free flight.

Responsibilities
----------------
- Hold center, half extents, velocity, damage and owner.
- Advance along its velocity each tick (no clamp, gravity or friction).
- Report whether its box has fully left the world rectangle.
- Defer removal to BulletManager.
"""

import pygame

from platformer.entities.entity_types import OwnerKind
from platformer.entities.kinematic_body import KinematicBody


class Bullet:
    """Axis-aligned projectile box."""

    __slots__ = ("body", "half_extents", "damage", "owner")

    def __init__(self, center, half_extents, velocity, damage: float,
                 owner: OwnerKind = OwnerKind.PLAYER):
        """
        Args:
            center (tuple[float, float]): Box center in world space.
            half_extents (tuple[float, float]): Half width and half height.
            velocity (tuple[float, float]): Units per second.
            damage (float): Damage dealt on hit.
            owner (OwnerKind): Which side fired the bullet.
        """
        self.body = KinematicBody(center, velocity)
        self.half_extents = pygame.Vector2(half_extents)
        self.damage = damage
        self.owner = owner

    # ===========================================================
    # Properties
    # ===========================================================
    @property
    def center(self) -> pygame.Vector2:
        return self.body.pos

    @property
    def velocity(self) -> pygame.Vector2:
        return self.body.velocity

    # ===========================================================
    # Update Logic
    # ===========================================================
    def update(self, dt: float):
        self.body.advance(dt)

    # ===========================================================
    # Bounds
    # ===========================================================
    def is_outside(self, world_size) -> bool:
        """True once no part of the box overlaps [0, world_w] x [0, world_h]."""
        world_w, world_h = world_size
        c, h = self.body.pos, self.half_extents
        return (
            c.x + h.x < 0 or c.x - h.x > world_w or
            c.y + h.y < 0 or c.y - h.y > world_h
        )

    def __repr__(self):
        return (f"Bullet(center={tuple(self.center)}, half_extents={tuple(self.half_extents)}, "
                f"damage={self.damage}, owner={self.owner.value})")
