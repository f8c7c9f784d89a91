"""
kinematic_body.py
-----------------
Position/velocity integration primitive shared by the player and bullets.

Responsibilities
----------------
- Free flight for projectiles (advance).
- Bounded integration for bodies with extents: boundary clamp,
  gravity, displacement drift and friction, applied in that order.
"""

import pygame


class KinematicBody:
    """A position + velocity pair, optionally with a finite size."""

    __slots__ = ("pos", "velocity", "size", "clamped_x", "clamped_y", "grounded")

    def __init__(self, pos=(0.0, 0.0), velocity=(0.0, 0.0), size=None):
        self.pos = pygame.Vector2(pos)
        self.velocity = pygame.Vector2(velocity)
        self.size = pygame.Vector2(size) if size is not None else None

        # Results of the most recent bounded integration
        self.clamped_x = False
        self.clamped_y = False
        self.grounded = False

    # ===========================================================
    # Free Flight
    # ===========================================================
    def advance(self, dt: float):
        """Move along the current velocity; no clamp, gravity or friction."""
        self.pos += self.velocity * dt

    # ===========================================================
    # Bounded Integration
    # ===========================================================
    def integrate(self, dt: float, world_size, gravity: float, friction: float,
                  grounded_friction_mult: float = 1.0):
        """
        Advance one tick inside the rectangle [0, world_size].

        Args:
            dt (float): Elapsed seconds for this tick.
            world_size (tuple[float, float]): World width and height.
            gravity (float): Downward acceleration (positive = down).
            friction (float): Friction coefficient.
            grounded_friction_mult (float): Friction multiplier used when the
                body ends the clamp step resting on the floor.

        Each step reads the values produced by the previous one:
            1. candidate = pos + velocity * dt
            2. clamp candidate per axis, zeroing that axis's velocity
            3. gravity while the bottom edge is above the floor
            4. velocity += (candidate - pos) * dt
            5. velocity -= friction * old_velocity * dt * multiplier
        A clamped axis ends the tick with zero velocity.
        """
        world_w, world_h = world_size
        max_x = world_w - self.size.x
        max_y = world_h - self.size.y

        old_pos = self.pos.copy()
        old_vel = self.velocity.copy()

        new_pos = old_pos + old_vel * dt
        new_vel = old_vel.copy()

        # 2. Boundary clamp
        self.clamped_x = new_pos.x < 0 or new_pos.x > max_x
        if self.clamped_x:
            new_pos.x = max(0.0, min(new_pos.x, max_x))
            new_vel.x = 0.0

        self.clamped_y = new_pos.y < 0 or new_pos.y > max_y
        if self.clamped_y:
            new_pos.y = max(0.0, min(new_pos.y, max_y))
            new_vel.y = 0.0

        # 3. Gravity
        self.grounded = new_pos.y + self.size.y >= world_h
        if not self.grounded:
            new_vel.y += gravity * dt

        # 4. Displacement drift
        new_vel += (new_pos - old_pos) * dt

        # 5. Friction
        mult = grounded_friction_mult if self.grounded else 1.0
        new_vel -= old_vel * (friction * dt * mult)

        if self.clamped_x:
            new_vel.x = 0.0
        if self.clamped_y:
            new_vel.y = 0.0

        self.pos = new_pos
        self.velocity = new_vel

    def __repr__(self):
        return f"KinematicBody(pos={tuple(self.pos)}, velocity={tuple(self.velocity)})"
