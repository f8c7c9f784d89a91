"""
bullet_manager.py
-----------------
System responsible for managing all in-flight bullets.

Responsibilities
----------------
- Accept bullets spawned by the player (or future enemy shooters).
- Advance bullet positions each tick.
- Drop bullets whose box has fully left the world.
- Expose a read-only (center, half_extents) view for rendering.
"""

from platformer.core.debug.debug_logger import DebugLogger


class BulletManager:
    """Ordered collection of active projectiles."""

    # ===========================================================
    # Initialization
    # ===========================================================
    def __init__(self, world_size):
        self.world_size = (float(world_size[0]), float(world_size[1]))
        self.active = []  # Bullets currently in flight, in spawn order

        DebugLogger.init_entry("BulletManager Initialized")

    def __len__(self):
        return len(self.active)

    def __iter__(self):
        return iter(self.active)

    # ===========================================================
    # Spawning
    # ===========================================================
    def spawn(self, bullet):
        """
        Add a bullet to the active set.

        Args:
            bullet (Bullet): Projectile created by its owner.
        """
        self.active.append(bullet)
        DebugLogger.trace(
            f"[BulletSpawn] {bullet.owner.value} bullet at {tuple(bullet.center)} -> Vel={tuple(bullet.velocity)}",
            category="bullet"
        )
        return bullet

    # ===========================================================
    # Update Cycle
    # ===========================================================
    def update(self, dt: float):
        """
        Advance every bullet, then cull the ones outside the world.

        Args:
            dt (float): Delta time since last tick (seconds).
        """
        next_active = []

        for bullet in self.active:
            bullet.update(dt)
            if not bullet.is_outside(self.world_size):
                next_active.append(bullet)

        removed = len(self.active) - len(next_active)
        self.active = next_active

        if removed > 0:
            DebugLogger.trace(f"Culled {removed} offscreen bullets", category="bullet")

    # ===========================================================
    # Queries
    # ===========================================================
    def snapshot(self):
        """Return ((center, half_extents), ...) copies for the renderer."""
        return tuple(
            ((b.center.x, b.center.y), (b.half_extents.x, b.half_extents.y))
            for b in self.active
        )

    # ===========================================================
    # Cleanup
    # ===========================================================
    def clear(self):
        """Remove every active bullet."""
        removed = len(self.active)
        self.active = []
        if removed > 0:
            DebugLogger.state(f"Cleared {removed} bullets", category="bullet")
