"""
camera_tracker.py
-----------------
Smoothly follows the player and keeps the viewport inside the world.

Responsibilities
----------------
- Exponential-smoothing follow toward the player (fixed factor per tick).
- Clamp the look-at point so the viewport never shows past world edges.
- Map world coordinates to window coordinates for the renderer.
"""

import pygame

from platformer.core.debug.debug_logger import DebugLogger


class CameraTracker:
    """Look-at point that trails the player."""

    def __init__(self, world_size, viewport, window_resolution, follow_speed: float):
        """
        Args:
            world_size (tuple[float, float]): World width and height.
            viewport (tuple[float, float]): World units visible on screen.
            window_resolution (tuple[float, float]): Window size in pixels.
            follow_speed (float): Fraction of the remaining distance closed per tick.
        """
        self.world_size = pygame.Vector2(world_size)
        self.viewport = pygame.Vector2(viewport)
        self.window_resolution = pygame.Vector2(window_resolution)
        self.follow_speed = follow_speed
        self.target = pygame.Vector2(0, 0)

        # Bounds for the look-at point; world smaller than viewport pins it
        half = self.viewport / 2
        self._min = pygame.Vector2(half)
        self._max = pygame.Vector2(
            max(self.world_size.x, self.viewport.x) - half.x,
            max(self.world_size.y, self.viewport.y) - half.y,
        )

        DebugLogger.init_entry("CameraTracker Initialized")

    # ===========================================================
    # Update
    # ===========================================================
    def update(self, player_position):
        """Blend toward the player, then clamp into the world."""
        self.target += (pygame.Vector2(player_position) - self.target) * self.follow_speed

        self.target.x = max(self._min.x, min(self.target.x, self._max.x))
        self.target.y = max(self._min.y, min(self.target.y, self._max.y))

        DebugLogger.trace(f"Camera target -> {tuple(self.target)}", category="camera")

    # ===========================================================
    # Screen Mapping
    # ===========================================================
    @property
    def scale(self) -> pygame.Vector2:
        """Window pixels per world unit on each axis."""
        return pygame.Vector2(
            self.window_resolution.x / self.viewport.x,
            self.window_resolution.y / self.viewport.y,
        )

    @property
    def offset(self) -> pygame.Vector2:
        """Window-space translation that centers the target."""
        scale = self.scale
        return pygame.Vector2(
            (self.viewport.x / 2 - self.target.x) * scale.x,
            (self.viewport.y / 2 - self.target.y) * scale.y,
        )

    def world_to_screen(self, point) -> pygame.Vector2:
        point = pygame.Vector2(point)
        scale = self.scale
        offset = self.offset
        return pygame.Vector2(point.x * scale.x + offset.x, point.y * scale.y + offset.y)
