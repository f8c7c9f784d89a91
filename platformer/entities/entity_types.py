"""Entity types."""

from enum import Enum


class OwnerKind(Enum):
    """Which side fired a projectile. ENEMY is reserved for hostile shooters."""
    PLAYER = "player"
    ENEMY = "enemy"
