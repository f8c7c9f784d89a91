"""
Simulation system exports.
"""

from platformer.systems.bullet_manager import BulletManager
from platformer.systems.camera_tracker import CameraTracker

__all__ = [
    'BulletManager',
    'CameraTracker',
]
