"""
Platformer simulation core.

Per-frame physics, boundary collision, camera tracking and bullet
lifecycle for a small 2D platformer. Windowing and drawing live outside.
"""

from platformer.core.runtime.simulation_config import SimulationConfig, ConfigError
from platformer.core.runtime.simulation_step import Simulation, FrameSnapshot
from platformer.core.services.input_manager import InputId, InputManager

__all__ = [
    'Simulation',
    'SimulationConfig',
    'ConfigError',
    'FrameSnapshot',
    'InputId',
    'InputManager',
]
