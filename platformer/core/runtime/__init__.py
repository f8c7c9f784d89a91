"""
Runtime exports.

Provides configuration, the per-tick orchestrator and its snapshots.
"""

from platformer.core.runtime.simulation_config import SimulationConfig, ConfigError
from platformer.core.runtime.simulation_step import (
    Simulation,
    FrameSnapshot,
    PlayerSnapshot,
    CameraSnapshot,
)

__all__ = [
    'SimulationConfig',
    'ConfigError',
    'Simulation',
    'FrameSnapshot',
    'PlayerSnapshot',
    'CameraSnapshot',
]
