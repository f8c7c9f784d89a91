"""
conftest.py
-----------
Shared pytest configuration and fixtures for simulation core tests.

Contains:
- Default config, player, bullet pool and simulation fixtures
- Logger silencing so test output stays readable
- Custom markers
"""

import pytest

from platformer.core.debug.debug_logger import LoggerConfig
from platformer.core.runtime.simulation_config import SimulationConfig
from platformer.core.runtime.simulation_step import Simulation
from platformer.entities.player.player_core import Player
from platformer.systems.bullet_manager import BulletManager


@pytest.fixture(autouse=True)
def quiet_logger(monkeypatch):
    """Disable console logging for every test unless a test re-enables it."""
    monkeypatch.setattr(LoggerConfig, "ENABLE_LOGGING", False)


# ===========================================================
# Common Fixtures
# ===========================================================
@pytest.fixture
def cfg():
    """Default simulation config (world 320x120, player 10x18)."""
    return SimulationConfig()


@pytest.fixture
def bullet_manager(cfg):
    return BulletManager(cfg.world_size)


@pytest.fixture
def player(cfg, bullet_manager):
    """Player wired to a real bullet pool."""
    return Player(cfg, bullet_manager=bullet_manager)


@pytest.fixture
def grounded_player(player, cfg):
    """Player resting on the floor with a fresh jump budget."""
    player.position = (50.0, cfg.world_size[1] - cfg.player_size[1])
    player.velocity = (0.0, 0.0)
    player.jump_counter = 0
    player.jump_timer = 0
    return player


@pytest.fixture
def simulation(cfg):
    return Simulation(cfg)


# ===========================================================
# Pytest configuration
# ===========================================================
def pytest_configure(config):
    """Custom pytest configuration."""
    config.addinivalue_line("markers", "integration: marks tests as integration tests")
    config.addinivalue_line("markers", "unit: marks tests as unit tests")
    config.addinivalue_line("markers", "regression: marks tests as regression tests")


def pytest_collection_modifyitems(config, items):
    """Tag tests as unit unless they are marked integration."""
    for item in items:
        if "integration" not in item.keywords:
            item.add_marker(pytest.mark.unit)
