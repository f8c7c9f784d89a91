"""
simulation_step.py
------------------
Defines the Simulation orchestrator that advances the world once per frame.

Responsibilities
----------------
- Own the player, bullet pool and camera for the whole session.
- Run input -> player -> bullets -> camera exactly once per tick.
- Accept discrete edges (fire release, aim-lock) between ticks.
- Publish immutable snapshots for the renderer after each tick.
"""

from dataclasses import dataclass

from platformer.core.debug.debug_logger import DebugLogger
from platformer.core.runtime.game_settings import World
from platformer.core.runtime.simulation_config import SimulationConfig
from platformer.entities.player.player_core import Player
from platformer.systems.bullet_manager import BulletManager
from platformer.systems.camera_tracker import CameraTracker


# ===========================================================
# Snapshots
# ===========================================================

@dataclass(frozen=True)
class PlayerSnapshot:
    """Read-only player state for rendering."""
    position: tuple
    velocity: tuple
    size: tuple
    arm_position: tuple
    arm_direction: tuple
    facing_direction: tuple
    charge_fraction: float
    is_aiming: bool
    is_grounded: bool


@dataclass(frozen=True)
class CameraSnapshot:
    """Read-only camera state for world -> window mapping."""
    target: tuple
    viewport: tuple
    scale: tuple
    offset: tuple


@dataclass(frozen=True)
class FrameSnapshot:
    """Everything the renderer needs after one tick."""
    frame: int
    player: PlayerSnapshot
    bullets: tuple  # ((center, half_extents), ...)
    camera: CameraSnapshot


def _xy(vec) -> tuple:
    return (vec.x, vec.y)


def background_tiles(world_size, tile_size=World.BG_TILE_SIZE):
    """Return (x, y, w, h) rectangles tiling the world, column-major."""
    world_w, world_h = world_size
    tile_w, tile_h = tile_size
    cols = int(-(-world_w // tile_w))
    rows = int(-(-world_h // tile_h))
    return [
        (tx * tile_w, ty * tile_h, tile_w, tile_h)
        for tx in range(cols)
        for ty in range(rows)
    ]


# ===========================================================
# Simulation
# ===========================================================

class Simulation:
    """Per-frame simulation core. Single-threaded; mutated only inside tick()."""

    def __init__(self, cfg: SimulationConfig = None):
        DebugLogger.section("Initializing Simulation")

        self.cfg = cfg or SimulationConfig()
        self.frame = 0

        self.bullets = BulletManager(self.cfg.world_size)
        self.player = Player(self.cfg, bullet_manager=self.bullets)
        self.camera = CameraTracker(
            self.cfg.world_size,
            self.cfg.camera_resolution,
            self.cfg.window_resolution,
            self.cfg.camera_follow_speed,
        )

        DebugLogger.init_sub(f"World {self.cfg.world_size}, viewport {self.cfg.camera_resolution}")

    @classmethod
    def from_config_file(cls, filename: str = "simulation.json", strict: bool = False):
        return cls(SimulationConfig.from_file(filename, strict=strict))

    # ===========================================================
    # Tick
    # ===========================================================
    def tick(self, dt: float, held_inputs=()):
        """
        Advance the world by one frame.

        Args:
            dt (float): Elapsed seconds since the previous tick (>= 0).
            held_inputs (Iterable[InputId]): Inputs held during this frame.
        """
        if not dt >= 0:
            DebugLogger.fail(f"Rejected tick with dt={dt}", category="simulation")
            raise ValueError(f"dt must be a non-negative number, got {dt}")

        self.player.process_inputs(held_inputs)
        self.player.update(dt)
        self.bullets.update(dt)
        self.camera.update(self.player.position)

        self.frame += 1
        DebugLogger.trace(
            f"Frame {self.frame}: player={_xy(self.player.position)} bullets={len(self.bullets)}",
            category="timing"
        )

    # ===========================================================
    # Discrete Edges
    # ===========================================================
    def release_fire(self):
        """Fire-button release; returns the spawned bullet or None on cooldown."""
        return self.player.on_fire_release()

    def set_aim_lock(self, engaged: bool):
        self.player.set_is_aiming(engaged)

    # ===========================================================
    # Read-only Views
    # ===========================================================
    def snapshot(self) -> FrameSnapshot:
        player = self.player
        camera = self.camera
        return FrameSnapshot(
            frame=self.frame,
            player=PlayerSnapshot(
                position=_xy(player.position),
                velocity=_xy(player.velocity),
                size=_xy(player.size),
                arm_position=_xy(player.arm_position),
                arm_direction=_xy(player.arm_direction),
                facing_direction=_xy(player.facing_direction),
                charge_fraction=player.charge_fraction,
                is_aiming=player.is_aiming,
                is_grounded=player.is_grounded,
            ),
            bullets=self.bullets.snapshot(),
            camera=CameraSnapshot(
                target=_xy(camera.target),
                viewport=_xy(camera.viewport),
                scale=_xy(camera.scale),
                offset=_xy(camera.offset),
            ),
        )

    def background_tiles(self):
        return background_tiles(self.cfg.world_size)
