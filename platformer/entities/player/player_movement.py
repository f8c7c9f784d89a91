"""
player_movement.py
------------------
Handles player jumping, horizontal impulses, and world-boundary integration.

Responsibilities
----------------
- Gate jumps on the jump budget and cooldown.
- Translate movement input into horizontal velocity (unless aim-locked).
- Integrate the player body inside the world and reset jumps on contact.
"""

from platformer.core.debug.debug_logger import DebugLogger


def try_jump(player) -> bool:
    """
    Launch the player upward if a jump is available.

    Args:
        player (Player): The player instance being updated.

    Returns:
        bool: True if the jump fired this call.
    """
    cfg = player.cfg
    if player.jump_counter >= cfg.max_jumps or player.jump_timer != 0:
        return False

    player.velocity.y = cfg.jump_velocity
    player.jump_timer = cfg.jump_cooldown
    player.jump_counter += 1

    DebugLogger.trace(f"[PlayerJump] jump {player.jump_counter}/{cfg.max_jumps}", category="player")
    return True


def apply_move_impulse(player, direction: int):
    """Add a fixed horizontal delta; suppressed while aim-locked."""
    if player.is_aiming:
        return
    player.velocity.x += direction * player.cfg.move_impulse


def update_movement(player, dt):
    """
    Integrate the player's body for one tick.

    Args:
        player (Player): The player instance being updated.
        dt (float): Delta time since the last tick (in seconds).
    """
    cfg = player.cfg
    body = player.body

    # Braking stance: heavier friction while grounded and aim-locked
    brake_mult = cfg.aim_lock_friction_mult if player.is_aiming else 1.0

    body.integrate(dt, cfg.world_size, cfg.gravity, cfg.friction, brake_mult)

    # Touching the floor or ceiling restores the jump budget
    if body.clamped_y:
        player.jump_counter = 0
