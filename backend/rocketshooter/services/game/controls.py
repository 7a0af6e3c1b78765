import time
from typing import Optional

from rocketshooter.models import Bullet, GameSession
from .constants import (
    BULLET_COOLDOWN,
    BULLET_WIDTH,
    FIELD_HEIGHT,
    FIELD_WIDTH,
    FIRE_KEY,
    LEFT_KEY,
    PAUSE_KEY,
    PHASE_RUNNING,
    PLAYER_HEIGHT,
    PLAYER_STEP,
    PLAYER_WIDTH,
    RIGHT_KEY,
    SOUND_SHOOT,
)
from .lifecycle import toggle_pause
from .scoring import resolve_collisions


def _now_ms() -> float:
    return time.monotonic() * 1000.0


def move(session: GameSession, dx: float) -> None:
    session.player_x = max(0, min(session.player_x + dx, FIELD_WIDTH - PLAYER_WIDTH))


def fire(session: GameSession, now: Optional[float] = None) -> bool:
    """Spawn a bullet from the player's centre unless the gun is cooling down."""
    if now is None:
        now = _now_ms()
    last = session.last_shot_at
    if last is not None and now - last < BULLET_COOLDOWN:
        return False
    session.bullets.append(Bullet(
        x=session.player_x + PLAYER_WIDTH / 2 - BULLET_WIDTH / 2,
        y=FIELD_HEIGHT - PLAYER_HEIGHT,
    ))
    session.last_shot_at = now
    session.play(SOUND_SHOOT)
    return True


def handle_key(session: GameSession, key: str, now: Optional[float] = None) -> bool:
    """Apply one key press. Returns True when the session changed.

    Keys are ignored outside a running game. The pause key is handled before
    the paused check so it can always resume.
    """
    if session.phase != PHASE_RUNNING:
        return False

    changed = False
    if key.lower() == PAUSE_KEY:
        toggle_pause(session)
        changed = True
    if session.paused:
        return changed

    if key == LEFT_KEY:
        before = session.player_x
        move(session, -PLAYER_STEP)
        changed = changed or session.player_x != before
    elif key == RIGHT_KEY:
        before = session.player_x
        move(session, PLAYER_STEP)
        changed = changed or session.player_x != before
    elif key == FIRE_KEY:
        if fire(session, now):
            resolve_collisions(session)
            changed = True
    return changed
