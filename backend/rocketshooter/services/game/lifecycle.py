import random

from rocketshooter.models import GameSession
from .constants import (
    FIELD_WIDTH,
    GET_READY_TEXT,
    PHASE_GAME_OVER,
    PHASE_PRE_GAME,
    PHASE_RUNNING,
    PLAYER_WIDTH,
)
from .scoring import resolve_collisions
from .simulation import advance, check_game_over
from .spawner import spawn_rocket


def start_game(session: GameSession) -> bool:
    """Reset the run and enter the running phase.

    Only valid from pre-game or game-over; returns False otherwise.
    """
    if session.phase not in (PHASE_PRE_GAME, PHASE_GAME_OVER):
        return False
    session.cancel_timers()
    session.run_id += 1
    session.rockets.clear()
    session.bullets.clear()
    session.score = 0
    session.paused = False
    session.last_shot_at = None
    session.player_x = FIELD_WIDTH / 2 - PLAYER_WIDTH / 2
    session.phase = PHASE_RUNNING
    session.fact = GET_READY_TEXT
    return True


def toggle_pause(session: GameSession) -> None:
    if session.phase != PHASE_RUNNING:
        return
    session.paused = not session.paused
    # Pausing stops the workers; resuming gets a fresh schedule
    session.cancel_timers()


def tick(session: GameSession) -> bool:
    """One simulation step: move, detect game over, then resolve hits."""
    if not session.is_active:
        return False
    advance(session)
    if check_game_over(session):
        return True
    resolve_collisions(session)
    return True


def spawn(session: GameSession, rng=random) -> bool:
    if not session.is_active:
        return False
    spawn_rocket(session, rng)
    resolve_collisions(session)
    return True


def close(session: GameSession) -> None:
    session.closed = True
    session.cancel_timers()
