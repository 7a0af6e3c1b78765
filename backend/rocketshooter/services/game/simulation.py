from rocketshooter.models import GameSession
from .constants import (
    BULLET_HEIGHT,
    BULLET_STEP,
    FIELD_HEIGHT,
    ROCKET_BASE_STEP,
    ROCKET_HEIGHT,
    PHASE_GAME_OVER,
    PHASE_RUNNING,
    SOUND_GAME_OVER,
)


def advance(session: GameSession) -> None:
    """Move every bullet up and every rocket down by one tick."""
    for bullet in session.bullets:
        bullet.y -= BULLET_STEP
    session.bullets[:] = [b for b in session.bullets if b.y > -BULLET_HEIGHT]

    step = ROCKET_BASE_STEP * session.multiplier
    for rocket in session.rockets:
        rocket.y += step


def check_game_over(session: GameSession) -> bool:
    """End the run if a rocket reached the bottom edge.

    Returns True only for the evaluation that performed the transition, so
    the final score is recorded once no matter how many rockets breach.
    """
    if session.phase != PHASE_RUNNING:
        return False
    if not any(r.y + ROCKET_HEIGHT >= FIELD_HEIGHT for r in session.rockets):
        return False

    session.phase = PHASE_GAME_OVER
    session.paused = False
    session.session_scores.insert(0, session.score)
    session.cancel_timers()
    session.play(SOUND_GAME_OVER)
    return True
