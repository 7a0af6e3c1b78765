from typing import NamedTuple

from rocketshooter.models import Bullet, GameSession, Rocket
from .constants import (
    BULLET_WIDTH,
    BULLET_HEIGHT,
    ROCKET_WIDTH,
    ROCKET_HEIGHT,
    SCORE_TIER,
    SOUND_HIT,
    SOUND_MILESTONE,
)


class CollisionResult(NamedTuple):
    hits: int
    milestone: bool


def overlaps(bullet: Bullet, rocket: Rocket) -> bool:
    return (
        bullet.x < rocket.x + ROCKET_WIDTH
        and bullet.x + BULLET_WIDTH > rocket.x
        and bullet.y < rocket.y + ROCKET_HEIGHT
        and bullet.y + BULLET_HEIGHT > rocket.y
    )


def resolve_collisions(session: GameSession) -> CollisionResult:
    """Apply one collision pass to the session.

    Each bullet takes out at most one rocket: rockets are scanned newest
    first and the first overlapping one is removed together with the bullet.
    Score grows by the number of hits; crossing a multiple of SCORE_TIER
    queues a single milestone cue for the whole pass.
    """
    if not session.is_active:
        return CollisionResult(0, False)

    rockets = session.rockets
    survivors = []
    hits = 0
    for bullet in session.bullets:
        for i in range(len(rockets) - 1, -1, -1):
            if overlaps(bullet, rockets[i]):
                del rockets[i]
                session.play(SOUND_HIT)
                hits += 1
                break
        else:
            survivors.append(bullet)

    if not hits:
        return CollisionResult(0, False)

    session.bullets[:] = survivors
    previous = session.score
    session.score = previous + hits
    milestone = session.score // SCORE_TIER > previous // SCORE_TIER
    if milestone:
        session.play(SOUND_MILESTONE)
    return CollisionResult(hits, milestone)
