import random

from rocketshooter.models import GameSession, Rocket
from .constants import FIELD_WIDTH, ROCKET_WIDTH, ROCKET_HEIGHT, SPAWN_BASE_INTERVAL_MS


def spawn_interval_ms(multiplier: float, base_ms: float = SPAWN_BASE_INTERVAL_MS) -> float:
    """Delay until the next rocket; shrinks as the multiplier grows."""
    return base_ms / multiplier


def spawn_rocket(session: GameSession, rng=random) -> Rocket:
    """Drop one rocket just above the top edge at a random column."""
    rocket = Rocket(x=rng.random() * (FIELD_WIDTH - ROCKET_WIDTH), y=-ROCKET_HEIGHT)
    session.rockets.append(rocket)
    return rocket
