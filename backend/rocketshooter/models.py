import threading
from dataclasses import dataclass, field
from typing import List, Optional

from rocketshooter.services.game.constants import (
    FIELD_WIDTH,
    PLAYER_WIDTH,
    SCORE_TIER,
    PHASE_PRE_GAME,
    PHASE_RUNNING,
    WELCOME_TEXT,
)


def difficulty_multiplier(score: int) -> float:
    """Rocket speed / spawn rate scale derived from the score."""
    return 1 + score / SCORE_TIER


@dataclass
class Bullet:
    x: float
    y: float

    def to_dict(self):
        return {'x': self.x, 'y': self.y}


@dataclass
class Rocket:
    x: float
    y: float

    def to_dict(self):
        return {'x': self.x, 'y': self.y}


@dataclass
class GameSession:
    """All state of one player's game, owned by a single socket connection.

    Every read-modify-write goes through ``lock`` so that socket events and
    the timer workers are applied one after another.
    """
    sid: str
    player_x: float = FIELD_WIDTH / 2 - PLAYER_WIDTH / 2
    bullets: List[Bullet] = field(default_factory=list)
    rockets: List[Rocket] = field(default_factory=list)
    score: int = 0
    phase: str = PHASE_PRE_GAME
    paused: bool = False
    session_scores: List[int] = field(default_factory=list)
    last_shot_at: Optional[float] = None
    fact: str = WELCOME_TEXT
    loading_fact: bool = False
    run_id: int = 0
    timer_generation: int = 0
    scheduled_generation: Optional[int] = None
    closed: bool = False
    sounds: List[str] = field(default_factory=list)
    lock: threading.RLock = field(default_factory=threading.RLock, repr=False, compare=False)

    @property
    def multiplier(self) -> float:
        return difficulty_multiplier(self.score)

    @property
    def is_active(self) -> bool:
        """True while the simulation timers are allowed to run."""
        return not self.closed and self.phase == PHASE_RUNNING and not self.paused

    def cancel_timers(self) -> None:
        # Workers compare their captured generation on every wake
        self.timer_generation += 1

    def play(self, cue: str) -> None:
        self.sounds.append(cue)

    def drain_sounds(self) -> List[str]:
        cues, self.sounds = self.sounds, []
        return cues
