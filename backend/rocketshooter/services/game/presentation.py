from rocketshooter.models import GameSession
from .constants import (
    FIELD_HEIGHT,
    FIELD_WIDTH,
    PHASE_GAME_OVER,
    PHASE_PRE_GAME,
    PHASE_RUNNING,
)


def overlay_for(session: GameSession):
    if session.phase == PHASE_PRE_GAME:
        return 'start'
    if session.phase == PHASE_GAME_OVER:
        return 'game_over'
    if session.paused:
        return 'paused'
    return None


def render(session: GameSession) -> dict:
    """Snapshot of everything the page draws. Derived only, never stored."""
    shown = session.phase != PHASE_PRE_GAME
    total = len(session.session_scores)
    return {
        'field': {'width': FIELD_WIDTH, 'height': FIELD_HEIGHT},
        'phase': session.phase,
        'paused': session.paused and session.phase == PHASE_RUNNING,
        'overlay': overlay_for(session),
        'score': session.score,
        'player': {'x': session.player_x} if session.phase == PHASE_RUNNING else None,
        'bullets': [b.to_dict() for b in session.bullets] if shown else [],
        'rockets': [r.to_dict() for r in session.rockets] if shown else [],
        'session_scores': [
            {'label': f'Game {total - i}', 'score': s}
            for i, s in enumerate(session.session_scores)
        ],
        'fact': session.fact,
        'loading_fact': session.loading_fact,
    }
