from flask_socketio import emit
from flask import current_app, request
from rocketshooter import socketio
from rocketshooter.models import GameSession
from rocketshooter.services.game import controls, lifecycle, scheduler
from rocketshooter.services.game.presentation import render
from typing import Dict

# One game per connected socket, discarded on disconnect
_sessions: Dict[str, GameSession] = {}


def _get_sid() -> str:
    # type: ignore: request.sid exists in Socket.IO context
    return request.sid  # type: ignore


def get_session(sid: str):
    return _sessions.get(sid)


def _push(session: GameSession) -> None:
    """Emit the snapshot and queued sound cues back to the caller."""
    emit('state_update', render(session))
    for cue in session.drain_sounds():
        try:
            emit('sound', {'cue': cue})
        except Exception as exc:
            current_app.logger.warning(f"[sound] sid={session.sid} cue={cue} not delivered: {exc}")


def handle_connect():
    sid = _get_sid()
    session = GameSession(sid=sid)
    _sessions[sid] = session
    emit('connected', {'message': 'Connected to /ws'})
    _push(session)


def handle_disconnect(*args):
    session = _sessions.pop(_get_sid(), None)
    if not session:
        return
    with session.lock:
        lifecycle.close(session)
    current_app.logger.info(f"[session-closed] sid={session.sid} games={len(session.session_scores)}")


def handle_start_game(data=None):
    session = _sessions.get(_get_sid())
    if not session:
        emit('error', {'message': 'No game session for this connection'})
        return
    with session.lock:
        started = lifecycle.start_game(session)
        if started:
            current_app.logger.info(f"[game-start] sid={session.sid} run={session.run_id}")
        _push(session)
    if started:
        scheduler.sync_timers(current_app._get_current_object(), session)


def handle_key(data):
    key = (data or {}).get('key') if isinstance(data, dict) else None
    if not isinstance(key, str) or not key:
        emit('error', {'message': 'key is required'})
        return
    session = _sessions.get(_get_sid())
    if not session:
        emit('error', {'message': 'No game session for this connection'})
        return
    with session.lock:
        changed = controls.handle_key(session, key)
        if changed:
            _push(session)
    if changed:
        # Resuming from pause needs a fresh set of workers
        scheduler.sync_timers(current_app._get_current_object(), session)


def handle_ping(data):
    emit('pong', data or {})


def register_socketio_handlers(testing: bool = False) -> None:
    """Register Socket.IO event handlers.

    Always register on namespace '/ws'. When testing is True, also mirror
    handlers on the default namespace '/' to accommodate the test harness.
    """
    handlers = {
        'connect': handle_connect,
        'disconnect': handle_disconnect,
        'start_game': handle_start_game,
        'key': handle_key,
        'ping': handle_ping,
    }
    for name, handler in handlers.items():
        socketio.on_event(name, handler, namespace='/ws')
        if testing:
            # Test-only mirror on default namespace
            socketio.on_event(name, handler, namespace='/')
