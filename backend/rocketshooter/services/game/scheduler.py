import time
from typing import Callable, Optional

from rocketshooter import socketio
from rocketshooter.models import GameSession
from rocketshooter.services.facts import fetch_rocket_fact
from . import lifecycle
from .constants import FACT_INTERVAL_MS, PHASE_RUNNING, SPAWN_BASE_INTERVAL_MS, TICK_INTERVAL_MS
from .presentation import render
from .spawner import spawn_interval_ms


def emit_state(app, session: GameSession) -> None:
    """Push the latest snapshot and any queued sound cues to the owner."""
    socketio.emit('state_update', render(session), to=session.sid, namespace='/ws')
    for cue in session.drain_sounds():
        try:
            socketio.emit('sound', {'cue': cue}, to=session.sid, namespace='/ws')
        except Exception as exc:
            # Audio is cosmetic; a failed cue must not stop the loop
            app.logger.warning(f"[sound] sid={session.sid} cue={cue} not delivered: {exc}")


def _stale(session: GameSession, generation: Optional[int]) -> bool:
    return generation is not None and session.timer_generation != generation


def run_tick(app, session: GameSession, generation: Optional[int] = None) -> bool:
    with session.lock:
        if _stale(session, generation):
            return False
        was_running = session.phase == PHASE_RUNNING
        changed = lifecycle.tick(session)
        if changed:
            emit_state(app, session)
        if was_running and session.phase != PHASE_RUNNING:
            app.logger.info(f"[game-over] sid={session.sid} run={session.run_id} score={session.score}")
    return changed


def run_spawn(app, session: GameSession, generation: Optional[int] = None) -> bool:
    with session.lock:
        if _stale(session, generation):
            return False
        changed = lifecycle.spawn(session)
        if changed:
            emit_state(app, session)
    return changed


def run_fact_fetch(app, session: GameSession, generation: Optional[int] = None) -> None:
    """Fetch a fact without holding the session lock during the HTTP call."""
    with session.lock:
        if session.closed or _stale(session, generation):
            return
        run_id = session.run_id
        previous = session.fact
        session.loading_fact = True

    try:
        fact = fetch_rocket_fact(app, previous=previous)
    finally:
        with session.lock:
            session.loading_fact = False

    with session.lock:
        if session.closed or session.run_id != run_id:
            app.logger.info(f"[fact] sid={session.sid} dropped result for stale run={run_id}")
            return
        session.fact = fact
        emit_state(app, session)


def _worker(app, session: GameSession, kind: str, generation: int,
            interval_ms: Callable[[], float], callback: Callable) -> None:
    """Call ``callback`` every ``interval_ms()`` until the generation moves on."""
    try:
        hb = int(app.config.get('TIMER_HEARTBEAT_SEC', 0))
    except Exception:
        hb = 0
    last_beat = time.time()
    while True:
        socketio.sleep(interval_ms() / 1000.0)
        with session.lock:
            if session.timer_generation != generation or not session.is_active:
                app.logger.info(
                    f"[timer-abort] sid={session.sid} kind={kind} generation={generation} current={session.timer_generation}"
                )
                return
        if hb and time.time() - last_beat >= hb:
            last_beat = time.time()
            app.logger.info(f"[timer-heartbeat] sid={session.sid} kind={kind} generation={generation}")
        try:
            callback(app, session, generation)
        except Exception:
            app.logger.exception(f"[timer-error] sid={session.sid} kind={kind}")


def sync_timers(app, session: GameSession) -> None:
    """Start fresh tick, spawn and fact workers for an active session.

    - No-ops in TESTING mode
    - At most one worker per kind: workers started for an older generation
      exit on their next wake
    - Spawn delay is recomputed from the current multiplier before each sleep
    """
    if app.config.get('TESTING') and not app.config.get('ENABLE_SCHEDULER_IN_TESTS'):
        return

    with session.lock:
        if not session.is_active or session.scheduled_generation == session.timer_generation:
            return
        generation = session.timer_generation
        session.scheduled_generation = generation

    tick_ms = float(app.config.get('TICK_INTERVAL_MS', TICK_INTERVAL_MS))
    spawn_base_ms = float(app.config.get('SPAWN_BASE_INTERVAL_MS', SPAWN_BASE_INTERVAL_MS))
    fact_ms = float(app.config.get('FACT_INTERVAL_MS', FACT_INTERVAL_MS))

    app.logger.info(
        f"[timer-set] sid={session.sid} generation={generation} tick={tick_ms}ms spawn={spawn_interval_ms(session.multiplier, spawn_base_ms)}ms fact={fact_ms}ms"
    )

    socketio.start_background_task(
        _worker, app, session, 'tick', generation, lambda: tick_ms, run_tick)
    socketio.start_background_task(
        _worker, app, session, 'spawn', generation,
        lambda: spawn_interval_ms(session.multiplier, spawn_base_ms), run_spawn)
    # One immediate fetch on entering running, then on its own period
    socketio.start_background_task(run_fact_fetch, app, session, generation)
    socketio.start_background_task(
        _worker, app, session, 'fact', generation, lambda: fact_ms, run_fact_fetch)
