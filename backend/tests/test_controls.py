from rocketshooter.services.game import controls
from rocketshooter.services.game.constants import FIELD_WIDTH, PLAYER_WIDTH


def test_keys_ignored_before_start(session):
    assert controls.handle_key(session, 'ArrowLeft') is False
    assert controls.handle_key(session, ' ') is False
    assert controls.handle_key(session, 'p') is False
    assert session.bullets == []
    assert session.paused is False


def test_movement_is_clamped_at_both_edges(running):
    running.player_x = 10
    controls.handle_key(running, 'ArrowLeft')
    assert running.player_x == 0
    assert controls.handle_key(running, 'ArrowLeft') is False
    assert running.player_x == 0

    running.player_x = FIELD_WIDTH - PLAYER_WIDTH - 5
    controls.handle_key(running, 'ArrowRight')
    assert running.player_x == FIELD_WIDTH - PLAYER_WIDTH
    controls.handle_key(running, 'ArrowRight')
    assert running.player_x == FIELD_WIDTH - PLAYER_WIDTH


def test_move_steps_twenty(running):
    assert running.player_x == 375
    controls.handle_key(running, 'ArrowRight')
    assert running.player_x == 395
    controls.handle_key(running, 'ArrowLeft')
    controls.handle_key(running, 'ArrowLeft')
    assert running.player_x == 355


def test_fire_respects_cooldown(running):
    assert controls.handle_key(running, ' ', now=0) is True
    assert len(running.bullets) == 1
    assert (running.bullets[0].x, running.bullets[0].y) == (397.5, 550)

    assert controls.handle_key(running, ' ', now=200) is False
    assert len(running.bullets) == 1

    assert controls.handle_key(running, ' ', now=350) is True
    assert len(running.bullets) == 2


def test_suppressed_fire_has_no_side_effects(running):
    controls.fire(running, now=1000)
    assert running.drain_sounds() == ['shoot']
    assert controls.fire(running, now=1100) is False
    assert running.drain_sounds() == []
    assert running.last_shot_at == 1000


def test_pause_blocks_movement_and_fire(running):
    assert controls.handle_key(running, 'P') is True
    assert running.paused is True
    controls.handle_key(running, 'ArrowLeft')
    controls.handle_key(running, ' ', now=0)
    assert running.player_x == 375
    assert running.bullets == []

    controls.handle_key(running, 'p')
    assert running.paused is False
    controls.handle_key(running, 'ArrowLeft')
    assert running.player_x == 355


def test_pause_toggle_cancels_timers(running):
    generation = running.timer_generation
    controls.handle_key(running, 'p')
    assert running.timer_generation == generation + 1
    controls.handle_key(running, 'p')
    assert running.timer_generation == generation + 2


def test_unknown_key_is_ignored(running):
    assert controls.handle_key(running, 'x') is False


def test_cooldown_ignores_wall_clock_jumps(running, monkeypatch):
    clock = {'mono': 1000.0, 'wall': 5000.0}
    monkeypatch.setattr(controls.time, 'monotonic', lambda: clock['mono'])
    monkeypatch.setattr(controls.time, 'time', lambda: clock['wall'])

    assert controls.fire(running) is True
    clock['wall'] -= 3600.0
    clock['mono'] += 0.4
    assert controls.fire(running) is True
    assert len(running.bullets) == 2
