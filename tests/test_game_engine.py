import pytest

from teeth_flappy.constants import (
    BIRD_X, RESPAWN_Y, COLUMN_WIDTH, SCREEN_WIDTH, SCROLL_SPEED,
    SPAWN_INTERVAL, PLAY_BOTTOM, LIFT, MUSIC_VOLUME
)
from teeth_flappy.data_models import GamePhase
from teeth_flappy.obstacles import TeethColumn


def _clear_column(x):
    """A column whose gap comfortably contains the bird at rest."""
    return TeethColumn(x, 220.0, 200)


def test_new_engine_waits_for_restart(engine):
    assert engine.phase is GamePhase.NOT_STARTED
    engine.tick()
    assert engine.player.y == RESPAWN_Y
    assert engine.tick_count == 0


def test_golden_physics_ten_ticks(running_engine):
    for _ in range(10):
        running_engine.tick()
    assert running_engine.player.velocity == pytest.approx(5.5)
    assert running_engine.player.y - RESPAWN_Y == pytest.approx(sum(0.55 * k for k in range(1, 11)))
    assert running_engine.player.y - RESPAWN_Y == pytest.approx(30.25)
    assert running_engine.player.x == BIRD_X


def test_flap_sets_lift_only_while_running(engine):
    engine.player.velocity = 3.0
    engine.on_flap_input()
    assert engine.player.velocity == 3.0

    engine.on_restart_input()
    engine.player.velocity = 12.0
    engine.on_flap_input()
    assert engine.player.velocity == LIFT == -8.6

    engine.phase = GamePhase.GAME_OVER
    engine.player.velocity = 1.0
    engine.on_flap_input()
    assert engine.player.velocity == 1.0


def test_spawns_on_interval(running_engine):
    running_engine.GRAVITY = 0.0
    for _ in range(SPAWN_INTERVAL - 1):
        running_engine.tick()
    assert running_engine.columns == []
    running_engine.tick()
    assert len(running_engine.columns) == 1
    assert running_engine.frames_since_spawn == 0
    # Spawned and advanced within the same tick
    assert running_engine.columns[0].x == pytest.approx(SCREEN_WIDTH - SCROLL_SPEED)


def test_score_increments_once_per_column(running_engine):
    column = _clear_column(BIRD_X - COLUMN_WIDTH + 1)
    running_engine.columns.append(column)

    running_engine.tick()
    assert running_engine.score == 1
    assert column.scored

    for _ in range(5):
        running_engine.tick()
    assert running_engine.phase is GamePhase.RUNNING
    assert running_engine.score == 1


def test_column_ahead_is_not_scored(running_engine):
    running_engine.columns.append(_clear_column(BIRD_X + 50))
    running_engine.tick()
    assert running_engine.score == 0


def test_offscreen_columns_removed_in_order(running_engine):
    gone = _clear_column(-COLUMN_WIDTH + 1)
    first = _clear_column(300.0)
    second = _clear_column(400.0)
    running_engine.columns.extend([first, gone, second])

    running_engine.tick()
    assert running_engine.columns == [first, second]
    # The culled column was still scored on its last tick
    assert running_engine.score == 1


def test_out_of_bounds_is_idempotent(engine):
    player = engine.player
    player.y = PLAY_BOTTOM - player.radius
    assert not engine.is_out_of_bounds(player)
    player.y += 1
    assert all(engine.is_out_of_bounds(player) for _ in range(3))
    player.y = player.radius - 1
    assert engine.is_out_of_bounds(player)
    assert engine.is_out_of_bounds(player)


def test_hitting_ground_ends_run_and_stops_music(running_engine, track):
    running_engine.player.y = PLAY_BOTTOM - running_engine.player.radius - 0.5
    running_engine.tick()
    assert running_engine.phase is GamePhase.GAME_OVER
    assert track.stops == 1
    assert not track.is_playing()

    # Game over is terminal until restart
    y = running_engine.player.y
    running_engine.tick()
    assert running_engine.player.y == y
    assert track.stops == 1


def test_tooth_collision_ends_run(running_engine, track):
    # After one tick the first bottom tooth tip lands on the bird's centre
    column = TeethColumn(BIRD_X - 15 + SCROLL_SPEED, 200.0, 140)
    running_engine.columns.append(column)
    running_engine.tick()
    assert running_engine.phase is GamePhase.GAME_OVER
    assert track.stops == 1


def test_overlap_without_tooth_contact_keeps_running(running_engine):
    running_engine.columns.append(_clear_column(BIRD_X - 40))
    running_engine.tick()
    assert running_engine.phase is GamePhase.RUNNING


def test_restart_after_game_over(running_engine, track):
    running_engine.columns.append(_clear_column(300.0))
    running_engine.score = 7
    running_engine.phase = GamePhase.GAME_OVER
    track.stop()
    stops_before = track.stops

    running_engine.on_restart_input()
    assert running_engine.phase is GamePhase.RUNNING
    assert running_engine.columns == []
    assert running_engine.score == 0
    assert running_engine.frames_since_spawn == 0
    assert running_engine.player.y == RESPAWN_Y
    assert running_engine.player.velocity == 0.0
    assert track.stops == stops_before
    assert track.starts == [MUSIC_VOLUME, MUSIC_VOLUME]
    assert track.is_playing()


def test_restart_mid_run_restarts_music_once(running_engine, track):
    running_engine.on_restart_input()
    assert track.stops == 1
    assert len(track.starts) == 2
    assert track.is_playing()


def test_next_gap_center_picks_nearest_ahead(running_engine):
    assert running_engine.next_gap_center_y() is None

    running_engine.columns.extend([
        TeethColumn(50.0, 100.0, 150),
        TeethColumn(300.0, 100.0, 150),
        TeethColumn(200.0, 200.0, 160),
    ])
    assert running_engine.next_gap_center_y() == 280.0
    assert len(running_engine.columns) == 3


def test_next_gap_center_ignores_column_at_bird_x(running_engine):
    running_engine.columns.append(TeethColumn(BIRD_X, 100.0, 150))
    assert running_engine.next_gap_center_y() is None
