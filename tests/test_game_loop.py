import pytest

from entities.obstacle import Obstacle, ObstacleType, ObstacleManager
from game.game_loop import SimulationDriver
from game.game_state import GamePhase
from utils.constants import MEMORIZE_TIME, MAX_FRAME_DT


def test_cannot_start_from_menu(session):
    with pytest.raises(RuntimeError):
        SimulationDriver(session).start()


def test_advance_requires_running(session):
    session.new_game()
    driver = SimulationDriver(session)
    with pytest.raises(RuntimeError):
        driver.advance(0.016)


def test_whole_seconds_tick_the_countdown(session):
    session.new_game()
    with SimulationDriver(session, max_dt=1.0) as driver:
        driver.advance(0.5)
        assert session.timer == MEMORIZE_TIME
        driver.advance(0.5)
        assert session.timer == MEMORIZE_TIME - 1
        assert driver.frames == 2
    assert not driver.running


def test_paused_frames_do_not_count(session):
    session.new_game()
    driver = SimulationDriver(session, max_dt=1.0)
    driver.start()
    session.pause()
    for _ in range(3):
        driver.advance(1.0)
    assert session.timer == MEMORIZE_TIME
    assert driver.running


def test_large_frames_are_clamped(playing_session):
    driver = SimulationDriver(playing_session)
    driver.start()
    driver.advance(5.0)
    assert playing_session.elapsed == pytest.approx(MAX_FRAME_DT)


def test_negative_dt(playing_session):
    driver = SimulationDriver(playing_session)
    driver.start()
    with pytest.raises(ValueError):
        driver.advance(-0.01)


def test_driver_stops_on_game_over(playing_session):
    session = playing_session
    session.player.lives = 1
    px, pz = session.player.position
    session.level.obstacle_manager = ObstacleManager(
        [Obstacle("obs-0", px, pz, ObstacleType.STATIC_SPIKE)])

    driver = SimulationDriver(session)
    driver.start()
    assert not driver.advance(0.016)
    assert session.phase is GamePhase.GAME_OVER
    assert not driver.running


def test_errors_stop_the_driver(playing_session, monkeypatch):
    driver = SimulationDriver(playing_session)
    driver.start()

    def broken(*args, **kwargs):
        raise KeyError("boom")

    monkeypatch.setattr(playing_session, "update", broken)
    with pytest.raises(KeyError):
        driver.advance(0.016)
    assert not driver.running


def test_inputs_reach_the_player(playing_session):
    driver = SimulationDriver(playing_session)
    driver.start()
    heading = playing_session.player.heading
    driver.advance(0.1, look=(1.0, 0.0))
    assert playing_session.player.heading == pytest.approx(heading - 0.25)


def test_countdown_follows_raw_frame_time(session):
    session.new_game()
    driver = SimulationDriver(session)
    driver.start()
    driver.advance(0.5)
    driver.advance(0.5)
    assert session.timer == MEMORIZE_TIME - 1


def test_clamped_frame_still_ticks_cooldown(playing_session):
    playing_session.ability_cooldown = 3
    driver = SimulationDriver(playing_session)
    driver.start()
    driver.advance(2.0)
    assert playing_session.elapsed == pytest.approx(MAX_FRAME_DT)
    assert playing_session.ability_cooldown == 1


def test_new_level_drops_partial_second(session):
    session.new_game()
    driver = SimulationDriver(session, max_dt=1.0)
    driver.start()
    driver.advance(0.6)

    session.restart_level()
    driver.reset_clock()
    driver.advance(0.6)
    assert session.timer == MEMORIZE_TIME

    driver.advance(0.4)
    assert session.timer == MEMORIZE_TIME - 1
