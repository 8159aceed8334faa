import logging

import pytest
from pygame.math import Vector2

from shrinkball.core import DifficultyConfig, GameSession, Outcome, Phase, SeededRandom, Viewport


def click_ball(session):
    pos = session.ball.position
    return session.on_pointer_down(pos.x, pos.y)


def test_initial_state(session):
    assert session.score == 0
    assert session.menu_open is False
    assert session.phase is Phase.Running
    ball = session.ball
    assert ball.position == Vector2(400, 300)
    assert ball.velocity == Vector2(0, 0)
    assert ball.radius == 100
    assert ball.color == (255, 0, 0)


def test_first_hit_at_center(session):
    result = session.on_pointer_down(400, 300)
    assert result.outcome is Outcome.Hit
    assert result.score_delta == 1
    assert session.score == 1
    assert result.ball.speed == pytest.approx(200)
    assert result.ball.radius == pytest.approx(98)
    assert result.ball.color == (0, 0, 0)


def test_hit_speed_from_250(session):
    session.state.score = 3
    session.state.ball.velocity = Vector2(150, 200)
    result = click_ball(session)
    assert session.score == 4
    assert result.ball.speed == pytest.approx(257.5)
    after = session.on_tick(16)
    assert after.speed <= 200 + 4 * 20


def test_hit_can_overshoot_cap_until_next_tick(session):
    session.state.score = 30
    session.state.ball.velocity = Vector2(800, 0)  # cap(30) = 800
    result = click_ball(session)
    assert result.ball.speed == pytest.approx(824)
    assert session.speed_cap == pytest.approx(820)
    assert session.on_tick(16).speed == pytest.approx(820)


def test_miss_resets_everything(session):
    for _ in range(3):
        click_ball(session)
        session.on_tick(16)
    assert session.score == 3

    result = session.on_pointer_down(0, 0)
    assert result.outcome is Outcome.Miss
    assert result.score_delta == -3
    assert session.score == 0
    ball = session.ball
    assert ball.radius == 100
    assert ball.color == (255, 0, 0)
    assert ball.velocity == Vector2(0, 0)
    assert ball.position == Vector2(400, 300)


def test_miss_at_score_zero(session):
    result = session.on_pointer_down(5, 5)
    assert result.outcome is Outcome.Miss
    assert result.score_delta == 0


def test_radius_follows_hit_count(session):
    for n in range(1, 30):
        click_ball(session)
        assert session.ball.radius == pytest.approx(100 * 0.98 ** n)


def test_toggle_menu_pauses_simulation(session):
    click_ball(session)
    session.on_tick(16)

    assert session.on_toggle_menu().menu_open is True
    assert session.phase is Phase.Paused
    frozen = session.ball
    for _ in range(10):
        assert session.on_tick(100) == frozen

    result = session.on_pointer_down(frozen.position.x, frozen.position.y)
    assert result.outcome is Outcome.Ignored
    assert result.score_delta == 0
    assert session.score == 1

    assert session.on_toggle_menu().menu_open is False
    assert session.ball == frozen
    moved = session.on_tick(100)
    assert moved.position != frozen.position
    assert moved.velocity == frozen.velocity


def test_toggle_twice_is_identity(session):
    click_ball(session)
    before = session.ball
    session.on_toggle_menu()
    session.on_toggle_menu()
    assert session.menu_open is False
    assert session.ball == before


def test_pause_listeners(session):
    seen = []
    session.add_pause_listener(seen.append)
    session.on_toggle_menu()
    session.on_toggle_menu()
    assert seen == [True, False]


def test_resize_recenters_ball(session):
    click_ball(session)
    session.on_tick(50)
    before = session.ball
    session.on_viewport_resize(1000, 800)
    after = session.ball
    assert after.position == Vector2(500, 400)
    assert after.velocity == before.velocity
    assert after.radius == before.radius
    assert session.score == 1
    assert session.viewport == Viewport(1000, 800)


def test_resize_applies_while_paused(session):
    session.on_toggle_menu()
    session.on_viewport_resize(200, 100)
    assert session.ball.position == Vector2(100, 50)


def test_snapshot_does_not_leak(session):
    snap = session.ball
    snap.position.x = 0
    snap.radius = 1
    assert session.ball.position == Vector2(400, 300)
    assert session.ball.radius == 100


def test_invariants_over_long_run():
    session = GameSession(Viewport(1024, 768), rng=SeededRandom(42))
    for _ in range(60):
        result = click_ball(session)
        assert result.outcome is Outcome.Hit
        for _ in range(20):
            ball = session.on_tick(16)
            assert ball.speed <= session.speed_cap + 1e-9
            assert ball.radius <= ball.position.x <= 1024 - ball.radius
            assert ball.radius <= ball.position.y <= 768 - ball.radius
    assert session.score == 60


def test_tiny_viewport_never_raises():
    session = GameSession(Viewport(0, 0), rng=SeededRandom(1))
    assert session.on_pointer_down(0, 0).outcome is Outcome.Hit
    session.on_tick(16)
    session.on_viewport_resize(0, 0)
    assert session.ball.position == Vector2(0, 0)


def test_custom_difficulty(seq_rng):
    cfg = DifficultyConfig(base_speed=100, speed_step=5, initial_radius=50, initial_color=(0, 0, 255))
    session = GameSession(Viewport(400, 400), cfg, seq_rng([0.0]))
    assert session.ball.radius == 50
    assert session.ball.color == (0, 0, 255)
    result = session.on_pointer_down(200, 200)
    assert result.ball.speed == pytest.approx(100)
    assert session.speed_cap == 105


def test_reset_is_logged(session, caplog):
    caplog.set_level(logging.DEBUG, logger="shrinkball")
    click_ball(session)
    click_ball(session)
    session.on_pointer_down(0, 0)
    assert "Session reset at score 2" in caplog.text
