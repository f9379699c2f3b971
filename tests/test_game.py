import random

import pytest

from spaceshoot.entities import Clock, Player, Star
from spaceshoot.game import GameState, Phase
from spaceshoot.scene import Key


class FakeTime:
    def __init__(self):
        self.now = 0.0

    def __call__(self):
        return self.now


@pytest.fixture
def fake_time():
    return FakeTime()


@pytest.fixture
def state(fake_time):
    return GameState(rng=random.Random(7), clock_factory=lambda: Clock(fake_time))


def test_initial_state(state):
    assert state.phase is Phase.MENU
    assert state.points_text == "Points: 0"
    assert state.health_text == f"Health: {Player.START_HEALTH}"


def test_space_starts_game(state):
    state.handle_key(Key.SPACE)
    assert state.phase is Phase.PLAYING


@pytest.mark.parametrize("key", [Key.ESCAPE, Key.W, Key.OTHER])
def test_other_keys_keep_menu(state, key):
    start = state.player.position
    state.handle_key(key)
    assert state.phase is Phase.MENU
    assert state.player.position == start


def test_movement_while_playing(state):
    state.handle_key(Key.SPACE)
    state.handle_key(Key.W)
    assert state.player.y == Player.START_Y - Player.SPEED
    state.handle_key(Key.A)
    assert state.player.x == Player.START_X - Player.SPEED


def test_update_in_menu_does_nothing(state):
    before = [star.y for star in state.scene.stars]
    state.update()
    assert [star.y for star in state.scene.stars] == before
    assert state.phase is Phase.MENU


def test_update_while_playing_moves_stars(state):
    state.handle_key(Key.SPACE)
    before = [star.y for star in state.scene.stars]
    state.update()
    after = [star.y for star in state.scene.stars]
    assert after == [y + Star.SPEED for y in before]


def test_player_fires_after_interval(state, fake_time):
    state.handle_key(Key.SPACE)
    state.update()
    assert state.scene.bullets == []
    fake_time.now = 0.6
    state.update()
    assert len(state.scene.bullets) == 1
    assert state.scene.bullets[0].x == state.player.x + 17.0


def test_zero_health_ends_game(state):
    state.handle_key(Key.SPACE)
    state.player.health = 0
    before = [star.y for star in state.scene.stars]
    state.update()
    assert state.phase is Phase.GAME_OVER
    assert [star.y for star in state.scene.stars] == before


def test_game_over_ignores_other_keys(state):
    state.handle_key(Key.SPACE)
    state.player.health = -20
    state.update()
    state.handle_key(Key.W)
    assert state.phase is Phase.GAME_OVER


def test_restart_after_game_over(state, fake_time):
    state.handle_key(Key.SPACE)
    state.player.add_points(150)
    state.player.health = 0
    state.update()
    old_scene = state.scene
    fake_time.now = 10.0
    state.handle_key(Key.SPACE)
    assert state.phase is Phase.PLAYING
    assert state.player.points == 0
    assert state.player.health == Player.START_HEALTH
    assert state.scene is not old_scene
    assert state.scene.player is state.player
    assert state.enemies_timer.elapsed_ms() == 0.0
    assert state.bullets_timer.elapsed_ms() == 0.0


def test_texts_follow_player(state):
    state.player.add_points(50)
    state.player.apply_damage(20)
    assert state.points_text == "Points: 50"
    assert state.health_text == f"Health: {Player.START_HEALTH - 20}"