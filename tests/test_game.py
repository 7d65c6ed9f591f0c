import pygame
import pytest
from pygame.math import Vector2 as V2

from neon_arena.economy import TierId
from neon_arena.entities import Enemy, WeaponId
from neon_arena.game import Game, GameState, parse_args


@pytest.fixture
def game():
    g = Game(seed=99, mute=True)
    yield g
    pygame.quit()


def key(kind, k):
    return pygame.event.Event(kind, key=k)


def click(x, y, button=1):
    return pygame.event.Event(pygame.MOUSEBUTTONDOWN, pos=(x, y), button=button)


def test_starts_running(game):
    assert game.state is GameState.RUNNING
    assert game.running
    assert len(game.session.enemies) == 3
    game.tick()
    assert game.hud.health == game.session.player.health


def test_held_keys_drive_movement(game):
    game.handle_event(key(pygame.KEYDOWN, pygame.K_d))
    game.tick()
    assert game.session.player.pos.x == 403
    game.handle_event(key(pygame.KEYUP, pygame.K_d))
    assert not game.inputs.is_held(pygame.K_d)
    game.tick()
    assert game.session.player.pos.x == 403


def test_pointer_motion_updates_aim(game):
    game.handle_event(pygame.event.Event(pygame.MOUSEMOTION, pos=(12, 34), rel=(0, 0), buttons=(0, 0, 0)))
    assert game.inputs.pointer == V2(12, 34)


def test_weapon_keys(game):
    game.handle_event(key(pygame.KEYDOWN, pygame.K_2))
    assert game.session.player.current_weapon is WeaponId.ASSAULT_RIFLE
    game.handle_event(key(pygame.KEYDOWN, pygame.K_3))
    assert game.session.player.current_weapon is WeaponId.SHOTGUN
    game.handle_event(key(pygame.KEYDOWN, pygame.K_1))
    assert game.session.player.current_weapon is WeaponId.PISTOL


def test_shop_toggle(game):
    game.handle_event(key(pygame.KEYDOWN, pygame.K_b))
    assert game.session.shop_open
    game.handle_event(key(pygame.KEYDOWN, pygame.K_b))
    assert not game.session.shop_open


def test_click_fires(game):
    game.handle_event(click(600, 300))
    assert len(game.session.bullets) == 2


def test_right_click_does_nothing(game):
    game.handle_event(click(600, 300, button=3))
    assert game.session.bullets == []


def test_click_on_shop_button_buys(game):
    session = game.session
    session.shop_open = True
    session.economy.money = 100
    game.handle_event(click(530, 70))
    assert session.money == 0
    assert session.economy.level(TierId.PLAYER_SPEED) == 2
    assert session.bullets == []


def test_click_on_empty_shop_panel_is_ignored(game):
    session = game.session
    session.shop_open = True
    session.economy.money = 1000
    game.handle_event(click(790, 240))
    assert session.money == 1000
    assert session.bullets == []


def test_click_outside_open_shop_still_fires(game):
    game.session.shop_open = True
    game.handle_event(click(100, 400))
    assert len(game.session.bullets) == 2


def test_game_over_and_restart(game):
    session = game.session
    session.enemies[:] = [Enemy(V2(session.player.pos))]
    session.player.health = 1
    session.score = 900
    game.tick()
    assert game.state is GameState.GAME_OVER
    assert session.final_score == 900

    game.handle_event(click(600, 300))
    game.handle_event(key(pygame.KEYDOWN, pygame.K_2))
    assert session.bullets == []
    assert session.player.current_weapon is WeaponId.PISTOL

    game.tick()
    assert game.state is GameState.GAME_OVER

    game.handle_event(key(pygame.KEYDOWN, pygame.K_r))
    assert game.state is GameState.RUNNING
    assert session.score == 0
    assert session.player.health == 100
    assert not session.game_over
    assert len(session.enemies) == 3


def test_restart_ignored_while_running(game):
    game.session.score = 500
    game.handle_event(key(pygame.KEYDOWN, pygame.K_r))
    assert game.session.score == 500


def test_escape_and_close_quit(game):
    game.handle_event(key(pygame.KEYDOWN, pygame.K_ESCAPE))
    assert not game.running
    game.running = True
    game.handle_event(pygame.event.Event(pygame.QUIT))
    assert not game.running


def test_tick_flushes_sounds(game):
    game.handle_event(click(600, 300))
    assert game.session.sounds
    game.tick()
    assert game.session.sounds == []


def test_parse_args():
    args = parse_args(["--seed", "5", "--mute", "--log-level", "debug"])
    assert args.seed == 5
    assert args.mute
    assert args.log_level == "debug"
    assert parse_args([]).seed is None
