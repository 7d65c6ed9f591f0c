"""
Neon Arena: top-down arena shooter (pygame)

Controls:
- Move: WASD          Aim: mouse          Fire: left click
- Weapons: 1 pistol, 2 assault rifle, 3 shotgun (spheres unlock laser/rocket)
- Shop: B to open/close, click a tier to buy. Opens by itself between waves.
- Restart: R (after game over)          Quit: ESC

Goal: clear waves of chasers. Every kill pays 100 score and $10; spend the
money on speed, health, fire rate and multi-shot upgrades.
"""

from __future__ import annotations

import argparse
import logging
from enum import Enum, auto
from typing import List, Optional

import pygame
from pygame.math import Vector2 as V2

from neon_arena import config, simulation
from neon_arena.audio import SoundManager
from neon_arena.economy import in_shop_panel
from neon_arena.hud import HudModel, render_hud
from neon_arena.log import setup_logging
from neon_arena.renderer import Renderer
from neon_arena.session import InputState, Session
from neon_arena.spawner import Spawner

log = logging.getLogger(__name__)


class GameState(Enum):
    RUNNING = auto()
    GAME_OVER = auto()


class Game:
    def __init__(self, seed: Optional[int] = None, mute: bool = False):
        pygame.init()
        pygame.display.set_caption(config.TITLE)
        self.screen = pygame.display.set_mode((config.WIDTH, config.HEIGHT))
        self.clock = pygame.time.Clock()
        self.running = True
        self.state = GameState.RUNNING

        self.session = Session(Spawner(seed=seed))
        self.inputs = InputState()
        self.renderer = Renderer(self.screen)
        self.audio = SoundManager(enabled=not mute)
        self.hud: HudModel = render_hud(self.session)

    # ---------------------- Lifecycle ------------------------ #
    def restart(self) -> None:
        self.session.reset()
        self.state = GameState.RUNNING
        log.info("restarted")

    # ---------------------- Input ---------------------------- #
    def handle_event(self, event: pygame.event.Event) -> None:
        if event.type == pygame.QUIT:
            self.running = False
        elif event.type == pygame.KEYDOWN:
            self.inputs.press(event.key)
            self._on_key(event.key)
        elif event.type == pygame.KEYUP:
            self.inputs.release(event.key)
        elif event.type == pygame.MOUSEMOTION:
            self.inputs.pointer = V2(event.pos)
        elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            self.inputs.pointer = V2(event.pos)
            self._on_click(*event.pos)

    def _on_key(self, key: int) -> None:
        if key == config.QUIT_KEY:
            self.running = False
        elif self.state == GameState.GAME_OVER:
            if key == config.RESTART_KEY:
                self.restart()
        elif key in config.WEAPON_KEYS:
            simulation.select_weapon(self.session, config.WEAPON_KEYS[key])
        elif key == config.SHOP_KEY:
            simulation.toggle_shop(self.session)

    def _on_click(self, x: float, y: float) -> None:
        if self.state != GameState.RUNNING:
            return
        if self.session.shop_open and in_shop_panel(x, y):
            simulation.shop_click(self.session, x, y)
        else:
            simulation.fire(self.session, V2(x, y))

    # ---------------------- Frame ---------------------------- #
    def tick(self) -> None:
        if self.state == GameState.RUNNING:
            simulation.step(self.session, self.inputs)
            if self.session.game_over:
                self.state = GameState.GAME_OVER
        self.hud = render_hud(self.session)
        self.renderer.draw(self.session, self.hud)
        self.audio.play_all(self.session.drain_sounds())

    def run(self) -> None:
        while self.running:
            self.clock.tick(config.FPS)
            for event in pygame.event.get():
                self.handle_event(event)
            if not self.running:
                break
            self.tick()
            pygame.display.flip()
        pygame.quit()


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="neon-arena", description="Top-down arena shooter.")
    parser.add_argument("--seed", type=int, default=None, help="seed for enemy and pickup placement")
    parser.add_argument("--mute", action="store_true", help="disable sound effects")
    parser.add_argument("--log-level", default=None,
                        help=f"logging level (default: ${config.LOG_LEVEL_ENV} or WARNING)")
    parser.add_argument("--log-file", default=None, help="also write the log to this file")
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    setup_logging(args.log_level, args.log_file)
    Game(seed=args.seed, mute=args.mute).run()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
