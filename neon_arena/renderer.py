"""Draws a session onto a pygame surface.

The renderer only ever reads the session. Fonts are created lazily so the
module can be imported before ``pygame.init()``.
"""

from __future__ import annotations

from typing import Optional, Tuple

import pygame
from pygame import Surface

from neon_arena import config
from neon_arena.economy import TierId, button_rect
from neon_arena.geometry import center_of
from neon_arena.hud import HudModel
from neon_arena.session import Session

HEALTH_BAR_HEIGHT = 5
HEALTH_BAR_GAP = 10


class Renderer:
    def __init__(self, surface: Surface):
        self.surface = surface
        pygame.font.init()
        self.font_big = pygame.font.SysFont("arial", 48)
        self.font_mid = pygame.font.SysFont("arial", 36)
        self.font = pygame.font.SysFont("arial", 20)
        self.font_small = pygame.font.SysFont("arial", 14)
        self.font_tiny = pygame.font.SysFont("arial", 12)

    # ------------------------------------------------------------------ #
    def draw(self, session: Session, hud: Optional[HudModel] = None) -> None:
        self.surface.fill(config.BLACK)
        if session.game_over:
            self.draw_game_over(session)
            return

        player = session.player
        color = config.CYAN if player.invincible else config.GREEN
        pygame.draw.rect(self.surface, color, player.rect())
        self.draw_health_bar(player.pos.x, player.pos.y - HEALTH_BAR_GAP, player.width,
                             player.health, player.max_health, config.GREEN)

        for e in session.enemies:
            pygame.draw.rect(self.surface, e.color, e.rect())
            self.draw_health_bar(e.pos.x, e.pos.y - HEALTH_BAR_GAP, e.width,
                                 e.health, e.max_health, config.RED)

        for b in session.bullets:
            pygame.draw.circle(self.surface, config.YELLOW, b.pos, b.radius)

        for pu in session.powerups:
            pygame.draw.circle(self.surface, config.POWERUP_COLORS[pu.kind.value], center_of(pu), pu.width / 2)

        for sphere in session.spheres:
            center = center_of(sphere)
            pygame.draw.circle(self.surface, config.SPHERE_COLORS[sphere.weapon.value], center, sphere.width / 2)
            self._blit_centered(self.font_tiny, sphere.weapon.value.upper(), config.WHITE, center)

        money = self.font.render(f"Money: ${session.money}", True, config.YELLOW)
        self.surface.blit(money, (20, 20))

        if hud is not None:
            self.draw_hud(hud)
        if session.shop_open:
            self.draw_shop(session)

    def draw_health_bar(self, x: float, y: float, width: float, health: float, max_health: float,
                        color: Tuple[int, int, int]) -> None:
        bar = pygame.Rect(int(x), int(y), int(width), HEALTH_BAR_HEIGHT)
        pygame.draw.rect(self.surface, config.BLACK, bar)
        ratio = max(0.0, min(1.0, health / max_health)) if max_health > 0 else 0.0
        fill = bar.copy()
        fill.width = int(width * ratio)
        if fill.width > 0:
            pygame.draw.rect(self.surface, color, fill)
        pygame.draw.rect(self.surface, config.WHITE, bar, 1)

    def draw_hud(self, hud: HudModel) -> None:
        x, y = 14, config.HEIGHT - 22
        for line in hud.lines():
            img = self.font_small.render(line, True, config.WHITE)
            self.surface.blit(img, (x, y))
            x += img.get_width() + 16

    def draw_shop(self, session: Session) -> None:
        panel = pygame.Surface((config.SHOP_WIDTH, config.SHOP_HEIGHT), pygame.SRCALPHA)
        panel.fill((0, 0, 0, 204))
        self.surface.blit(panel, (config.SHOP_X, 0))
        self._blit_centered(self.font, "Upgrade Shop", config.WHITE, (config.WIDTH - config.SHOP_WIDTH / 2, 30))

        for i, tid in enumerate(TierId):
            tier = session.economy.tiers[tid]
            x, y, w, h = button_rect(i)
            color = config.SHOP_GREEN if session.economy.can_afford(tid) else config.GREY
            pygame.draw.rect(self.surface, color, (x, y, w, h))
            label = self.font_small.render(f"{tier.name} (Level {tier.level})", True, config.WHITE)
            self.surface.blit(label, (x + 10, y + 2))
            cost = self.font_small.render(f"${tier.cost}", True, config.WHITE)
            self.surface.blit(cost, (x + 10, y + 18))

    def draw_game_over(self, session: Session) -> None:
        overlay = pygame.Surface((config.WIDTH, config.HEIGHT), pygame.SRCALPHA)
        overlay.fill((0, 0, 0, 204))
        self.surface.blit(overlay, (0, 0))
        cx, cy = config.WIDTH / 2, config.HEIGHT / 2
        self._blit_centered(self.font_big, "GAME OVER", config.RED, (cx, cy - 50))
        self._blit_centered(self.font_mid, f"Final Score: {session.final_score}", config.WHITE, (cx, cy))
        self._blit_centered(self.font, "Press R to Restart", config.WHITE, (cx, cy + 50))

    def _blit_centered(self, font: pygame.font.Font, text: str, color, center) -> None:
        img = font.render(text, True, color)
        self.surface.blit(img, img.get_rect(center=(int(center[0]), int(center[1]))))
