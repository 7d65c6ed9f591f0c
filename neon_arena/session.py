from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Set

from pygame.math import Vector2 as V2

from neon_arena import config
from neon_arena.economy import Economy
from neon_arena.entities import Bullet, Enemy, Player, PowerUp, UpgradeSphere
from neon_arena.spawner import Spawner

log = logging.getLogger(__name__)


class SoundEvent(Enum):
    SHOOT = "shoot"
    HIT = "hit"
    POWERUP = "powerup"
    GAME_OVER = "game_over"


@dataclass
class InputState:
    """What the player is holding right now; filled in by the event pump."""

    held: Set[int] = field(default_factory=set)
    pointer: V2 = field(default_factory=lambda: V2(config.PLAYER_START))

    def press(self, key: int) -> None:
        self.held.add(key)

    def release(self, key: int) -> None:
        self.held.discard(key)

    def is_held(self, key: int) -> bool:
        return key in self.held


class Session:
    """All mutable state of one play-through.

    Owned by the driver and passed explicitly to the simulation step and the
    renderer.
    """

    def __init__(self, spawner: Optional[Spawner] = None):
        self.spawner = spawner if spawner is not None else Spawner()
        self.reset()

    def reset(self) -> None:
        self.player = Player()
        self.economy = Economy()
        self.enemies: List[Enemy] = []
        self.bullets: List[Bullet] = []
        self.powerups: List[PowerUp] = []
        self.spheres: List[UpgradeSphere] = []
        self.score = 0
        self.level = 1
        self.game_over = False
        self.final_score = 0
        self.shop_open = False
        self.powerup_timer = 0.0
        self.upgrade_timer = 0.0
        self.clock_ms = 0.0
        self.sounds: List[SoundEvent] = []
        self.enemies.extend(self.spawner.spawn_wave(self.level))
        log.info("session started at level %d with %d enemies", self.level, len(self.enemies))

    @property
    def money(self) -> int:
        return self.economy.money

    def emit(self, sound: SoundEvent) -> None:
        self.sounds.append(sound)

    def drain_sounds(self) -> List[SoundEvent]:
        sounds, self.sounds = self.sounds, []
        return sounds
