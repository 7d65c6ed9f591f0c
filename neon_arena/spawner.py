from __future__ import annotations

import logging
import random
from typing import List, Optional

from pygame.math import Vector2 as V2

from neon_arena import config
from neon_arena.entities import EXTRA_WEAPONS, Enemy, PowerUp, PowerUpType, UpgradeSphere

log = logging.getLogger(__name__)


class Spawner:
    """Creates enemies and pickups at random in-bounds positions.

    Pass ``seed`` (or your own ``random.Random``) for reproducible layouts.
    """

    def __init__(self, rng: Optional[random.Random] = None, seed: Optional[int] = None):
        self.rng = rng if rng is not None else random.Random(seed)

    def _random_pos(self, size: float) -> V2:
        return V2(self.rng.uniform(0, config.WIDTH - size), self.rng.uniform(0, config.HEIGHT - size))

    def spawn_wave(self, level: int) -> List[Enemy]:
        count = config.WAVE_BASE_ENEMIES + level
        enemies = [Enemy(self._random_pos(config.ENEMY_SIZE)) for _ in range(count)]
        log.debug("spawned wave %d with %d enemies", level, count)
        return enemies

    def spawn_powerup(self) -> PowerUp:
        kind = self.rng.choice(list(PowerUpType))
        pu = PowerUp(self._random_pos(config.PICKUP_SIZE), kind)
        log.debug("spawned %s power-up at (%.0f, %.0f)", kind.value, pu.pos.x, pu.pos.y)
        return pu

    def spawn_upgrade_sphere(self) -> UpgradeSphere:
        weapon = self.rng.choice(EXTRA_WEAPONS)
        sphere = UpgradeSphere(self._random_pos(config.PICKUP_SIZE), weapon)
        log.debug("spawned %s sphere at (%.0f, %.0f)", weapon.value, sphere.pos.x, sphere.pos.y)
        return sphere
