from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Optional, Union

from neon_arena import config
from neon_arena.entities import Player

log = logging.getLogger(__name__)


class TierId(Enum):
    PLAYER_SPEED = "playerSpeed"
    PLAYER_HEALTH = "playerHealth"
    WEAPON_FIRE_RATE = "weaponFireRate"
    MULTI_SHOT = "multiShot"


@dataclass
class UpgradeTier:
    id: TierId
    name: str
    cost: int
    level: int = 1

    def inflate(self) -> None:
        # floored every step, never in closed form
        self.cost = math.floor(self.cost * config.COST_GROWTH)


def starting_tiers() -> Dict[TierId, UpgradeTier]:
    tiers = {}
    for tid in TierId:
        name, cost = config.UPGRADE_TIERS[tid.value]
        tiers[tid] = UpgradeTier(tid, name, cost)
    return tiers


@dataclass
class Economy:
    """Money balance plus the shop's upgrade tiers."""

    money: int = 0
    tiers: Dict[TierId, UpgradeTier] = field(default_factory=starting_tiers)

    def earn(self, amount: int) -> None:
        self.money += amount

    def level(self, tier_id: Union[TierId, str]) -> int:
        return self.tiers[TierId(tier_id)].level

    def can_afford(self, tier_id: Union[TierId, str]) -> bool:
        return self.money >= self.tiers[TierId(tier_id)].cost

    def purchase(self, tier_id: Union[TierId, str], player: Player) -> bool:
        """Buy one level of ``tier_id`` and apply it to ``player``.

        Returns False, changing nothing, when the balance is short. Unknown
        tier ids raise ``ValueError``.
        """
        tier = self.tiers[TierId(tier_id)]
        if self.money < tier.cost:
            log.debug("cannot afford %s: %d < %d", tier.name, self.money, tier.cost)
            return False
        self.money -= tier.cost
        tier.level += 1
        tier.inflate()
        _apply_upgrade(tier.id, player)
        log.info("bought %s level %d, next cost %d", tier.name, tier.level, tier.cost)
        return True


def _apply_upgrade(tier_id: TierId, player: Player) -> None:
    if tier_id == TierId.PLAYER_SPEED:
        player.base_speed += config.SPEED_UPGRADE
    elif tier_id == TierId.PLAYER_HEALTH:
        player.max_health += config.HEALTH_UPGRADE
        player.health += config.HEALTH_UPGRADE
    elif tier_id == TierId.WEAPON_FIRE_RATE:
        for weapon in player.weapons.values():
            weapon.fire_rate *= config.FIRE_RATE_UPGRADE
    # MULTI_SHOT: the level itself is the effect, read by the fire action


def button_rect(index: int):
    """(x, y, w, h) of the shop button for the index-th tier."""
    y = config.SHOP_BUTTON_TOP + index * config.SHOP_BUTTON_STEP
    return (config.SHOP_BUTTON_X, y, config.SHOP_BUTTON_W, config.SHOP_BUTTON_H)


def in_shop_panel(x: float, y: float) -> bool:
    return config.SHOP_X <= x <= config.WIDTH and 0 <= y <= config.SHOP_HEIGHT


def tier_at(x: float, y: float) -> Optional[TierId]:
    if not in_shop_panel(x, y):
        return None
    for i, tid in enumerate(TierId):
        bx, by, bw, bh = button_rect(i)
        if bx <= x <= bx + bw and by <= y <= by + bh:
            return tid
    return None
