from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Optional, Tuple

import pygame
from pygame.math import Vector2 as V2

from neon_arena import config


class WeaponId(Enum):
    PISTOL = "pistol"
    ASSAULT_RIFLE = "assaultRifle"
    SHOTGUN = "shotgun"
    LASER = "laser"
    ROCKET = "rocket"

    @property
    def display_name(self) -> str:
        return config.WEAPON_STATS[self.value][0]


BASE_WEAPONS = tuple(WeaponId(w) for w in config.BASE_WEAPONS)
EXTRA_WEAPONS = tuple(WeaponId(w) for w in config.EXTRA_WEAPONS)


class PowerUpType(Enum):
    HEALTH = "health"
    AMMO = "ammo"
    SPEED_BOOST = "speedBoost"
    INVINCIBILITY = "invincibility"
    INFINITE_AMMO = "infiniteAmmo"


# timed power-ups and how long they last
EFFECT_DURATIONS = {
    PowerUpType.SPEED_BOOST: config.SPEED_BOOST_MS,
    PowerUpType.INVINCIBILITY: config.INVINCIBILITY_MS,
    PowerUpType.INFINITE_AMMO: config.INFINITE_AMMO_MS,
}


@dataclass(frozen=True)
class Ammo:
    """Either a finite round count or unlimited (``count is None``)."""

    count: Optional[int] = None

    def __post_init__(self) -> None:
        if self.count is not None and self.count < 0:
            raise ValueError(f"ammo count must be >= 0, got {self.count}")

    @classmethod
    def unlimited(cls) -> Ammo:
        return cls(None)

    @property
    def is_unlimited(self) -> bool:
        return self.count is None

    @property
    def empty(self) -> bool:
        return self.count == 0

    def spend(self) -> Ammo:
        if self.count is None:
            return self
        return Ammo(max(0, self.count - 1))

    def display(self) -> str:
        return "∞" if self.count is None else str(self.count)


@dataclass
class Weapon:
    id: WeaponId
    damage: int
    fire_rate: float  # seconds between shots
    ammo: Ammo = field(default_factory=Ammo.unlimited)
    level: int = 1

    @classmethod
    def base(cls, weapon_id: WeaponId) -> Weapon:
        _, damage, fire_rate = config.WEAPON_STATS[weapon_id.value]
        return cls(weapon_id, damage, fire_rate)


def starting_arsenal() -> Dict[WeaponId, Weapon]:
    return {w: Weapon.base(w) for w in BASE_WEAPONS}


@dataclass
class Player:
    pos: V2 = field(default_factory=lambda: V2(config.PLAYER_START))
    width: int = config.PLAYER_SIZE
    height: int = config.PLAYER_SIZE
    base_speed: float = config.PLAYER_BASE_SPEED
    health: int = config.PLAYER_MAX_HEALTH
    max_health: int = config.PLAYER_MAX_HEALTH
    current_weapon: WeaponId = WeaponId.PISTOL
    weapons: Dict[WeaponId, Weapon] = field(default_factory=starting_arsenal)
    # active timed power-ups -> session clock (ms) at which they wear off
    effects: Dict[PowerUpType, float] = field(default_factory=dict)
    last_shot_ms: Optional[float] = None

    def speed(self) -> float:
        if self.has_effect(PowerUpType.SPEED_BOOST):
            return self.base_speed * config.SPEED_BOOST_MULT
        return self.base_speed

    def has_effect(self, kind: PowerUpType) -> bool:
        return kind in self.effects

    @property
    def invincible(self) -> bool:
        return self.has_effect(PowerUpType.INVINCIBILITY)

    @property
    def weapon(self) -> Weapon:
        return self.weapons[self.current_weapon]

    def center(self) -> V2:
        return V2(self.pos.x + self.width / 2, self.pos.y + self.height / 2)

    def rect(self) -> pygame.Rect:
        return pygame.Rect(int(self.pos.x), int(self.pos.y), self.width, self.height)


@dataclass
class Enemy:
    pos: V2
    width: int = config.ENEMY_SIZE
    height: int = config.ENEMY_SIZE
    health: int = config.ENEMY_HEALTH
    max_health: int = config.ENEMY_HEALTH
    speed: float = config.ENEMY_SPEED
    color: Tuple[int, int, int] = config.ENEMY_COLOR

    def rect(self) -> pygame.Rect:
        return pygame.Rect(int(self.pos.x), int(self.pos.y), self.width, self.height)


@dataclass
class Bullet:
    pos: V2
    vel: V2
    damage: int
    radius: int = config.BULLET_RADIUS

    def update(self) -> None:
        self.pos += self.vel

    def off_canvas(self) -> bool:
        return not (0 <= self.pos.x <= config.WIDTH and 0 <= self.pos.y <= config.HEIGHT)


@dataclass
class PowerUp:
    pos: V2
    kind: PowerUpType
    width: int = config.PICKUP_SIZE
    height: int = config.PICKUP_SIZE


@dataclass
class UpgradeSphere:
    pos: V2
    weapon: WeaponId
    width: int = config.PICKUP_SIZE
    height: int = config.PICKUP_SIZE
