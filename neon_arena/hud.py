from __future__ import annotations

from dataclasses import dataclass

from neon_arena.entities import PowerUpType
from neon_arena.session import Session


@dataclass(frozen=True)
class HudModel:
    health: int
    score: int
    money: int
    weapon: str
    ammo: str
    speed_boost: str
    invincibility: str

    def lines(self):
        return [
            f"Health: {self.health}",
            f"Score: {self.score}",
            f"Money: ${self.money}",
            f"Weapon: {self.weapon}",
            f"Ammo: {self.ammo}",
            f"Speed Boost: {self.speed_boost}",
            f"Invincibility: {self.invincibility}",
        ]


def _status(active: bool) -> str:
    return "Active" if active else "Inactive"


def render_hud(session: Session) -> HudModel:
    player = session.player
    return HudModel(
        health=player.health,
        score=session.score,
        money=session.money,
        weapon=player.current_weapon.display_name,
        ammo=player.weapon.ammo.display(),
        speed_boost=_status(player.has_effect(PowerUpType.SPEED_BOOST)),
        invincibility=_status(player.invincible),
    )
