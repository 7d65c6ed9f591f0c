"""Per-frame game logic.

``step`` advances a :class:`~neon_arena.session.Session` by one frame. The
other public functions are the discrete player actions the driver calls from
its event handler (firing, weapon select, shop purchases). Nothing in here
touches the display.
"""

from __future__ import annotations

import logging
import math
from typing import List, Union

from pygame.math import Vector2 as V2

from neon_arena import config
from neon_arena.economy import TierId, tier_at
from neon_arena.entities import (
    BASE_WEAPONS,
    EFFECT_DURATIONS,
    Ammo,
    Bullet,
    PowerUpType,
    UpgradeSphere,
    Weapon,
    WeaponId,
)
from neon_arena.geometry import clamp, intersects, intersects_point
from neon_arena.session import InputState, Session, SoundEvent

log = logging.getLogger(__name__)


def step(session: Session, inputs: InputState, dt_ms: float = config.FRAME_MS) -> None:
    if session.game_over:
        return

    session.clock_ms += dt_ms
    _expire_effects(session)
    _move_player(session, inputs)
    _tick_spawn_timers(session, dt_ms)
    _update_bullets(session)
    _update_enemies(session)
    if session.game_over:
        return
    _collect_powerups(session)
    _collect_spheres(session)
    _check_wave_complete(session)


# ------------------------------ Stages ------------------------------------- #
def _expire_effects(session: Session) -> None:
    effects = session.player.effects
    for kind, until in list(effects.items()):
        if until <= session.clock_ms:
            del effects[kind]
            log.debug("%s wore off at %.0f ms", kind.value, session.clock_ms)


def _move_player(session: Session, inputs: InputState) -> None:
    player = session.player
    speed = player.speed()
    for key, (dx, dy) in config.MOVE_KEYS.items():
        if inputs.is_held(key):
            player.pos.x += dx * speed
            player.pos.y += dy * speed
    player.pos.x = clamp(player.pos.x, 0, config.WIDTH - player.width)
    player.pos.y = clamp(player.pos.y, 0, config.HEIGHT - player.height)


def _tick_spawn_timers(session: Session, dt_ms: float) -> None:
    session.powerup_timer += dt_ms
    if session.powerup_timer >= config.POWERUP_SPAWN_INTERVAL:
        session.powerups.append(session.spawner.spawn_powerup())
        session.powerup_timer = 0.0

    if not config.UPGRADE_SPHERES_ENABLED:
        return
    session.upgrade_timer += dt_ms
    if session.upgrade_timer >= config.UPGRADE_SPAWN_INTERVAL:
        session.spheres.append(session.spawner.spawn_upgrade_sphere())
        session.upgrade_timer = 0.0


def _update_bullets(session: Session) -> None:
    survivors: List[Bullet] = []
    for b in session.bullets:
        b.update()
        if b.off_canvas():
            continue
        # newest enemies are tested first
        target = next((e for e in reversed(session.enemies) if intersects_point(b.pos, e, b.radius)), None)
        if target is None:
            survivors.append(b)
            continue
        target.health -= b.damage
        session.emit(SoundEvent.HIT)
        if target.health <= 0:
            session.enemies.remove(target)
            session.score += config.KILL_SCORE
            session.economy.earn(config.KILL_MONEY)
            log.debug("enemy down, score %d money %d", session.score, session.money)
    session.bullets = survivors


def _update_enemies(session: Session) -> None:
    player = session.player
    for e in session.enemies:
        to_player = player.pos - e.pos
        if to_player.length_squared() > 0:
            e.pos += to_player.normalize() * e.speed
        if session.game_over or player.invincible:
            continue
        if intersects(player, e):
            _damage_player(session, config.CONTACT_DAMAGE)


def _damage_player(session: Session, amount: int) -> None:
    player = session.player
    player.health = max(0, player.health - amount)
    session.emit(SoundEvent.HIT)
    if player.health <= 0:
        session.game_over = True
        session.final_score = session.score
        session.emit(SoundEvent.GAME_OVER)
        log.info("game over at level %d, final score %d", session.level, session.final_score)


def _collect_powerups(session: Session) -> None:
    for pu in list(session.powerups):
        if intersects(session.player, pu):
            apply_powerup(session, pu.kind)
            session.powerups.remove(pu)


def _collect_spheres(session: Session) -> None:
    for sphere in list(session.spheres):
        if intersects(session.player, sphere):
            collect_sphere(session, sphere)
            session.spheres.remove(sphere)


def _check_wave_complete(session: Session) -> None:
    if session.enemies:
        return
    session.level += 1
    session.enemies.extend(session.spawner.spawn_wave(session.level))
    session.shop_open = True
    log.info("wave cleared, level %d begins with %d enemies", session.level, len(session.enemies))


# ----------------------------- Pickups ------------------------------------- #
def apply_powerup(session: Session, kind: PowerUpType) -> None:
    player = session.player
    if kind == PowerUpType.HEALTH:
        player.health = min(player.max_health, player.health + config.HEALTH_PACK)
    elif kind == PowerUpType.AMMO:
        for weapon_id in BASE_WEAPONS:
            player.weapons[weapon_id].ammo = Ammo.unlimited()
    else:
        # re-pickup restarts the window; nothing stacks
        player.effects[kind] = session.clock_ms + EFFECT_DURATIONS[kind]
    session.emit(SoundEvent.POWERUP)
    log.info("picked up %s", kind.value)


def collect_sphere(session: Session, sphere: UpgradeSphere) -> None:
    player = session.player
    previous = player.weapons.get(sphere.weapon)
    if previous is None:
        weapon = Weapon.base(sphere.weapon)
    else:
        weapon = Weapon(sphere.weapon, previous.damage, previous.fire_rate, Ammo.unlimited(), previous.level)
    player.weapons[sphere.weapon] = weapon
    player.current_weapon = sphere.weapon
    session.emit(SoundEvent.POWERUP)
    log.info("collected %s sphere", sphere.weapon.value)


# ----------------------------- Actions ------------------------------------- #
def bullet_count(session: Session) -> int:
    return 1 + session.economy.level(TierId.MULTI_SHOT)


def fire(session: Session, target: V2) -> List[Bullet]:
    """Shoot a fan of bullets from the player's centre toward ``target``.

    Returns the new bullets; an empty list means the shot was rejected
    (game over, empty magazine, or still cooling down).
    """
    if session.game_over:
        return []
    player = session.player
    weapon = player.weapon
    if weapon.ammo.empty:
        log.debug("%s is empty", weapon.id.value)
        return []
    if config.ENFORCE_FIRE_RATE and player.last_shot_ms is not None:
        if session.clock_ms - player.last_shot_ms < weapon.fire_rate * 1000:
            return []

    origin = player.center()
    aim = math.atan2(target.y - origin.y, target.x - origin.x)
    count = bullet_count(session)
    gap = config.SPREAD_ARC / (count - 1) if count > 1 else 0.0
    first = aim - config.SPREAD_ARC / 2 if count > 1 else aim

    bullets = []
    for i in range(count):
        angle = first + gap * i
        vel = V2(math.cos(angle), math.sin(angle)) * config.BULLET_SPEED
        bullets.append(Bullet(V2(origin), vel, weapon.damage))
    session.bullets.extend(bullets)

    if not player.has_effect(PowerUpType.INFINITE_AMMO):
        weapon.ammo = weapon.ammo.spend()
    player.last_shot_ms = session.clock_ms
    session.emit(SoundEvent.SHOOT)
    return bullets


def select_weapon(session: Session, weapon_id: Union[WeaponId, str]) -> bool:
    weapon_id = WeaponId(weapon_id)
    if weapon_id not in session.player.weapons:
        log.debug("%s not owned", weapon_id.value)
        return False
    session.player.current_weapon = weapon_id
    return True


def toggle_shop(session: Session) -> None:
    session.shop_open = not session.shop_open


def purchase(session: Session, tier_id: Union[TierId, str]) -> bool:
    return session.economy.purchase(tier_id, session.player)


def shop_click(session: Session, x: float, y: float) -> bool:
    """Buy whatever tier button sits under (x, y); False if none or unaffordable."""
    tier_id = tier_at(x, y)
    if tier_id is None:
        return False
    return purchase(session, tier_id)
