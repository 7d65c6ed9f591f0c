from __future__ import annotations

from typing import Protocol

from pygame.math import Vector2 as V2

from neon_arena import config


class Box(Protocol):
    pos: V2
    width: float
    height: float


def clamp(x: float, lo: float, hi: float) -> float:
    return max(lo, min(hi, x))


def intersects(a: Box, b: Box) -> bool:
    """Axis-aligned overlap; boxes that only touch on an edge don't count."""
    return (
        a.pos.x < b.pos.x + b.width
        and a.pos.x + a.width > b.pos.x
        and a.pos.y < b.pos.y + b.height
        and a.pos.y + a.height > b.pos.y
    )


def center_of(box: Box) -> V2:
    return V2(box.pos.x + box.width / 2, box.pos.y + box.height / 2)


def intersects_point(point: V2, box: Box, point_radius: float = config.BULLET_RADIUS) -> bool:
    """Point (a bullet) against the circle inscribed in ``box``'s width."""
    return point.distance_to(center_of(box)) < box.width / 2 + point_radius
