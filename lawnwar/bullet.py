"""Bullets fired by plants, and how they hit zombies."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Any

from lawnwar.animation import AnimationComp, TextureLoader
from lawnwar.attack_comp import AttackComp
from lawnwar.component import CompType, EntityStatus, EntityType
from lawnwar.direction import Dir, Direction
from lawnwar.entity import Entity
from lawnwar.geometry import RectangleShape
from lawnwar.movement import MovementComp
from lawnwar.position import PositionComp
from lawnwar.tools import Vector2, get_path

BULLET_ATTACK_OFFSET = Vector2(0, 0)


@dataclass
class PlantSupport:
    """What the firing plant decides about a bullet."""

    damage: float
    start: Vector2
    direction: Direction | Dir
    length: int


@dataclass
class BulletSupport:
    """What a bullet kind fixes about itself."""

    size: Vector2
    piercing: bool
    speed: int
    animation: str | os.PathLike[str]


@dataclass
class BulletData:
    bullet: BulletSupport
    plant: PlantSupport


class Bullet(Entity):
    """A projectile that flies in a straight line and damages zombies it meets."""

    def __init__(self, data: BulletData, loader: TextureLoader | None = None) -> None:
        super().__init__(EntityType.BULLET)
        self._data = data
        kind, shot = data.bullet, data.plant
        hitbox = PositionComp(shot.start, kind.size)
        striker = AttackComp(
            shot.damage,
            0,
            RectangleShape(kind.size),
            hitbox.pos + BULLET_ATTACK_OFFSET,
        )
        striker.set_attack_func(bullet_attack_zombie)
        for part in (
            hitbox,
            MovementComp(shot.direction, kind.speed, shot.length),
            AnimationComp(kind.animation, loader),
            striker,
        ):
            self.add_comp(part)

    @property
    def data(self) -> BulletData:
        return self._data

    def is_piercing(self) -> bool:
        return self._data.bullet.piercing

    def _halt(self) -> None:
        movement = self.get_comp(CompType.MOVEMENT)
        if movement is not None:
            movement.set_dir(Dir.STOP)

    def after_attack(self) -> None:
        """Stop a non-piercing bullet and make it pass through everything."""
        if self.is_piercing():
            return
        self._halt()
        if self.has_comp(CompType.POSITION):
            self.get_comp(CompType.POSITION).ignore_collision = True

    def _status_function(self) -> None:
        if self.status == EntityStatus.DESTROYED:
            self._halt()
            self.kill()


def _require_bullet(entity: Any) -> Bullet:
    if not isinstance(entity, Bullet):
        raise TypeError("only bullets can use this attack")
    return entity


def bullet_attack_zombie(entity: Any) -> None:
    """Damage the zombies in the bullet's row that it touches."""
    bullet = _require_bullet(entity)
    striker = bullet.get_comp(CompType.ATTACK)
    hitbox = bullet.get_comp(CompType.POSITION)
    if striker is None or hitbox is None:
        raise ValueError("a bullet needs attack and position components to hit")
    if bullet.scene is None:
        raise RuntimeError("bullet is not in a scene")
    row = bullet.scene.zombies_by_path(get_path(hitbox.pos))
    if not row:
        return
    for zombie in striker.get_enemy_in_range(row):
        health = zombie.get_comp(CompType.HP)
        if health is None:
            continue
        health.down_hp(striker.damage)
        if not bullet.is_piercing():
            bullet.update_status(EntityStatus.DESTROYED)
            break


def bullet_attack_plant(entity: Any) -> None:
    """Check that a bullet is attacking; bullets leave plants unharmed."""
    _require_bullet(entity)