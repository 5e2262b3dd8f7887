"""Plants: stationary defenders that shoot at zombies in their row."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from lawnwar.animation import AnimationComp, TextureLoader
from lawnwar.attack_comp import AttackComp
from lawnwar.bullet import PlantSupport
from lawnwar.component import CompType, EntityStatus, EntityType
from lawnwar.direction import Dir
from lawnwar.entity import Entity
from lawnwar.geometry import AttackRange
from lawnwar.hp import HPComp
from lawnwar.position import PositionComp
from lawnwar.tools import Vector2, get_path

if TYPE_CHECKING:
    from lawnwar.bullet_factory import BulletFactory

logger = logging.getLogger(__name__)

PLANT_ATTACK_OFFSET = Vector2(10, 0)
BULLET_SPAWN_OFFSET = Vector2(61, 5)
BULLET_RANGE = 1000


@dataclass
class PlantData:
    """Everything a plant kind fixes about itself."""

    hp: float
    cd: int
    damage: float
    attack_range: AttackRange
    animation: str | os.PathLike[str]
    frame2animation: int
    size: Vector2
    bullet_type: str


class Plant(Entity):
    """A plant placed on a lawn tile."""

    def __init__(
        self,
        data: PlantData,
        pos: Vector2,
        bullet_factory: BulletFactory | None = None,
        loader: TextureLoader | None = None,
    ) -> None:
        super().__init__(EntityType.PLANT)
        self._bullet_type = data.bullet_type
        self._bullet_factory = bullet_factory
        start = Vector2(float(pos.x), float(pos.y))
        self.add_comp(PositionComp(start, data.size))
        self.add_comp(HPComp(data.hp))
        animation = AnimationComp(data.animation, loader)
        self.add_comp(animation)
        attack = AttackComp(data.damage, data.cd, data.attack_range, start + PLANT_ATTACK_OFFSET)
        attack.set_attack_func(plant_attack_zombie)
        self.add_comp(attack)
        animation.set_update_interval(data.frame2animation)

    @property
    def bullet_type(self) -> str:
        return self._bullet_type

    def _status_function(self) -> None:
        animation = self.get_comp(CompType.ANIMATION)
        if animation is not None:
            animation.update_animation_status(self.status.value)
        if self.status is EntityStatus.DIED:
            self.kill()


def plant_attack_zombie(entity: Any) -> None:
    """Fire a bullet when a zombie in the plant's row is within its range."""
    if not isinstance(entity, Plant):
        raise TypeError("only plants can use this attack")
    attack = entity.get_comp(CompType.ATTACK)
    position = entity.get_comp(CompType.POSITION)
    if attack is None or position is None:
        raise ValueError("attacking plant needs attack and position components")
    scene = entity.scene
    if scene is None:
        raise RuntimeError("attacking plant is not in a scene")

    enemies = scene.zombies_by_path(get_path(position.pos))
    if not enemies:
        return
    targets = attack.get_enemy_in_range(enemies)
    if not targets:
        entity.update_status(EntityStatus.NORMAL)
        return
    entity.update_status(EntityStatus.ATTACK)

    factory = entity._bullet_factory
    bullet = None
    if factory is not None:
        support = PlantSupport(
            attack.damage,
            position.pos + BULLET_SPAWN_OFFSET,
            Dir.RIGHT,
            BULLET_RANGE,
        )
        bullet = factory.create(entity.bullet_type, support)
    if bullet is None:
        logger.warning("plant_attack_zombie: create bullet error")
        return
    scene.add_bullet(bullet)