"""Zombies: walkers that eat the plant on the tile they reach."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Any

from lawnwar.animation import AnimationComp, TextureLoader
from lawnwar.attack_comp import AttackComp
from lawnwar.component import CompType, EntityStatus, EntityType
from lawnwar.direction import Dir, Direction
from lawnwar.entity import Entity
from lawnwar.hp import HPComp
from lawnwar.movement import MovementComp
from lawnwar.position import PositionComp
from lawnwar.tools import GRASS_COUNT, Vector2, axis2pos, pos2axis

ZOMBIE_MAX_DISTANCE = 999


@dataclass
class ZombieData:
    """Everything a zombie kind fixes about itself."""

    hp: float
    size: Vector2
    direction: Direction
    speed: float
    animation: str | os.PathLike[str]
    frame2animation: int
    cd: float
    damage: float


class Zombie(Entity):
    """A zombie that enters the lawn at the right end of a row."""

    def __init__(self, data: ZombieData, path: int, loader: TextureLoader | None = None) -> None:
        super().__init__(EntityType.ZOMBIE)
        self.add_comp(MovementComp(data.direction, data.speed, ZOMBIE_MAX_DISTANCE))
        position = PositionComp(axis2pos(Vector2(GRASS_COUNT, path)), data.size)
        self.add_comp(position)
        animation = AnimationComp(data.animation, loader)
        self.add_comp(animation)
        animation.set_update_interval(data.frame2animation)
        self.add_comp(HPComp(data.hp))
        attack = AttackComp(data.damage, int(data.cd), position.hitbox, position.pos)
        attack.set_attack_func(zombie_attack_plant)
        self.add_comp(attack)

    def _status_function(self) -> None:
        animation = self.get_comp(CompType.ANIMATION)
        if animation is not None:
            animation.update_animation_status(self.status.value)
        movement = self.get_comp(CompType.MOVEMENT)
        if self.status is EntityStatus.NORMAL:
            if movement is not None:
                movement.set_dir(Dir.RIGHT)
        elif self.status is EntityStatus.ATTACK:
            if movement is not None:
                movement.set_dir(Dir.STOP)
        elif self.status is EntityStatus.DIED:
            if movement is not None:
                movement.set_dir(Dir.STOP)
            self.kill()


def zombie_attack_plant(entity: Any) -> None:
    """Bite the living plant on the zombie's tile when it is within reach."""
    if not isinstance(entity, Zombie):
        raise TypeError("only zombies can use this attack")
    attack = entity.get_comp(CompType.ATTACK)
    position = entity.get_comp(CompType.POSITION)
    if attack is None or position is None:
        raise ValueError("attacking zombie needs attack and position components")
    scene = entity.scene
    if scene is None:
        raise RuntimeError("attacking zombie is not in a scene")

    plant = scene.plant_by_axis(pos2axis(position.pos))
    if plant is None:
        return
    targets = attack.get_enemy_in_range([plant])
    if not targets:
        return
    enemy = targets[0]
    if enemy.status is EntityStatus.DIED:
        return
    hp = enemy.get_comp(CompType.HP)
    if hp is None or hp.is_died():
        return
    entity.update_status(EntityStatus.ATTACK)
    hp.down_hp(attack.damage)