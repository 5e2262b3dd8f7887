"""Attack range, damage and cooldown."""

from __future__ import annotations

import dataclasses
from collections.abc import Callable, Iterable
from typing import Any

from lawnwar.component import CompType, Component
from lawnwar.frame import FrameManager
from lawnwar.geometry import AttackRange, RectangleShape
from lawnwar.tools import Vector2

AttackFunction = Callable[[Any], None]


class AttackComp(Component):
    """Fires an attack function whenever the cooldown allows."""

    comp_type = CompType.ATTACK

    def __init__(self, damage: float, cd: int, attack_range: AttackRange, pos: Vector2) -> None:
        self._damage = damage
        self._cd = cd
        self._range = dataclasses.replace(attack_range)
        if isinstance(self._range, RectangleShape):
            self._range.position = pos
        self._ban_attack = False
        self._attack_frame = 0
        self._attack: AttackFunction | None = None

    @property
    def attack_range(self) -> AttackRange:
        return self._range

    @property
    def damage(self) -> float:
        return self._damage

    def set_attack_func(self, func: AttackFunction | None) -> None:
        self._attack = func

    def set_ban_attack(self, value: bool) -> None:
        self._ban_attack = value

    def update(self, entity: Any) -> None:
        scene = getattr(entity, "scene", None)
        if scene is not None and isinstance(self._range, RectangleShape):
            scene.draw(self._range)
        if entity.has_comp(CompType.MOVEMENT):
            self._update_attack_range(entity.get_comp(CompType.MOVEMENT).move_value)
        if not self._valid_attack():
            return
        if self._attack is not None:
            self._attack(entity)

    def _valid_attack(self) -> bool:
        if self._ban_attack:
            return False
        now = FrameManager.instance().frame
        if now - self._attack_frame >= self._cd:
            self._attack_frame = now
            return True
        return False

    def _in_attack_range(self, entity: Any) -> bool:
        if not entity.has_comp(CompType.POSITION):
            return False
        hitbox = entity.get_comp(CompType.POSITION).hitbox
        return self._range.global_bounds().intersection(hitbox.global_bounds()) is not None

    def get_enemy_in_range(self, enemies: Iterable[Any]) -> list[Any]:
        """Return the enemies whose hitbox overlaps the attack range."""
        return [enemy for enemy in enemies if self._in_attack_range(enemy)]

    def _update_attack_range(self, move: Vector2) -> None:
        if isinstance(self._range, RectangleShape):
            self._range.move(move)