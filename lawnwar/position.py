"""Position and hitbox of an entity."""

from __future__ import annotations

from typing import Any

from lawnwar.component import CompType, Component
from lawnwar.geometry import RectangleShape
from lawnwar.tools import Vector2, pos2axis


class PositionComp(Component):
    """Holds an entity's hitbox, which doubles as its position and size."""

    comp_type = CompType.POSITION

    def __init__(self, pos: Vector2, size: Vector2, ignore_collision: bool = False) -> None:
        self.ignore_collision = ignore_collision
        self._hitbox = RectangleShape(size, pos)

    @property
    def pos(self) -> Vector2:
        return self._hitbox.position

    @property
    def size(self) -> Vector2:
        return self._hitbox.size

    @property
    def axis_pos(self) -> Vector2:
        """The lawn tile the entity's corner lies on."""
        return pos2axis(self.pos)

    @property
    def hitbox(self) -> RectangleShape:
        return self._hitbox

    def move(self, offset: Vector2) -> None:
        self._hitbox.move(offset)

    def set_position(self, pos: Vector2) -> None:
        self._hitbox.position = pos

    def intersection(self, other: PositionComp) -> bool:
        """Whether the two hitboxes overlap; never when either ignores collision."""
        if self.ignore_collision or other.ignore_collision:
            return False
        return self._hitbox.global_bounds().intersection(other._hitbox.global_bounds()) is not None

    def clicked(self, point: Vector2) -> bool:
        return self._hitbox.global_bounds().contains(point)

    def update(self, entity: Any) -> None:
        if not entity.has_comp(CompType.MOVEMENT):
            return
        self.move(entity.get_comp(CompType.MOVEMENT).move_value)
        scene = getattr(entity, "scene", None)
        if scene is not None:
            scene.draw(self._hitbox)