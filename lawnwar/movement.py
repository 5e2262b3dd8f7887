"""Movement along a direction with optional acceleration and a distance budget."""

from __future__ import annotations

from typing import Any

from lawnwar.component import CompType, Component, EntityStatus
from lawnwar.direction import Dir, Direction
from lawnwar.tools import Vector2


class MovementComp(Component):
    """Moves an entity each frame and destroys it once its distance is used up."""

    comp_type = CompType.MOVEMENT

    def __init__(
        self,
        direction: Direction | Dir,
        speed: float,
        max_distance: int,
        acceleration: int = 0,
        max_speed: float = 0,
    ) -> None:
        self._dir = self._as_direction(direction)
        self._speed = float(speed)
        self._acceleration = int(acceleration)
        self._max_speed = float(max_speed)
        self._distance = int(max_distance)

    @staticmethod
    def _as_direction(direction: Direction | Dir | Vector2) -> Direction:
        if isinstance(direction, Direction):
            return Direction(direction.offset) if direction.offset != Vector2() else Direction(Dir.STOP)
        return Direction(direction)

    @property
    def speed(self) -> float:
        return self._speed

    @property
    def distance(self) -> int:
        return self._distance

    def update(self, entity: Any) -> None:
        if self._distance <= 0:
            entity.update_status(EntityStatus.DESTROYED)
        if self._acceleration > 0 and self._speed < self._max_speed:
            self._speed = min(self._speed + self._acceleration, self._max_speed)
        elif self._acceleration < 0 and self._speed > self._max_speed:
            self._speed = max(self._speed + self._acceleration, self._max_speed)
        self._distance = int(self._distance - self._speed)

    def set_dir(self, direction: Direction | Dir) -> None:
        self._dir = self._as_direction(direction)

    @property
    def move_value(self) -> Vector2:
        """The offset applied to the entity this frame."""
        return self._dir.offset * self._speed