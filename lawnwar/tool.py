"""Tools the player picks up and uses on the lawn."""

from __future__ import annotations

from lawnwar.component import EntityType
from lawnwar.entity import Entity
from lawnwar.tools import Vector2, pos2axis


class Tool(Entity):
    """An entity the player can hold in hand."""

    def __init__(self) -> None:
        super().__init__(EntityType.TOOL)


class Spade(Tool):
    """Digs up the plant on the clicked tile."""

    def click(self, pos: Vector2) -> None:
        lawn = self.scene
        if lawn is None:
            raise RuntimeError("a spade can only dig inside a scene")
        lawn.del_plant(pos2axis(pos))