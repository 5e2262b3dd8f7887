"""Entities: game objects assembled from components."""

from __future__ import annotations

import enum
import os
from typing import TYPE_CHECKING, Any

from lawnwar.animation import AnimationComp, TextureLoader
from lawnwar.component import CompType, Component
from lawnwar.position import PositionComp
from lawnwar.tools import Vector2

if TYPE_CHECKING:
    from lawnwar.scene import GameScene


class _NamedEnum(enum.Enum):
    """Enum whose members compare equal to any enum member of the same name."""

    def __eq__(self, other: object) -> bool:
        if isinstance(other, enum.Enum):
            return self.name == other.name
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self.name)

    @classmethod
    def coerce(cls, value: enum.Enum) -> Any:
        """Return this enum's member named like ``value``."""
        if isinstance(value, cls):
            return value
        return cls[value.name]


class EntityType(_NamedEnum):
    """The kind of game object."""

    NONE = 0
    PLANT = 1
    ZOMBIE = 2
    BULLET = 3
    TOOL = 4


class EntityStatus(_NamedEnum):
    """The state an entity is in."""

    NORMAL = 0
    ATTACK = 1
    DIED = 2
    DESTROYING = 3
    DESTROYED = 4
    CLICKED = 5


class Entity:
    """A game object whose behaviour comes from its components."""

    def __init__(self, entity_type: enum.Enum = EntityType.NONE) -> None:
        self._entity_type = EntityType.coerce(entity_type)
        self._status = EntityStatus.NORMAL
        self._components: dict[CompType, Component] = {}
        self.scene: GameScene | None = None
        self.clicked_at: Vector2 | None = None

    @property
    def entity_type(self) -> EntityType:
        return self._entity_type

    @property
    def status(self) -> EntityStatus:
        return self._status

    def add_comp(self, comp: Component) -> None:
        """Attach ``comp``, replacing any component of the same kind."""
        self._components[comp.comp_type] = comp

    def get_comp(self, comp_type: CompType) -> Any:
        """Return the component of the given kind, or None."""
        return self._components.get(comp_type)

    def has_comp(self, comp_type: CompType) -> bool:
        return comp_type in self._components

    def update_status(self, status: enum.Enum) -> None:
        """Enter ``status`` and let the entity react to it."""
        self._status = EntityStatus.coerce(status)
        self._status_function()

    def kill(self) -> None:
        """Ask the scene to remove this entity at the start of its next update."""
        if self.scene is None:
            raise RuntimeError("entity is not in a scene")
        self.scene.add_handler(lambda scene: scene.del_entity(self))

    def update(self) -> None:
        """Update every component, in component-kind order."""
        for comp_type in sorted(self._components):
            comp = self._components.get(comp_type)
            if comp is not None:
                comp.update(self)

    def click(self, pos: Vector2) -> None:
        """Remember where the entity was last clicked; subclasses add behaviour."""
        self.clicked_at = pos

    def _status_function(self) -> None:
        """Hook run after every status change; plain entities do nothing."""


class Background(Entity):
    """A static image stretched over an area of the screen."""

    def __init__(
        self,
        resource_path: str | os.PathLike[str],
        pos: Vector2,
        size: Vector2,
        loader: TextureLoader | None = None,
    ) -> None:
        super().__init__()
        self.add_comp(PositionComp(pos, size))
        animation = AnimationComp(resource_path, loader)
        self.add_comp(animation)
        animation.set_size(size)


def get_entity_position(entity: Entity) -> Vector2:
    """Return the entity's position; raise ValueError if it has none."""
    position = entity.get_comp(CompType.POSITION)
    if position is None:
        raise ValueError("entity has no position")
    return position.pos


def entity_overlay(entity1: Entity, entity2: Entity) -> bool:
    """Whether the hitboxes of two positioned entities overlap."""
    pos1 = entity1.get_comp(CompType.POSITION)
    pos2 = entity2.get_comp(CompType.POSITION)
    if pos1 is None or pos2 is None:
        return False
    return pos1.intersection(pos2)


def is_plant(entity: Entity) -> bool:
    return entity.entity_type == EntityType.PLANT


def is_zombie(entity: Entity) -> bool:
    return entity.entity_type == EntityType.ZOMBIE


def is_bullet(entity: Entity) -> bool:
    return entity.entity_type == EntityType.BULLET