"""Component kinds, entity kinds and statuses, and the component base class."""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import Enum, IntEnum
from typing import Any, ClassVar


class CompType(IntEnum):
    """Component kinds; an entity updates its components in this order."""

    HP = 0
    MOVEMENT = 1
    POSITION = 2
    ANIMATION = 3
    ATTACK = 4


class EntityType(Enum):
    """What kind of object an entity is."""

    NONE = 0
    PLANT = 1
    ZOMBIE = 2
    BULLET = 3
    TOOL = 4


class EntityStatus(Enum):
    """Entity states; each value names the animation shown in that state."""

    NORMAL = "normal"
    ATTACK = "attack"
    DIED = "died"
    DESTROYING = "destroying"
    DESTROYED = "destroyed"
    CLICKED = "clicked"


class Component(ABC):
    """A piece of entity behaviour, updated once per frame."""

    comp_type: ClassVar[CompType]

    @abstractmethod
    def update(self, entity: Any) -> None:
        """Advance this component by one frame for ``entity``."""