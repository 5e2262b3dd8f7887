"""Hit points."""

from __future__ import annotations

from typing import Any

from lawnwar.component import CompType, Component, EntityStatus


class HPComp(Component):
    """Tracks an entity's remaining health."""

    comp_type = CompType.HP

    def __init__(self, hp: float) -> None:
        self._hp = float(hp)

    def down_hp(self, value: float) -> None:
        """Take ``value`` damage."""
        self._hp -= value

    @property
    def hp(self) -> float:
        return self._hp

    def is_died(self) -> bool:
        return self._hp <= 0

    def update(self, entity: Any) -> None:
        if self.is_died():
            entity.update_status(EntityStatus.DIED)