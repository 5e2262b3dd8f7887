"""Plant kinds read from a JSON file, and the factory that builds them."""

from __future__ import annotations

import json
import os
from pathlib import Path
from typing import TYPE_CHECKING, Any

from lawnwar.animation import TextureLoader
from lawnwar.geometry import AttackRange, CircleShape, RectangleShape
from lawnwar.plant import Plant, PlantData
from lawnwar.tools import Vector2

if TYPE_CHECKING:
    from lawnwar.bullet_factory import BulletFactory


def _float(raw: Any) -> float:
    return float(raw) if raw is not None else 0.0


def _pair(raw: Any) -> Vector2:
    items = raw if isinstance(raw, list) else []
    first = _float(items[0]) if len(items) > 0 else 0.0
    second = _float(items[1]) if len(items) > 1 else 0.0
    return Vector2(first, second)


def _attack_range(spec: Any) -> AttackRange:
    spec = spec if isinstance(spec, dict) else {}
    kind = str(spec.get("type") or "")
    data = spec.get("data")
    if kind == "Rectangle":
        return RectangleShape(_pair(data))
    if kind == "Circle":
        return CircleShape(_float(data))
    return CircleShape(0.0)


def _plant_data(name: str, value: Any) -> PlantData:
    if not isinstance(value, dict):
        raise ValueError(f"plant {name!r} must be a JSON object")
    return PlantData(
        hp=_float(value.get("HP")),
        cd=int(value.get("CD") or 0),
        damage=_float(value.get("damage")),
        attack_range=_attack_range(value.get("range")),
        animation=str(value.get("animation") or ""),
        frame2animation=int(value.get("frame2animation") or 0),
        size=_pair(value.get("size")),
        bullet_type=str(value.get("bullet_type") or ""),
    )


def load_plant_data(path: str | os.PathLike[str]) -> dict[str, PlantData]:
    """Read plant kinds from ``path``; a missing file gives no kinds."""
    file = Path(path)
    if not file.is_file():
        return {}
    try:
        with file.open(encoding="utf-8") as handle:
            root = json.load(handle)
    except json.JSONDecodeError as exc:
        raise ValueError(f"cannot parse {file}: {exc}") from exc
    if not isinstance(root, dict):
        raise ValueError(f"{file} must hold a JSON object")
    return {name: _plant_data(name, value) for name, value in root.items()}


class PlantFactory:
    """Builds plants of the kinds it has read."""

    def __init__(
        self,
        path: str | os.PathLike[str] | None = None,
        bullet_factory: BulletFactory | None = None,
        loader: TextureLoader | None = None,
    ) -> None:
        self._data = load_plant_data(path) if path is not None else {}
        self._bullet_factory = bullet_factory
        self._loader = loader

    @property
    def names(self) -> list[str]:
        return list(self._data)

    def create(self, name: str, pos: Vector2) -> Plant | None:
        """Build a plant of kind ``name`` at ``pos``, or return None for an unknown kind."""
        data = self._data.get(name)
        if data is None:
            return None
        return Plant(data, pos, self._bullet_factory, self._loader)