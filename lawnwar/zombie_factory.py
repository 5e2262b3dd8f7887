"""Zombie kinds read from a JSON file, and the factory that builds them."""

from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Any

from lawnwar.animation import TextureLoader
from lawnwar.direction import Dir, Direction
from lawnwar.tools import Vector2
from lawnwar.zombie import Zombie, ZombieData

_DIRECTIONS = {"left": Dir.LEFT, "right": Dir.RIGHT}


def _float(raw: Any) -> float:
    return float(raw) if raw is not None else 0.0


def _pair(raw: Any) -> Vector2:
    items = raw if isinstance(raw, list) else []
    first = _float(items[0]) if len(items) > 0 else 0.0
    second = _float(items[1]) if len(items) > 1 else 0.0
    return Vector2(first, second)


def _zombie_data(name: str, value: Any) -> ZombieData:
    if not isinstance(value, dict):
        raise ValueError(f"zombie {name!r} must be a JSON object")
    direction = _DIRECTIONS.get(str(value.get("dir") or ""), Dir.STOP)
    return ZombieData(
        hp=_float(value.get("HP")),
        size=_pair(value.get("size")),
        direction=Direction(direction),
        speed=_float(value.get("speed")),
        animation=str(value.get("animation") or ""),
        frame2animation=int(value.get("frame2animation") or 0),
        cd=_float(value.get("cd")),
        damage=_float(value.get("damage")),
    )


def load_zombie_data(path: str | os.PathLike[str]) -> dict[str, ZombieData]:
    """Read zombie kinds from ``path``; a missing file gives no kinds."""
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
    return {name: _zombie_data(name, value) for name, value in root.items()}


class ZombieFactory:
    """Builds zombies of the kinds it has read."""

    def __init__(
        self,
        path: str | os.PathLike[str] | None = None,
        loader: TextureLoader | None = None,
    ) -> None:
        self._data = load_zombie_data(path) if path is not None else {}
        self._loader = loader

    @property
    def names(self) -> list[str]:
        return list(self._data)

    def create(self, name: str, path: int) -> Zombie | None:
        """Build a zombie of kind ``name`` in row ``path``, or None for an unknown kind."""
        data = self._data.get(name)
        if data is None:
            return None
        return Zombie(data, path, self._loader)