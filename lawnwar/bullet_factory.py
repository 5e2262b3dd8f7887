"""Bullet kinds read from a JSON file, and the factory that builds them."""

from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Any

from lawnwar.animation import TextureLoader
from lawnwar.bullet import Bullet, BulletData, BulletSupport, PlantSupport
from lawnwar.tools import Vector2


def _as_vector(raw: Any) -> Vector2:
    """Turn a JSON pair into a vector; missing or null entries count as 0."""
    pair = list(raw or [])[:2]
    pair += [0] * (2 - len(pair))
    return Vector2(*(float(item or 0) for item in pair))


def _bullet_support(name: str, spec: Any) -> BulletSupport:
    if not isinstance(spec, dict):
        raise ValueError(f"bullet {name!r} must be a JSON object")
    return BulletSupport(
        size=_as_vector(spec.get("size")),
        piercing=bool(spec.get("piercing")),
        speed=int(spec.get("speed") or 0),
        animation=str(spec.get("animation") or ""),
    )


def load_bullet_data(path: str | os.PathLike[str]) -> dict[str, BulletSupport]:
    """Read bullet kinds from ``path``; a missing file gives no kinds."""
    source = Path(path)
    if not source.is_file():
        return {}
    try:
        kinds = json.loads(source.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise ValueError(f"cannot parse {source}: {exc}") from exc
    if not isinstance(kinds, dict):
        raise ValueError(f"{source} must hold a JSON object")
    return {name: _bullet_support(name, spec) for name, spec in kinds.items()}


class BulletFactory:
    """Builds bullets of the kinds it has read."""

    def __init__(
        self,
        path: str | os.PathLike[str] | None = None,
        loader: TextureLoader | None = None,
    ) -> None:
        self._kinds = {} if path is None else load_bullet_data(path)
        self._loader = loader

    @property
    def names(self) -> list[str]:
        return list(self._kinds)

    def create(self, name: str, support: PlantSupport) -> Bullet | None:
        """Build a bullet of kind ``name``, or return None for an unknown kind."""
        if name not in self._kinds:
            return None
        return Bullet(BulletData(self._kinds[name], support), self._loader)