"""Frame-based sprite animation loaded from image files."""

from __future__ import annotations

import os
import re
from collections.abc import Callable
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from lawnwar.component import CompType, Component, EntityType
from lawnwar.frame import FrameManager
from lawnwar.tools import Vector2

TextureLoader = Callable[[Path], Any]

ANIMATION_OFFSET = {
    EntityType.PLANT: Vector2(0, 0),
    EntityType.ZOMBIE: Vector2(-10, -10),
    EntityType.BULLET: Vector2(0, 0),
}

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def _load_image(path: Path) -> Any:
    import pygame

    return pygame.image.load(str(path))


def _texture_size(texture: Any) -> Vector2:
    width, height = texture.get_size()
    return Vector2(width, height)


def _frame_index(text: str) -> int:
    match = _LEADING_INT.match(text)
    if match is None:
        raise ValueError(f"invalid frame index: {text!r}")
    return int(match.group(1))


def read_frames(
    path: str | os.PathLike[str],
    result: dict[str, list[Any]],
    loader: TextureLoader | None = None,
) -> str:
    """Load animation frames from ``path`` into ``result``; return the initial status.

    A single file becomes a one-frame animation named after its stem. In a
    directory, files named ``<status>-<index>`` become frame ``index`` of
    ``status``. A missing path yields an empty status.
    """
    load = loader or _load_image
    frame_path = Path(path)
    if not frame_path.exists():
        return ""
    if not frame_path.is_dir():
        if frame_path.is_file():
            name = frame_path.stem
            result.setdefault(name, []).append(load(frame_path))
            return name
        return ""
    for entry in frame_path.iterdir():
        if not entry.is_file():
            continue
        status, sep, index_text = entry.stem.partition("-")
        if not sep:
            continue
        index = _frame_index(index_text)
        frames = result.setdefault(status, [])
        if len(frames) <= index:
            frames.extend([None] * (index + 1 - len(frames)))
        frames[index] = load(entry)
    return "normal"


@dataclass
class Sprite:
    """A texture placed and scaled on screen."""

    texture: Any
    position: Vector2 = Vector2()
    scale: Vector2 = field(default_factory=lambda: Vector2(1, 1))

    @property
    def texture_size(self) -> Vector2:
        return _texture_size(self.texture)


class AnimationComp(Component):
    """Cycles through the frames of the current status and draws them."""

    comp_type = CompType.ANIMATION

    def __init__(self, resource_path: str | os.PathLike[str], loader: TextureLoader | None = None) -> None:
        self._frames: dict[str, list[Any]] = {}
        self._status = read_frames(resource_path, self._frames, loader)
        frames = self._frames.get(self._status)
        if not frames or frames[0] is None:
            raise FileNotFoundError(f"no animation frames found at {resource_path}")
        self._idx = 0
        self._last_frame = 0
        self._interval = 1
        self._sprite = Sprite(frames[0])

    @property
    def status(self) -> str:
        return self._status

    @property
    def sprite(self) -> Sprite:
        return self._sprite

    @property
    def frames(self) -> dict[str, list[Any]]:
        return self._frames

    def update(self, entity: Any) -> None:
        self._update_animation()
        position = entity.get_comp(CompType.POSITION) if entity.has_comp(CompType.POSITION) else None
        if position is not None:
            pos = position.pos
            offset = ANIMATION_OFFSET.get(getattr(entity, "entity_type", None))
            if offset is not None:
                pos = pos + offset
            self._sprite.position = pos
        scene = getattr(entity, "scene", None)
        if scene is not None:
            scene.draw(self._sprite)

    def _update_animation(self) -> None:
        now = FrameManager.instance().frame
        if now - self._last_frame < self._interval:
            return
        self._last_frame = now
        frames = self._frames[self._status]
        if self._idx >= len(frames):
            self._idx = 0
        self._sprite.texture = frames[self._idx]
        self._idx += 1

    def update_animation_status(self, status: str) -> None:
        """Switch to another animation; unknown statuses are ignored."""
        if status not in self._frames:
            return
        self._status = status
        self._idx = 0
        self._update_animation()

    def set_size(self, size: Vector2) -> None:
        """Scale the sprite so that it covers ``size``."""
        self._sprite.scale = size.component_div(self._sprite.texture_size)

    def set_update_interval(self, interval: int) -> None:
        """Show each frame for ``interval`` rendered frames."""
        self._interval = interval