"""The lawn: plants in a grid, zombies by row, bullets, tools and the hand."""

from __future__ import annotations

import os
import threading
from collections.abc import Callable
from typing import Any

from lawnwar.animation import TextureLoader
from lawnwar.component import CompType
from lawnwar.entity import Background, Entity, get_entity_position, is_bullet, is_plant, is_zombie
from lawnwar.tools import GRASS_COUNT, GRASS_PATH, WINDOW_LENGTH, WINDOW_WIDE, Vector2, get_path, pos2axis

SceneHandler = Callable[["GameScene"], None]


def _in_lawn(axis: Vector2) -> bool:
    return 0 <= axis.y < GRASS_PATH and 0 <= axis.x < GRASS_COUNT


class GameScene:
    """Holds every entity of a game and updates them once per frame."""

    def __init__(self, size: Vector2 = Vector2(WINDOW_LENGTH, WINDOW_WIDE)) -> None:
        self._size = size
        self._open = True
        self._background: Background | None = None
        self._thread_id = threading.get_ident()
        self._bullets: dict[Entity, None] = {}
        self._plants: list[list[Entity | None]] = [[None] * GRASS_COUNT for _ in range(GRASS_PATH)]
        self._zombies: list[dict[Entity, None]] = [{} for _ in range(GRASS_PATH)]
        self._tools: dict[Entity, None] = {}
        self._handlers: list[SceneHandler] = []
        self._hand: Entity | None = None
        self._drawables: list[Any] = []

    @property
    def size(self) -> Vector2:
        return self._size

    @property
    def background(self) -> Background | None:
        return self._background

    @property
    def hand(self) -> Entity | None:
        """The tool the player is holding, if any."""
        return self._hand

    @property
    def plants(self) -> tuple[tuple[Entity | None, ...], ...]:
        return tuple(tuple(row) for row in self._plants)

    @property
    def zombies(self) -> tuple[tuple[Entity, ...], ...]:
        return tuple(tuple(row) for row in self._zombies)

    @property
    def bullets(self) -> tuple[Entity, ...]:
        return tuple(self._bullets)

    @property
    def tools(self) -> tuple[Entity, ...]:
        return tuple(self._tools)

    @property
    def drawables(self) -> tuple[Any, ...]:
        """Everything drawn since the start of the last update."""
        return tuple(self._drawables)

    @property
    def is_open(self) -> bool:
        return self._open

    def close(self) -> None:
        self._open = False

    def update(self) -> None:
        """Run queued handlers, then update every entity; only on the owning thread."""
        if threading.get_ident() != self._thread_id:
            return
        self._drawables.clear()
        handlers, self._handlers = self._handlers, []
        for handler in handlers:
            handler(self)
        if self._background is not None:
            self._background.update()
        for bullet in list(self._bullets):
            bullet.update()
        for row in self._plants:
            for plant in list(row):
                if plant is not None:
                    plant.update()
        for row in self._zombies:
            for zombie in list(row):
                zombie.update()

    def set_background(self, path: str | os.PathLike[str], loader: TextureLoader | None = None) -> None:
        """Cover the whole scene with the image at ``path``."""
        background = Background(path, Vector2(0, 0), self._size, loader)
        background.scene = self
        self._background = background

    def add_plant(self, plant: Entity) -> None:
        """Put ``plant`` on the tile under its position."""
        plant.scene = self
        axis = pos2axis(get_entity_position(plant))
        if not _in_lawn(axis):
            raise ValueError(f"plant position {axis} is outside the lawn")
        self._plants[int(axis.y)][int(axis.x)] = plant

    def add_zombie(self, zombie: Entity) -> None:
        """Put ``zombie`` in the row under its position; zombies off the lawn are ignored."""
        zombie.scene = self
        path = get_path(get_entity_position(zombie))
        if not 0 <= path < GRASS_PATH:
            return
        self._zombies[path][zombie] = None

    def add_bullet(self, bullet: Entity) -> None:
        bullet.scene = self
        self._bullets[bullet] = None

    def add_tool(self, tool: Entity) -> None:
        tool.scene = self
        self._tools[tool] = None

    def add_handler(self, handler: SceneHandler) -> None:
        """Run ``handler`` at the start of the next update."""
        self._handlers.append(handler)

    def del_plant(self, axis: Vector2) -> None:
        """Remove whatever plant stands on the tile ``axis``."""
        if _in_lawn(axis):
            self._plants[int(axis.y)][int(axis.x)] = None

    def del_bullet(self, bullet: Entity) -> None:
        self._bullets.pop(bullet, None)

    def del_zombie(self, zombie: Entity) -> None:
        position = zombie.get_comp(CompType.POSITION)
        if position is None:
            return
        path = get_path(position.pos)
        if 0 <= path < GRASS_PATH:
            self._zombies[path].pop(zombie, None)

    def _remove_plant(self, plant: Entity) -> None:
        for row in self._plants:
            for column, occupant in enumerate(row):
                if occupant is plant:
                    row[column] = None

    def del_entity(self, entity: Entity) -> None:
        """Remove a plant, zombie or bullet from the scene."""
        if is_plant(entity):
            self._remove_plant(entity)
        elif is_zombie(entity):
            self.del_zombie(entity)
        elif is_bullet(entity):
            self.del_bullet(entity)

    def plant_by_axis(self, axis: Vector2) -> Entity | None:
        """Return the plant on tile ``axis``, or None when empty or off the lawn."""
        if not _in_lawn(axis):
            return None
        return self._plants[int(axis.y)][int(axis.x)]

    def zombies_by_path(self, path: int) -> tuple[Entity, ...]:
        """Return the zombies in row ``path``; rows off the lawn are empty."""
        if not 0 <= path < GRASS_PATH:
            return ()
        return tuple(self._zombies[path])

    def click(self, pos: Vector2) -> None:
        """Use the held tool at ``pos``, or pick up the tool under ``pos``."""
        if self._hand is not None:
            self._hand.click(pos)
            self._hand = None
            return
        for tool in self._tools:
            position = tool.get_comp(CompType.POSITION)
            if position is not None and position.clicked(pos):
                self._hand = tool
                break

    def draw(self, drawable: Any) -> None:
        """Queue ``drawable`` for rendering this frame."""
        self._drawables.append(drawable)