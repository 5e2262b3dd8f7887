"""Unit movement directions."""

from __future__ import annotations

from enum import Enum

from lawnwar.tools import Vector2


class Dir(Enum):
    """The fixed directions an entity can move in."""

    STOP = 0
    UP = 1
    DOWN = 2
    LEFT = 3
    RIGHT = 4


_OFFSETS = {
    Dir.STOP: Vector2(0, 0),
    Dir.UP: Vector2(0, -1),
    Dir.DOWN: Vector2(0, 1),
    Dir.LEFT: Vector2(-1, 0),
    Dir.RIGHT: Vector2(1, 0),
}


class Direction:
    """A movement direction held as a per-step unit offset."""

    __slots__ = ("_offset",)

    def __init__(self, direction: Dir | Vector2) -> None:
        self._offset = Vector2()
        self.set_dir(direction)

    def set_dir(self, direction: Dir | Vector2) -> None:
        """Point along a fixed direction or along an arbitrary non-zero vector."""
        if isinstance(direction, Dir):
            self._offset = _OFFSETS[direction]
        elif isinstance(direction, Vector2):
            self._offset = direction.normalized()
        else:
            raise TypeError(f"unsupported direction: {direction!r}")

    @property
    def offset(self) -> Vector2:
        return self._offset

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Direction):
            return NotImplemented
        return self._offset == other._offset

    def __repr__(self) -> str:
        return f"Direction({self._offset!r})"