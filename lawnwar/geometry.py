"""Axis-aligned rectangles and the shapes used for hitboxes and attack ranges."""

from __future__ import annotations

from dataclasses import dataclass

from lawnwar.tools import Vector2


@dataclass(frozen=True)
class FloatRect:
    """An axis-aligned rectangle given by its left-top corner and size."""

    left: float
    top: float
    width: float
    height: float

    @property
    def position(self) -> Vector2:
        return Vector2(self.left, self.top)

    @property
    def size(self) -> Vector2:
        return Vector2(self.width, self.height)

    def _x_span(self) -> tuple[float, float]:
        return min(self.left, self.left + self.width), max(self.left, self.left + self.width)

    def _y_span(self) -> tuple[float, float]:
        return min(self.top, self.top + self.height), max(self.top, self.top + self.height)

    def intersection(self, other: FloatRect) -> FloatRect | None:
        """Return the overlapping area, or None when the rectangles do not overlap."""
        min_x1, max_x1 = self._x_span()
        min_y1, max_y1 = self._y_span()
        min_x2, max_x2 = other._x_span()
        min_y2, max_y2 = other._y_span()
        left = max(min_x1, min_x2)
        top = max(min_y1, min_y2)
        right = min(max_x1, max_x2)
        bottom = min(max_y1, max_y2)
        if left < right and top < bottom:
            return FloatRect(left, top, right - left, bottom - top)
        return None

    def contains(self, point: Vector2) -> bool:
        """Whether the point lies inside; the right and bottom edges are excluded."""
        min_x, max_x = self._x_span()
        min_y, max_y = self._y_span()
        return min_x <= point.x < max_x and min_y <= point.y < max_y


@dataclass
class RectangleShape:
    """A movable rectangle."""

    size: Vector2
    position: Vector2 = Vector2()

    def global_bounds(self) -> FloatRect:
        return FloatRect(self.position.x, self.position.y, self.size.x, self.size.y)

    def move(self, offset: Vector2) -> None:
        self.position = self.position + offset


@dataclass
class CircleShape:
    """A movable circle whose position is the corner of its bounding box."""

    radius: float
    position: Vector2 = Vector2()

    def global_bounds(self) -> FloatRect:
        diameter = 2 * self.radius
        return FloatRect(self.position.x, self.position.y, diameter, diameter)

    def move(self, offset: Vector2) -> None:
        self.position = self.position + offset


AttackRange = RectangleShape | CircleShape