"""Board layout constants, 2-D vectors and frame pacing."""

from __future__ import annotations

import logging
import math
import time
from collections.abc import Callable, Iterator
from dataclasses import dataclass

logger = logging.getLogger(__name__)

WINDOW_LENGTH = 1280
WINDOW_WIDE = 720

# Horizontal and vertical size of one lawn tile.
GRASS_LENGTH = 75
GRASS_WIDE = 90

GRASS_START_X = 234
GRASS_START_Y = 100

# Number of rows (paths) and of tiles in each row.
GRASS_PATH = 6
GRASS_COUNT = 9


@dataclass(frozen=True)
class Vector2:
    """An immutable 2-D vector; x grows to the right, y grows downwards."""

    x: float = 0
    y: float = 0

    def __add__(self, other: Vector2) -> Vector2:
        if not isinstance(other, Vector2):
            return NotImplemented
        return Vector2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vector2) -> Vector2:
        if not isinstance(other, Vector2):
            return NotImplemented
        return Vector2(self.x - other.x, self.y - other.y)

    def __mul__(self, scalar: float) -> Vector2:
        if isinstance(scalar, Vector2) or not isinstance(scalar, (int, float)):
            return NotImplemented
        return Vector2(self.x * scalar, self.y * scalar)

    __rmul__ = __mul__

    def __neg__(self) -> Vector2:
        return Vector2(-self.x, -self.y)

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y

    def length_squared(self) -> float:
        """Return the squared Euclidean length."""
        return self.x * self.x + self.y * self.y

    def normalized(self) -> Vector2:
        """Return the unit vector pointing the same way."""
        length_sq = self.length_squared()
        if length_sq == 0:
            raise ValueError("cannot normalise a zero vector")
        length = math.sqrt(length_sq)
        return Vector2(self.x / length, self.y / length)

    def component_div(self, other: Vector2) -> Vector2:
        """Divide component by component."""
        return Vector2(self.x / other.x, self.y / other.y)

    def component_mul(self, other: Vector2) -> Vector2:
        """Multiply component by component."""
        return Vector2(self.x * other.x, self.y * other.y)


_GRASS_ORIGIN = Vector2(GRASS_START_X, GRASS_START_Y)
_GRASS_TILE = Vector2(GRASS_LENGTH, GRASS_WIDE)


def get_path(pos: Vector2) -> int:
    """Return the lawn row a screen position lies in."""
    return int((pos.y - GRASS_START_Y) / GRASS_WIDE)


def get_length(pos: Vector2) -> int:
    """Return the horizontal distance from the lawn's left edge."""
    return int(pos.x - GRASS_START_X)


def pos2axis(pos: Vector2) -> Vector2:
    """Convert a screen position to integer tile coordinates (column, row)."""
    tile = (pos - _GRASS_ORIGIN).component_div(_GRASS_TILE)
    return Vector2(int(tile.x), int(tile.y))


def axis2pos(axis: Vector2) -> Vector2:
    """Convert tile coordinates to the screen position of the tile's corner."""
    pos = axis.component_mul(_GRASS_TILE) + _GRASS_ORIGIN
    return Vector2(float(pos.x), float(pos.y))


class FramePacer:
    """Sleeps just long enough to keep successive frames ``interval_ms`` apart."""

    def __init__(
        self,
        interval_ms: float = 0,
        clock: Callable[[], float] = time.monotonic,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        self.interval_ms = interval_ms
        self._clock = clock
        self._sleep = sleep
        self._last: float | None = None

    def wait(self) -> float:
        """Block until the next frame is due; return the milliseconds slept."""
        now = self._clock()
        if self.interval_ms <= 0:
            self._last = now
            return 0
        if self._last is None:
            self._last = now
            return 0
        elapsed_ms = int((now - self._last) * 1000 + 1e-9)
        if elapsed_ms >= self.interval_ms:
            self._last = now
            return 0
        remaining = self.interval_ms - elapsed_ms
        logger.debug("sleep: %sms", remaining)
        self._sleep(remaining / 1000)
        self._last = self._clock()
        return remaining