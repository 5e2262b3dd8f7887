"""Translation of keyboard and mouse input into scene actions."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import Any

from lawnwar.component import CompType
from lawnwar.scene import GameScene
from lawnwar.tools import Vector2

logger = logging.getLogger(__name__)

ESCAPE_KEY = "escape"
# A press and release further apart than this (squared) is a drag, not a click.
CLICK_TOLERANCE_SQUARED = 10


def _vec(pos: Iterable[float]) -> Vector2:
    x, y = pos
    return Vector2(float(x), float(y))


class InputHandler:
    """Reacts to input events on behalf of a scene."""

    def __init__(self, scene: GameScene) -> None:
        self._scene = scene
        self._pressed_button: Any = None
        self._pressed_pos = Vector2(-1, -1)

    @property
    def scene(self) -> GameScene:
        return self._scene

    def on_key_pressed(self, key: str) -> None:
        """Close the scene on Escape; other keys are ignored."""
        if key.lower() == ESCAPE_KEY:
            self._scene.close()

    def on_closed(self) -> None:
        self._scene.close()

    def on_mouse_button_pressed(self, button: Any, pos: Iterable[float]) -> None:
        """Remember where and with which button a click started."""
        point = _vec(pos)
        logger.debug("mouse pressed at %s %s", point.x, point.y)
        self._pressed_button = button
        self._pressed_pos = point

    def on_mouse_button_released(self, button: Any, pos: Iterable[float]) -> None:
        """Click the scene when the release matches the press closely enough."""
        if button != self._pressed_button:
            return
        point = _vec(pos)
        if (point - self._pressed_pos).length_squared() > CLICK_TOLERANCE_SQUARED:
            return
        self._scene.click(point)

    def on_mouse_move(self, pos: Iterable[float]) -> None:
        """Make the held tool follow the cursor."""
        hand = self._scene.hand
        if hand is None or not hand.has_comp(CompType.POSITION):
            return
        hand.get_comp(CompType.POSITION).set_position(_vec(pos))