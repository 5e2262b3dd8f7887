"""Mapping from events to the handlers that react to them."""

from __future__ import annotations

import logging
from collections.abc import Callable, Hashable
from typing import Any

logger = logging.getLogger(__name__)

EventHandlerFunc = Callable[[Any], None]


class EventDispatcher:
    """Calls the handler registered for an event, if there is one."""

    def __init__(self) -> None:
        self._handlers: dict[Hashable, EventHandlerFunc] = {}

    def set_event(self, event: Hashable, handler: EventHandlerFunc) -> None:
        """Register ``handler`` for ``event``, replacing any earlier one."""
        self._handlers[event] = handler

    def del_event(self, event: Hashable) -> None:
        """Forget the handler for ``event``; unknown events are ignored."""
        self._handlers.pop(event, None)

    def has_event(self, event: Hashable) -> bool:
        return event in self._handlers

    def call(self, event: Hashable) -> bool:
        """Pass ``event`` to its handler; return whether one was registered."""
        handler = self._handlers.get(event)
        if handler is None:
            logger.error("no handler for event %r", event)
            return False
        handler(event)
        return True