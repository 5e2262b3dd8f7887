"""The global frame counter."""

from __future__ import annotations


class FrameManager:
    """Counts rendered frames."""

    _shared: FrameManager | None = None

    def __init__(self) -> None:
        self._frame = 0

    @property
    def frame(self) -> int:
        return self._frame

    def update(self) -> None:
        """Advance to the next frame."""
        self._frame += 1

    @classmethod
    def instance(cls) -> FrameManager:
        """Return the process-wide frame counter."""
        if cls._shared is None:
            cls._shared = cls()
        return cls._shared