"""Preview an animation's frames full screen."""

from __future__ import annotations

import argparse
import itertools
import sys
import time
from collections.abc import Iterable
from typing import Any

from lawnwar.animation import read_frames
from lawnwar.tools import Vector2


def fit_scale(texture_size: Iterable[float], window_size: Iterable[float]) -> float:
    """Return the largest uniform scale at which the texture fits the window."""
    texture_w, texture_h = texture_size
    window_w, window_h = window_size
    if texture_w <= 0 or texture_h <= 0:
        raise ValueError("texture size must be positive")
    return min(window_w / texture_w, window_h / texture_h)


def _show(pygame: Any, screen: Any, texture: Any) -> None:
    width, height = texture.get_size()
    scale = fit_scale(Vector2(width, height), Vector2(*screen.get_size()))
    image = pygame.transform.scale(texture, (max(1, int(width * scale)), max(1, int(height * scale))))
    screen.fill((0, 0, 0))
    screen.blit(image, (0, 0))
    pygame.display.flip()


def main(argv: list[str] | None = None) -> int:
    """Cycle through one animation until a key is pressed."""
    parser = argparse.ArgumentParser(prog="lawnwar-viewer", description="Preview animation frames.")
    parser.add_argument("path", help="an image file or a directory of <status>-<index> images")
    parser.add_argument("--status", default=None, help="animation to show")
    parser.add_argument("--width", type=int, default=1920)
    parser.add_argument("--height", type=int, default=1080)
    parser.add_argument("--delay", type=float, default=0.3, help="seconds per frame")
    args = parser.parse_args(argv)

    frames: dict[str, list[Any]] = {}
    initial = read_frames(args.path, frames)
    status = args.status or initial
    sequence = [frame for frame in frames.get(status, []) if frame is not None]
    if not sequence:
        print(f"no frames for {status!r} at {args.path}", file=sys.stderr)
        return 1

    import pygame

    pygame.init()
    try:
        screen = pygame.display.set_mode((args.width, args.height))
        for texture in itertools.cycle(sequence):
            if any(event.type in (pygame.QUIT, pygame.KEYDOWN) for event in pygame.event.get()):
                break
            _show(pygame, screen, texture)
            time.sleep(args.delay)
    finally:
        pygame.quit()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())