"""The game window, its main loop, and the demo command."""

from __future__ import annotations

import argparse
from typing import Any

from lawnwar.animation import Sprite
from lawnwar.bullet_factory import BulletFactory
from lawnwar.frame import FrameManager
from lawnwar.geometry import CircleShape, RectangleShape
from lawnwar.input import InputHandler
from lawnwar.plant_factory import PlantFactory
from lawnwar.scene import GameScene
from lawnwar.tools import WINDOW_LENGTH, WINDOW_WIDE, Vector2
from lawnwar.zombie_factory import ZombieFactory

_HITBOX_COLOUR = (255, 255, 255)
_RANGE_COLOUR = (255, 0, 0)


def _render(pygame: Any, screen: Any, drawable: Any) -> None:
    if isinstance(drawable, Sprite):
        texture = drawable.texture
        width, height = texture.get_size()
        target = (max(1, int(width * drawable.scale.x)), max(1, int(height * drawable.scale.y)))
        if target != (width, height):
            texture = pygame.transform.scale(texture, target)
        screen.blit(texture, (drawable.position.x, drawable.position.y))
    elif isinstance(drawable, RectangleShape):
        bounds = drawable.global_bounds()
        rect = pygame.Rect(int(bounds.left), int(bounds.top), int(bounds.width), int(bounds.height))
        pygame.draw.rect(screen, _HITBOX_COLOUR, rect, 1)
    elif isinstance(drawable, CircleShape):
        centre = (drawable.position.x + drawable.radius, drawable.position.y + drawable.radius)
        pygame.draw.circle(screen, _RANGE_COLOUR, centre, drawable.radius, 1)


class Game:
    """A scene together with its window and frame rate."""

    def __init__(self, size: Vector2 = Vector2(WINDOW_LENGTH, WINDOW_WIDE)) -> None:
        self._scene = GameScene(size)
        self._input = InputHandler(self._scene)
        self._frame_limit = 0

    @property
    def scene(self) -> GameScene:
        return self._scene

    @property
    def frame_limit(self) -> int:
        """Frames per second the loop is held to; 0 means unlimited."""
        return self._frame_limit

    def set_frame(self, frame: int) -> None:
        if frame < 0:
            raise ValueError("frame rate cannot be negative")
        self._frame_limit = frame

    def step(self) -> None:
        """Advance the frame counter and update the scene once."""
        FrameManager.instance().update()
        self._scene.update()

    def _dispatch(self, pygame: Any, event: Any) -> None:
        if event.type == pygame.QUIT:
            self._input.on_closed()
        elif event.type == pygame.KEYDOWN:
            self._input.on_key_pressed(pygame.key.name(event.key))
        elif event.type == pygame.MOUSEBUTTONDOWN:
            self._input.on_mouse_button_pressed(event.button, event.pos)
        elif event.type == pygame.MOUSEBUTTONUP:
            self._input.on_mouse_button_released(event.button, event.pos)
        elif event.type == pygame.MOUSEMOTION:
            self._input.on_mouse_move(event.pos)

    def run(self) -> None:
        """Open the window and run until the scene is closed."""
        import pygame

        pygame.init()
        try:
            size = self._scene.size
            screen = pygame.display.set_mode((int(size.x), int(size.y)))
            pygame.display.set_caption("game")
            pygame.key.set_repeat()
            clock = pygame.time.Clock()
            while self._scene.is_open:
                for event in pygame.event.get():
                    self._dispatch(pygame, event)
                if not self._scene.is_open:
                    break
                screen.fill((0, 0, 0))
                self.step()
                for drawable in self._scene.drawables:
                    _render(pygame, screen, drawable)
                pygame.display.flip()
                clock.tick(self._frame_limit)
        finally:
            pygame.quit()


def main(argv: list[str] | None = None) -> int:
    """Start a scene with one plant and one zombie."""
    parser = argparse.ArgumentParser(prog="lawnwar", description="Run a small lawn defence scene.")
    parser.add_argument("--background", default="resource/Background.jpg")
    parser.add_argument("--plants", default="json/plant.json")
    parser.add_argument("--zombies", default="json/zombie.json")
    parser.add_argument("--bullets", default="json/bullet.json")
    parser.add_argument("--plant", default="PeaShooter")
    parser.add_argument("--zombie", default="normal")
    parser.add_argument("--frame", type=int, default=60)
    args = parser.parse_args(argv)

    bullets = BulletFactory(args.bullets)
    plants = PlantFactory(args.plants, bullets)
    zombies = ZombieFactory(args.zombies)

    game = Game()
    plant = plants.create(args.plant, Vector2(233, 130))
    if plant is None:
        print("create plant error")
        return 1
    game.scene.add_plant(plant)

    zombie = zombies.create(args.zombie, 0)
    if zombie is None:
        print("create zombie error")
        return 1
    game.scene.add_zombie(zombie)

    game.scene.set_background(args.background)
    game.set_frame(args.frame)
    game.run()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())