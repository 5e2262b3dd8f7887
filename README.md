# lawnwar

A small lane-defence game built on an entity–component design. Plants sit on
a 6 × 9 lawn grid and fire bullets along their row; zombies enter at the
right end of a row and bite the plant on the tile they reach. Each game
object is an `Entity` carrying components for position and hitbox
(`PositionComp`), movement (`MovementComp`), hit points (`HPComp`),
animation (`AnimationComp`) and attack (`AttackComp`), and a `GameScene`
updates them once per frame. Drawing and the window use pygame.

## Installing

```
pip install .
```

For the test suite:

```
pip install ".[test]"
pytest
```

## Running the demo scene

```
lawnwar
```

This opens a window with a background image, places one plant at (233, 130)
and one zombie in row 0, and runs at 60 frames per second. Press Escape or
close the window to quit. The files it reads are given by options, with
these defaults (relative to the current directory):

| option          | default                    |
|-----------------|----------------------------|
| `--background`  | `resource/Background.jpg`  |
| `--plants`      | `json/plant.json`          |
| `--zombies`     | `json/zombie.json`         |
| `--bullets`     | `json/bullet.json`         |
| `--plant`       | `PeaShooter` (kind to place) |
| `--zombie`      | `normal` (kind to spawn)   |
| `--frame`       | `60` (frames per second; 0 for unlimited) |

A JSON file that does not exist yields no kinds; if the requested plant or
zombie kind is unknown the command prints `create plant error` or
`create zombie error` and exits with status 1.

## Previewing an animation

```
lawnwar-viewer path/to/frames
```

Cycles through one animation, scaled to fit the window, until a key is
pressed or the window is closed. `path` is an image file or a directory of
frames. Options: `--status` (which animation to show; defaults to the one
`read_frames` reports), `--width` and `--height` (window size, default
1920 × 1080), `--delay` (seconds per frame, default 0.3).

## Data files

Plants, zombies and bullets are described by JSON files, one object per
kind, keyed by name. Missing fields count as zero or empty.

Bullets (`lawnwar.bullet_factory.load_bullet_data`, `BulletFactory`):

```json
{
  "Pea": {"size": [20, 20], "piercing": false, "speed": 5, "animation": "frames/pea"}
}
```

Plants (`lawnwar.plant_factory.load_plant_data`, `PlantFactory`):

```json
{
  "PeaShooter": {
    "HP": 300, "CD": 90, "damage": 20,
    "range": {"type": "Rectangle", "data": [800, 60]},
    "animation": "frames/peashooter", "frame2animation": 6,
    "size": [60, 70], "bullet_type": "Pea"
  }
}
```

The attack range is either a `"Rectangle"` with width and height or a
`"Circle"` with a radius. `CD` is the attack cooldown in frames and
`frame2animation` the number of frames each animation image is shown.

Zombies (`lawnwar.zombie_factory.load_zombie_data`, `ZombieFactory`):

```json
{
  "normal": {
    "HP": 200, "size": [60, 90], "dir": "left", "speed": 1,
    "animation": "frames/zombie", "frame2animation": 8,
    "cd": 60, "damage": 10
  }
}
```

`dir` is `"left"`, `"right"`, or anything else for standing still. A file
that cannot be parsed, or whose top level is not an object, raises
`ValueError`.

## Animation frames

An animation path is either a single image file, whose stem becomes the only
status, or a directory of images named `<status>-<index>`, for example
`normal-0.png`, `normal-1.png`, `attack-0.png`; a directory starts in the
`normal` status. Plants and zombies switch to the animation named after
their status (`normal`, `attack`, `died`, …) when it exists.
`lawnwar.animation.read_frames` loads such a path into a mapping from status
to frames; it and `AnimationComp` accept a `loader` callable in place of
pygame's image loading.

## Using the pieces

```python
from lawnwar.bullet_factory import BulletFactory
from lawnwar.plant_factory import PlantFactory
from lawnwar.zombie_factory import ZombieFactory
from lawnwar.game import Game
from lawnwar.tools import Vector2

bullets = BulletFactory("json/bullet.json")
plants = PlantFactory("json/plant.json", bullets)
zombies = ZombieFactory("json/zombie.json")

game = Game()
game.scene.add_plant(plants.create("PeaShooter", Vector2(240, 110)))
game.scene.add_zombie(zombies.create("normal", 0))
game.step()   # advance one frame without opening a window
```

- `GameScene` (`lawnwar.scene`) holds the grid of plants, the zombies of
  each row, the bullets in flight and the tools. `update()` first runs the
  handlers queued with `add_handler`, then updates the background, bullets,
  plants and zombies; what they draw is collected in `drawables`.
- `Game` (`lawnwar.game`) owns a scene; `step()` advances the global
  `FrameManager` counter and updates the scene, `run()` opens the window.
- `InputHandler` (`lawnwar.input`) turns key and mouse events into scene
  actions: Escape closes the scene, a press and release close together is a
  click, and the held tool follows the mouse.
- Tools (`lawnwar.tool`) are added with `GameScene.add_tool`. A click on a
  tool picks it up; the next click uses it. `Spade` removes the plant on the
  tile it is used on.
- `lawnwar.tools` has the lawn layout constants, the `Vector2` type,
  `get_path`, `pos2axis` and `axis2pos` for converting between pixel
  positions and lawn tiles, and `FramePacer` for holding frames a fixed
  number of milliseconds apart.
- `lawnwar.timers` has `TimerQueue`, which runs callbacks after a delay in
  seconds, and `FrameTimerQueue`, which counts in frames; both support
  repeating timers and cancel by id.
- `lawnwar.events.EventDispatcher` maps events to handler callables.

## What it does not do

The package ships no images and no JSON data files; the demo command needs
them to be supplied. There is no sun or currency, no seed selection, no
zombie waves or levels, and no winning or losing: the demo scene places one
plant and one zombie and runs until the window is closed. It adds no tools
to the scene, so picking up a spade only happens when a program calls
`add_tool` itself.