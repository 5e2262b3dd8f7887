import pytest

from lawnwar.component import CompType, EntityStatus, EntityType
from lawnwar.direction import Dir, Direction
from lawnwar.entity import Entity
from lawnwar.hp import HPComp
from lawnwar.position import PositionComp
from lawnwar.scene import GameScene
from lawnwar.tools import GRASS_COUNT, Vector2, axis2pos, get_path
from lawnwar.zombie import Zombie, ZombieData, zombie_attack_plant


def _loader(path):
    return path.name


@pytest.fixture
def data(tmp_path):
    folder = tmp_path / "anim"
    folder.mkdir()
    for name in ("normal-0.png", "attack-0.png", "died-0.png"):
        (folder / name).write_bytes(b"")
    return ZombieData(
        hp=100,
        size=Vector2(40, 80),
        direction=Direction(Dir.LEFT),
        speed=1,
        animation=folder,
        frame2animation=2,
        cd=10,
        damage=25,
    )


def _plant_at(axis, hp):
    plant = Entity(EntityType.PLANT)
    plant.add_comp(PositionComp(axis2pos(axis), Vector2(70, 80)))
    plant.add_comp(HPComp(hp))
    return plant


def _walk_to(zombie, target):
    offset = target - zombie.get_comp(CompType.POSITION).pos
    zombie.get_comp(CompType.POSITION).move(offset)
    zombie.get_comp(CompType.ATTACK).attack_range.move(offset)


def test_zombie_enters_at_end_of_row(data):
    zombie = Zombie(data, 2, _loader)
    pos = zombie.get_comp(CompType.POSITION).pos
    assert zombie.entity_type is EntityType.ZOMBIE
    assert pos == axis2pos(Vector2(GRASS_COUNT, 2))
    assert get_path(pos) == 2
    assert zombie.get_comp(CompType.HP).hp == data.hp
    assert zombie.get_comp(CompType.MOVEMENT).move_value == Vector2(-1, 0)
    assert zombie.get_comp(CompType.ATTACK).attack_range.position == pos


def test_zombie_bites_plant_on_its_tile(data):
    scene = GameScene()
    plant = _plant_at(Vector2(3, 0), 50)
    scene.add_plant(plant)
    zombie = Zombie(data, 0, _loader)
    scene.add_zombie(zombie)
    _walk_to(zombie, axis2pos(Vector2(3, 0)))
    zombie_attack_plant(zombie)
    assert plant.get_comp(CompType.HP).hp == 50 - data.damage
    assert zombie.status is EntityStatus.ATTACK
    assert zombie.get_comp(CompType.MOVEMENT).move_value == Vector2(0, 0)
    assert zombie.get_comp(CompType.ANIMATION).status == "attack"


def test_zombie_without_plant_does_nothing(data):
    scene = GameScene()
    zombie = Zombie(data, 0, _loader)
    scene.add_zombie(zombie)
    zombie_attack_plant(zombie)
    assert zombie.status is EntityStatus.NORMAL


def test_zombie_ignores_dead_plant(data):
    scene = GameScene()
    plant = _plant_at(Vector2(3, 0), 0)
    scene.add_plant(plant)
    zombie = Zombie(data, 0, _loader)
    scene.add_zombie(zombie)
    _walk_to(zombie, axis2pos(Vector2(3, 0)))
    zombie_attack_plant(zombie)
    assert plant.get_comp(CompType.HP).hp == 0
    assert zombie.status is EntityStatus.NORMAL


def test_dead_zombie_stops_and_leaves_scene(data):
    scene = GameScene()
    zombie = Zombie(data, 1, _loader)
    scene.add_zombie(zombie)
    assert scene.zombies_by_path(1) == (zombie,)
    zombie.update_status(EntityStatus.DIED)
    assert zombie.get_comp(CompType.MOVEMENT).move_value == Vector2(0, 0)
    scene.update()
    assert scene.zombies_by_path(1) == ()


def test_attack_rejects_other_entities():
    with pytest.raises(TypeError):
        zombie_attack_plant(Entity(EntityType.PLANT))


def test_attack_outside_scene_raises(data):
    with pytest.raises(RuntimeError):
        zombie_attack_plant(Zombie(data, 0, _loader))