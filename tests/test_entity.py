import pytest

from lawnwar.animation import AnimationComp
from lawnwar.component import CompType, Component
from lawnwar.entity import (
    Background,
    Entity,
    EntityStatus,
    EntityType,
    entity_overlay,
    get_entity_position,
    is_bullet,
    is_plant,
    is_zombie,
)
from lawnwar.hp import HPComp
from lawnwar.position import PositionComp
from lawnwar.tools import Vector2


class FakeTexture:
    def __init__(self, width=10, height=20):
        self._size = (width, height)

    def get_size(self):
        return self._size


def _loader(path):
    return FakeTexture()


def _recorder(kind, log):
    class Recorder(Component):
        comp_type = kind

        def update(self, entity):
            log.append(kind)

    return Recorder()


class _StatusEntity(Entity):
    def __init__(self):
        super().__init__(EntityType.PLANT)
        self.seen = []

    def _status_function(self):
        self.seen.append(self.status)


class _FakeScene:
    def __init__(self):
        self.handlers = []
        self.deleted = []

    def add_handler(self, handler):
        self.handlers.append(handler)

    def del_entity(self, entity):
        self.deleted.append(entity)


def test_add_and_get_component():
    entity = Entity()
    hp = HPComp(10)
    entity.add_comp(hp)
    assert entity.has_comp(CompType.HP)
    assert entity.get_comp(CompType.HP) is hp
    assert not entity.has_comp(CompType.POSITION)
    assert entity.get_comp(CompType.POSITION) is None


def test_add_comp_replaces_same_kind():
    entity = Entity()
    first, second = HPComp(1), HPComp(2)
    entity.add_comp(first)
    entity.add_comp(second)
    assert entity.get_comp(CompType.HP) is second


def test_update_runs_components_in_kind_order():
    log = []
    entity = Entity()
    for kind in reversed(list(CompType)):
        entity.add_comp(_recorder(kind, log))
    entity.update()
    assert log == sorted(CompType)


def test_update_status_calls_hook():
    entity = _StatusEntity()
    entity.update_status(EntityStatus.ATTACK)
    assert entity.status is EntityStatus.ATTACK
    assert entity.seen == [EntityStatus.ATTACK]
    assert is_plant(entity)


def test_update_status_on_plain_entity():
    entity = Entity(EntityType.ZOMBIE)
    entity.update_status(EntityStatus.DIED)
    assert entity.status is EntityStatus.DIED


def test_default_status_and_type():
    entity = Entity()
    assert entity.status is EntityStatus.NORMAL
    assert entity.entity_type is EntityType.NONE


def test_kill_without_scene_raises():
    with pytest.raises(RuntimeError):
        Entity().kill()


def test_kill_queues_deletion():
    scene = _FakeScene()
    entity = Entity()
    entity.scene = scene
    entity.kill()
    assert len(scene.handlers) == 1
    scene.handlers[0](scene)
    assert scene.deleted == [entity]


def test_get_entity_position():
    entity = Entity()
    entity.add_comp(PositionComp(Vector2(3, 4), Vector2(1, 1)))
    assert get_entity_position(entity) == Vector2(3, 4)


def test_get_entity_position_without_position():
    with pytest.raises(ValueError):
        get_entity_position(Entity())


def _placed(pos, size=Vector2(10, 10), ignore=False):
    entity = Entity()
    entity.add_comp(PositionComp(pos, size, ignore))
    return entity


def test_entity_overlay():
    a = _placed(Vector2(0, 0))
    assert entity_overlay(a, _placed(Vector2(5, 5))) is True
    assert entity_overlay(a, _placed(Vector2(20, 20))) is False
    assert entity_overlay(a, Entity()) is False
    assert entity_overlay(a, _placed(Vector2(5, 5), ignore=True)) is False


def test_type_predicates():
    plant, zombie, bullet = Entity(EntityType.PLANT), Entity(EntityType.ZOMBIE), Entity(EntityType.BULLET)
    assert is_plant(plant) and not is_plant(zombie)
    assert is_zombie(zombie) and not is_zombie(bullet)
    assert is_bullet(bullet) and not is_bullet(plant)


def test_background_is_scaled_to_size(tmp_path):
    image = tmp_path / "bg.png"
    image.write_bytes(b"")
    size = Vector2(100, 100)
    background = Background(image, Vector2(0, 0), size, _loader)
    assert get_entity_position(background) == Vector2(0, 0)
    animation = background.get_comp(CompType.ANIMATION)
    assert isinstance(animation, AnimationComp)
    sprite = animation.sprite
    assert sprite.scale.component_mul(sprite.texture_size) == size