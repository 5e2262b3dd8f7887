import pytest

from lawnwar.component import CompType, Component, EntityStatus
from lawnwar.entity import Entity


def _recorder(kind, log):
    class Recorder(Component):
        comp_type = kind

        def update(self, entity):
            log.append((kind, entity))

    return Recorder()


def test_update_order_follows_comp_type():
    log = []
    subject = Entity()
    shuffled = [CompType.ATTACK, CompType.HP, CompType.ANIMATION, CompType.POSITION, CompType.MOVEMENT]
    for kind in shuffled:
        subject.add_comp(_recorder(kind, log))
    subject.update()
    assert [kind for kind, _ in log] == sorted(shuffled) == [
        CompType.HP,
        CompType.MOVEMENT,
        CompType.POSITION,
        CompType.ANIMATION,
        CompType.ATTACK,
    ]


def test_component_is_abstract():
    with pytest.raises(TypeError):
        Component()


def test_subclass_update_receives_entity():
    log = []
    comp = _recorder(CompType.HP, log)
    subject = Entity()
    subject.add_comp(comp)
    subject.update()
    assert log == [(CompType.HP, subject)]
    assert subject.get_comp(CompType.HP) is comp


@pytest.mark.parametrize("name, member", [("died", EntityStatus.DIED), ("normal", EntityStatus.NORMAL)])
def test_status_values_are_animation_names(name, member):
    assert EntityStatus(name) is member
    assert member.value == name