import pytest

from lawnwar.component import CompType, EntityType
from lawnwar.entity import Entity
from lawnwar.input import InputHandler
from lawnwar.position import PositionComp
from lawnwar.scene import GameScene
from lawnwar.tool import Spade, Tool
from lawnwar.tools import Vector2, axis2pos


@pytest.fixture
def scene():
    return GameScene()


@pytest.fixture
def tool(scene):
    item = Tool()
    item.add_comp(PositionComp(Vector2(10, 10), Vector2(50, 50)))
    scene.add_tool(item)
    return item


def test_escape_closes_scene(scene):
    handler = InputHandler(scene)
    handler.on_key_pressed("a")
    assert scene.is_open
    handler.on_key_pressed("escape")
    assert not scene.is_open


def test_closed_event_closes_scene(scene):
    InputHandler(scene).on_closed()
    assert not scene.is_open


def test_short_click_picks_up_tool(scene, tool):
    handler = InputHandler(scene)
    handler.on_mouse_button_pressed(1, (20, 20))
    handler.on_mouse_button_released(1, (21, 21))
    assert scene.hand is tool


def test_drag_is_not_a_click(scene, tool):
    handler = InputHandler(scene)
    handler.on_mouse_button_pressed(1, (20, 20))
    handler.on_mouse_button_released(1, (30, 30))
    assert scene.hand is None


def test_other_button_release_is_ignored(scene, tool):
    handler = InputHandler(scene)
    handler.on_mouse_button_pressed(1, (20, 20))
    handler.on_mouse_button_released(3, (20, 20))
    assert scene.hand is None


def test_held_tool_follows_mouse(scene, tool):
    handler = InputHandler(scene)
    handler.on_mouse_move((300, 200))
    assert tool.get_comp(CompType.POSITION).pos == Vector2(10, 10)
    handler.on_mouse_button_pressed(1, (20, 20))
    handler.on_mouse_button_released(1, (20, 20))
    handler.on_mouse_move((300, 200))
    assert tool.get_comp(CompType.POSITION).pos == Vector2(300, 200)


def test_spade_digs_up_clicked_plant(scene):
    spade = Spade()
    spade.add_comp(PositionComp(Vector2(10, 10), Vector2(50, 50)))
    scene.add_tool(spade)
    axis = Vector2(1, 1)
    plant = Entity(EntityType.PLANT)
    plant.add_comp(PositionComp(axis2pos(axis), Vector2(70, 80)))
    scene.add_plant(plant)
    handler = InputHandler(scene)
    handler.on_mouse_button_pressed(1, (20, 20))
    handler.on_mouse_button_released(1, (20, 20))
    target = axis2pos(axis) + Vector2(5, 5)
    handler.on_mouse_button_pressed(1, target)
    handler.on_mouse_button_released(1, target)
    assert scene.plant_by_axis(axis) is None
    assert scene.hand is None