import pytest

from lawnwar.direction import Dir, Direction
from lawnwar.tools import Vector2

FIXED_OFFSETS = {
    Dir.STOP: (0, 0),
    Dir.UP: (0, -1),
    Dir.DOWN: (0, 1),
    Dir.LEFT: (-1, 0),
    Dir.RIGHT: (1, 0),
}


@pytest.mark.parametrize("d", list(FIXED_OFFSETS))
def test_fixed_direction_offsets(d):
    assert Direction(d).offset == Vector2(*FIXED_OFFSETS[d])


def test_vector_direction_is_normalised():
    offset = Direction(Vector2(3, 4)).offset
    assert offset.length_squared() == pytest.approx(1.0)
    assert offset == Vector2(3, 4).normalized()


def test_axis_vector_matches_fixed_direction():
    assert Direction(Vector2(0, 25)) == Direction(Dir.DOWN)


@pytest.mark.parametrize(
    "value, error",
    [(Vector2(0, 0), ValueError), ("left", TypeError)],
)
def test_bad_values_rejected(value, error):
    with pytest.raises(error):
        Direction(value)


def test_set_dir_changes_offset():
    heading = Direction(Dir.RIGHT)
    heading.set_dir(Dir.STOP)
    assert heading.offset == Vector2(0, 0)
    heading.set_dir(Vector2(-5, 0))
    assert heading.offset == Vector2(*FIXED_OFFSETS[Dir.LEFT])