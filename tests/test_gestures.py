import pytest

from gestures import classify_direction
from models import DIRECTION


@pytest.mark.parametrize("dx, dy, expected", [
    (40, 3, DIRECTION.RIGHT),
    (-40, 3, DIRECTION.LEFT),
    (3, 40, DIRECTION.DOWN),
    (3, -40, DIRECTION.UP),
    # equal magnitudes fall through to the vertical axis
    (5, 5, DIRECTION.DOWN),
    (-5, -5, DIRECTION.UP),
    (0, 0, DIRECTION.UP),
])
def test_classify_direction(dx, dy, expected):
    assert classify_direction(dx, dy) == expected

def test_zero_drag_resolves_to_up():
    assert classify_direction(0, 0) is DIRECTION.UP
    assert classify_direction(0.0, -0.0) is DIRECTION.UP

def test_dead_zone_ignores_short_drags():
    assert classify_direction(3, 4, dead_zone=6) is None
    assert classify_direction(0, 0, dead_zone=1) is None
    assert classify_direction(3, 4, dead_zone=5) == DIRECTION.DOWN

def test_negative_dead_zone_is_rejected():
    with pytest.raises(ValueError):
        classify_direction(1, 1, dead_zone=-1)
