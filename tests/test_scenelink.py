import pytest

from tilequest.rectmath import Rect, rect_center, rect_height
from tilequest.scenelink import (
    Direction,
    LinkRegistry,
    LinkShape,
    RectSceneLink,
    reverse_direction,
)

ENTRANCE = Rect(0, 300, 50, 400)
DEST = Rect(1450, 1200, 1500, 1300)


def make_link(direction=Direction.UP, registry=None):
    return RectSceneLink(ENTRANCE, "town", "forest", DEST, direction, registry)


@pytest.mark.parametrize("direction", list(Direction))
def test_reverse_is_involution(direction):
    assert reverse_direction(reverse_direction(direction)) is direction
    assert reverse_direction(direction) is not direction


def test_reverse_up_down():
    assert reverse_direction(Direction.UP) is Direction.DOWN
    assert reverse_direction(Direction.LEFT) is Direction.RIGHT


def test_construction_registers():
    registry = LinkRegistry()
    link = make_link(registry=registry)
    assert link in registry
    assert registry.in_scene("town") == [link]
    assert registry.in_scene("forest") == []


def test_activate_deactivate():
    link = make_link()
    assert link.active
    link.deactivate()
    assert not link.active
    link.activate()
    assert link.active


def test_create_opposite_swaps_ends():
    registry = LinkRegistry()
    link = make_link(Direction.LEFT, registry)
    opposite = link.create_opposite(False)
    assert opposite.entrance == link.dest
    assert opposite.dest == link.entrance
    assert opposite.current_scene == "forest"
    assert opposite.dest_scene == "town"
    assert opposite.direction is Direction.RIGHT
    assert opposite.active is False
    assert opposite in registry
    assert len(registry) == 2


def test_opposite_has_no_opposite():
    link = make_link()
    opposite = link.create_opposite(True)
    assert opposite.active is True
    assert opposite.create_opposite(True) is None


def test_dest_position_directions():
    center = rect_center(DEST)
    up = make_link(Direction.UP).dest_position()
    down = make_link(Direction.DOWN).dest_position()
    left = make_link(Direction.LEFT).dest_position()
    right = make_link(Direction.RIGHT).dest_position()
    assert up.x == center.x and up.y < center.y
    assert down.x == center.x and down.y > center.y
    assert left.y == center.y and left.x < center.x
    assert right.y == center.y and right.x > center.x
    assert (up.y + down.y) / 2 == center.y
    assert (left.x + right.x) / 2 == center.x
    assert down.y - up.y == 2 * (rect_height(DEST) + 50)


def test_involved_in():
    link = make_link()
    assert link.involved_in(Rect(0, 0, 100, 500))
    assert not link.involved_in(Rect(10, 0, 100, 500))
    assert not link.involved_in(Rect(500, 500, 600, 600))


def test_is_touched_by():
    link = make_link()
    assert link.is_touched_by(Rect(40, 390, 80, 420))
    assert not link.is_touched_by(Rect(50, 300, 90, 400))
    assert not link.is_touched_by(None)


def test_same_as():
    a = make_link()
    b = make_link(Direction.DOWN)
    c = RectSceneLink(ENTRANCE, "town", "forest", Rect(0, 0, 10, 10))
    d = RectSceneLink(ENTRANCE, "town", "coast", DEST)
    assert a.same_as(b)
    assert not a.same_as(c)
    assert not a.same_as(d)
    assert a.shape is LinkShape.RECT


def test_clear_scene_keeps_link():
    registry = LinkRegistry()
    a = make_link(registry=registry)
    b = make_link(registry=registry)
    other = RectSceneLink(DEST, "forest", "town", ENTRANCE, registry=registry)
    removed = registry.clear_scene("town", keep=b)
    assert removed == [a]
    assert list(registry) == [b, other]


def test_remove_unknown_raises():
    registry = LinkRegistry()
    link = make_link()
    with pytest.raises(ValueError):
        registry.remove(link)