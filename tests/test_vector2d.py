import pytest

from adventkit.vector2d import Facing, Vector2D


def test_defaults():
    v = Vector2D()
    assert (v.x, v.y, v.facing) == (0, 0, Facing.NORTH)


def test_turn_right_cycles_clockwise():
    v = Vector2D()
    seen = []
    for _ in range(4):
        v.turn_right()
        seen.append(v.facing)
    assert seen == [Facing.EAST, Facing.SOUTH, Facing.WEST, Facing.NORTH]


def test_turn_left_undoes_turn_right():
    for start in Facing:
        v = Vector2D(1, 1, start)
        v.turn_right()
        v.turn_left()
        assert v.facing == start


def test_turn_left_from_north_is_west():
    v = Vector2D()
    v.turn_left()
    assert v.facing == Facing.WEST


def test_steps_in_each_direction():
    v = Vector2D(5, 5)
    v.go_north()
    assert (v.x, v.y) == (4, 5)
    v.go_south()
    v.go_east()
    assert (v.x, v.y) == (5, 6)
    v.go_west()
    assert (v.x, v.y) == (5, 5)


def test_go_forward_matches_heading():
    v = Vector2D(2, 2, Facing.EAST)
    v.go_forward()
    assert (v.x, v.y) == (2, 3)
    v.facing = Facing.SOUTH
    v.go_forward()
    assert (v.x, v.y) == (3, 3)


def test_full_loop_returns_home():
    v = Vector2D(3, 3)
    for _ in range(4):
        v.go_forward()
        v.turn_right()
    assert v == Vector2D(3, 3, Facing.NORTH)


@pytest.mark.parametrize(
    "facing, symbol",
    [(Facing.NORTH, "^"), (Facing.EAST, ">"), (Facing.SOUTH, "v"), (Facing.WEST, "<")],
)
def test_facing_symbol(facing, symbol):
    assert Vector2D(0, 0, facing).facing_symbol() == symbol


def test_look_ahead_does_not_move():
    v = Vector2D(4, 4, Facing.WEST)
    ahead = v.look_ahead()
    assert v == Vector2D(4, 4, Facing.WEST)
    v.go_forward()
    assert ahead == v


def test_cord_and_cord_rev():
    v = Vector2D(3, -4, Facing.EAST)
    assert v.cord() == "(3,-4)"
    assert v.cord(True) == "(3,-4,1)"
    assert v.cord_rev() == "(-4,3)"
    assert v.cord_rev(facing=True) == "(-4,3,1)"


def test_str():
    assert str(Vector2D(1, 2, Facing.SOUTH)) == "X=1 Y=2 Facing=2"


def test_equality_includes_facing():
    assert Vector2D(1, 2, Facing.NORTH) == Vector2D(1, 2, Facing.NORTH)
    assert not Vector2D(1, 2, Facing.NORTH) == Vector2D(1, 2, Facing.EAST)


def test_ordering_by_x_then_y():
    points = [Vector2D(2, 0), Vector2D(1, 5), Vector2D(1, 2)]
    assert sorted(points) == [Vector2D(1, 2), Vector2D(1, 5), Vector2D(2, 0)]


def test_add_and_sub_keep_left_facing():
    a = Vector2D(1, 2, Facing.WEST)
    b = Vector2D(3, 4, Facing.EAST)
    total = a + b
    assert total.facing == Facing.WEST
    assert total - b == a


def test_in_place_add_and_sub():
    a = Vector2D(1, 2, Facing.SOUTH)
    a += Vector2D(3, 4)
    a -= Vector2D(3, 4)
    assert a == Vector2D(1, 2, Facing.SOUTH)


def test_scalar_multiplication_resets_facing():
    a = Vector2D(2, -3, Facing.EAST)
    doubled = a * 2
    assert doubled == Vector2D(2, -3) + Vector2D(2, -3)
    assert doubled.facing == Facing.NORTH
    assert 2 * a == doubled


@pytest.mark.parametrize("x, y", [(-1, 7), (13, -22), (0, 0), (-100, 100)])
def test_modulo_wraps_into_bounds(x, y):
    bounds = Vector2D(11, 7)
    wrapped = Vector2D(x, y) % bounds
    assert 0 <= wrapped.x < 11 and 0 <= wrapped.y < 7
    assert (wrapped.x - x) % 11 == 0 and (wrapped.y - y) % 7 == 0


def test_hash_consistent_with_equality():
    assert len({Vector2D(1, 1), Vector2D(1, 1), Vector2D(1, 1, Facing.EAST)}) == 2


def test_facing_coerced_from_int():
    assert Vector2D(0, 0, 3).facing is Facing.WEST