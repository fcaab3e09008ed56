import pickle
from itertools import islice

import pytest

from aocsolutions.points import Direction, Directions, Point, iter_directions


def test_add_then_subtract_round_trip():
    a = Point(3, -7, 2)
    b = Point(-1, 4, 9)
    assert (a + b) - b == a


def test_multiply_matches_repeated_addition():
    a = Point(5, -2)
    assert a * 3 == a + a + a
    assert 3 * a == a * 3


def test_getitem_returns_coordinates():
    p = Point(4, 9)
    assert (p[0], p[1]) == (4, 9)


def test_mismatched_dimensions_raise():
    with pytest.raises(ValueError):
        Point(1, 2) + Point(1, 2, 3)
    with pytest.raises(ValueError):
        Point(1, 2).simple_distance(Point(1))


def test_simple_distance_properties():
    a = Point(2, -3)
    b = Point(-4, 5)
    assert a.simple_distance(a) == 0
    assert a.simple_distance(b) == b.simple_distance(a)
    assert a.simple_distance(b) == abs(2 - -4) + abs(-3 - 5)


def test_points_order_and_hash_like_tuples():
    assert Point(0, 5) < Point(1, 0)
    assert len({Point(1, 1), Point(1, 1), Point(2, 1)}) == 2


def test_pickle_round_trip():
    p = Point(7, 8, 9)
    assert pickle.loads(pickle.dumps(p)) == p


def test_direction_vectors():
    d = Directions()
    assert d.direction(Direction.UP) == Point(0, -1)
    assert d.direction(Direction.RIGHT_DOWN) == Point(1, 1)
    assert d.direction(Direction.NORTH_WEST) == Point(-1, -1)


def test_all_directions_default_and_ordered():
    d = Directions()
    everything = d.all_directions()
    assert len(everything) == 8
    assert sum(everything, Point(0, 0)) == Point(0, 0)
    assert d.all_directions([Direction.LEFT, Direction.UP]) == [Point(-1, 0), Point(0, -1)]


def test_basic_directions_default():
    d = Directions()
    assert d.basic_directions() == [Point(0, -1), Point(1, 0), Point(0, 1), Point(-1, 0)]
    assert d.basic_directions([Direction.SOUTH]) == [Point(0, 1)]


def test_iter_directions_full_and_basic():
    assert list(iter_directions(Direction.UP, False, False)) == list(Direction)
    assert list(iter_directions(Direction.UP, True, False)) == [
        Direction.UP,
        Direction.RIGHT,
        Direction.DOWN,
        Direction.LEFT,
    ]
    assert list(iter_directions(Direction.LEFT, False, False)) == [
        Direction.LEFT,
        Direction.LEFT_UP,
    ]


def test_iter_directions_basic_rejects_diagonal_start():
    with pytest.raises(ValueError):
        next(iter_directions(Direction.RIGHT_UP, True, False))


def test_iter_directions_circular_wraps():
    walk = list(islice(iter_directions(Direction.LEFT, True, True), 4))
    assert walk == [Direction.LEFT, Direction.UP, Direction.RIGHT, Direction.DOWN]