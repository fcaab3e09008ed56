"""Integer grid points and the eight compass directions."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from enum import IntEnum


class Point(tuple):
    """An immutable point with integer coordinates in any number of dimensions."""

    __slots__ = ()

    def __new__(cls, *coords: int) -> Point:
        return super().__new__(cls, coords)

    def __getnewargs__(self) -> tuple[int, ...]:
        return tuple(self)

    def _pairs(self, other: Point) -> Iterator[tuple[int, int]]:
        if len(self) != len(other):
            raise ValueError(
                f"points have different dimensions: {len(self)} and {len(other)}"
            )
        return zip(self, other)

    def __add__(self, other: object) -> Point:
        if not isinstance(other, Point):
            return NotImplemented
        return Point(*(a + b for a, b in self._pairs(other)))

    def __sub__(self, other: object) -> Point:
        if not isinstance(other, Point):
            return NotImplemented
        return Point(*(a - b for a, b in self._pairs(other)))

    def __mul__(self, n: object) -> Point:
        if not isinstance(n, int):
            return NotImplemented
        return Point(*(coord * n for coord in self))

    __rmul__ = __mul__

    def __neg__(self) -> Point:
        return Point(*(-coord for coord in self))

    def __getitem__(self, dim):
        return tuple.__getitem__(self, dim)

    def simple_distance(self, other: Point) -> int:
        """Manhattan distance between two points."""
        return sum(abs(a - b) for a, b in self._pairs(other))

    def __repr__(self) -> str:
        return f"Point({', '.join(str(coord) for coord in self)})"


class Direction(IntEnum):
    """The eight directions on a grid, clockwise from up."""

    UP = 0
    RIGHT_UP = 1
    RIGHT = 2
    RIGHT_DOWN = 3
    DOWN = 4
    LEFT_DOWN = 5
    LEFT = 6
    LEFT_UP = 7

    NORTH = 0
    NORTH_EAST = 1
    EAST = 2
    SOUTH_EAST = 3
    SOUTH = 4
    SOUTH_WEST = 5
    WEST = 6
    NORTH_WEST = 7


_VECTORS = (
    Point(0, -1),
    Point(1, -1),
    Point(1, 0),
    Point(1, 1),
    Point(0, 1),
    Point(-1, 1),
    Point(-1, 0),
    Point(-1, -1),
)

_BASIC = (Direction.UP, Direction.RIGHT, Direction.DOWN, Direction.LEFT)


class Directions:
    """Unit step vectors for the grid directions."""

    def all_directions(self, order: Iterable[int] = ()) -> list[Point]:
        """All eight vectors, or the vectors of the given directions in order."""
        chosen = tuple(order)
        if not chosen:
            return list(_VECTORS)
        return [_VECTORS[Direction(d)] for d in chosen]

    def basic_directions(self, order: Iterable[int] = ()) -> list[Point]:
        """Up, right, down and left, or the vectors of the given directions."""
        chosen = tuple(order) or _BASIC
        return [_VECTORS[Direction(d)] for d in chosen]

    def direction(self, name: int) -> Point:
        """The step vector of one direction."""
        return _VECTORS[Direction(name)]


def iter_directions(
    start: int = Direction.UP, basic_only: bool = False, circular: bool = False
) -> Iterator[Direction]:
    """Walk the directions clockwise from ``start``.

    With ``basic_only`` every other direction is skipped; the start must then be
    a basic direction. With ``circular`` the walk wraps around forever.
    """
    value = Direction(start).value
    if basic_only and value % 2 == 1:
        raise ValueError("basic-only iteration needs a basic start direction")
    step = 2 if basic_only else 1
    count = len(_VECTORS)
    if circular:
        while True:
            yield Direction(value)
            value = (value + step) % count
    while value < count:
        yield Direction(value)
        value += step