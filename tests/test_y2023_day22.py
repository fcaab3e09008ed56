import pytest

from aocsolutions.y2023_day22 import (
    count_chain_falls,
    count_removable,
    parse_bricks,
    part_one,
    part_two,
    settle,
)

EXAMPLE = """\
1,0,1~1,2,1
0,0,2~2,0,2
0,2,3~2,2,3
0,0,4~0,2,4
2,0,5~2,2,5
0,1,6~2,1,6
1,1,8~1,1,9
"""


def _intersect(first, second):
    return all(
        first[0][d] <= second[1][d] and second[0][d] <= first[1][d] for d in range(3)
    )


def test_parse_bricks_reads_corners():
    bricks = parse_bricks("1,0,1~1,2,1\n0,0,2~2,0,2\n")
    assert bricks == [((1, 0, 1), (1, 2, 1)), ((0, 0, 2), (2, 0, 2))]


def test_parse_bricks_rejects_malformed_line():
    with pytest.raises(ValueError):
        parse_bricks("1,0,1-1,2,1")


def test_parse_bricks_rejects_reversed_corners():
    with pytest.raises(ValueError):
        parse_bricks("1,0,5~1,2,1")


def test_settle_drops_floating_brick_to_ground():
    [brick] = settle([((3, 4, 10), (3, 4, 12))])
    assert brick == ((3, 4, 0), (3, 4, 2))


def test_settle_is_idempotent():
    settled = settle(parse_bricks(EXAMPLE))
    assert sorted(settle(settled)) == sorted(settled)


def test_settled_bricks_do_not_intersect_and_rest_on_something():
    settled = settle(parse_bricks(EXAMPLE))
    for i, first in enumerate(settled):
        for second in settled[i + 1:]:
            assert not _intersect(first, second)
    for brick in settled:
        resting = brick[0][2] == 0 or any(
            other[1][2] + 1 == brick[0][2]
            and other[0][0] <= brick[1][0]
            and brick[0][0] <= other[1][0]
            and other[0][1] <= brick[1][1]
            and brick[0][1] <= other[1][1]
            for other in settled
        )
        assert resting


def test_side_by_side_bricks_are_all_removable():
    bricks = [((0, 0, 1), (0, 0, 1)), ((2, 0, 1), (2, 0, 1)), ((4, 0, 3), (4, 0, 3))]
    assert count_removable(bricks) == len(bricks)


def test_tower_only_top_is_removable():
    tower = [((0, 0, z), (0, 0, z)) for z in (1, 2, 3, 4)]
    assert count_removable(tower) == 1


def test_example_part_one():
    assert part_one(EXAMPLE) == 5


def test_example_part_two():
    assert part_two(EXAMPLE) == 7


def test_chain_falls_match_part_two():
    assert count_chain_falls(parse_bricks(EXAMPLE)) == part_two(EXAMPLE)