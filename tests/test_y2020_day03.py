import pytest

from aocsolutions.y2020_day03 import count_trees, part_one, part_two

EXAMPLE = """\
..##.......
#...#...#..
.#....#..#.
..#.#...#.#
.#...##..#.
..#.##.....
.#.#.#....#
.#........#
#.##...#...
#...##....#
.#..#...#.#
"""


def test_part_one_example():
    assert part_one(EXAMPLE) == 7


def test_part_two_example():
    assert part_two(EXAMPLE) == 336


def test_part_one_matches_count_trees():
    lines = EXAMPLE.splitlines()
    assert count_trees(lines, 3, 1) == part_one(EXAMPLE)


def test_full_forest_counts_visited_rows():
    lines = ["#####"] * 9
    assert count_trees(lines, 1, 1) == 9
    assert count_trees(lines, 2, 2) == 5
    assert count_trees(lines, 4, 3) == 3


def test_empty_forest_has_no_trees():
    assert count_trees(["....."] * 6, 3, 1) == 0


def test_invalid_down_raises():
    with pytest.raises(ValueError):
        count_trees(["#"], 1, 0)