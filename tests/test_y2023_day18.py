import pytest

from aocsolutions.y2023_day18 import lagoon_size, parse_step, part_one, part_two

EXAMPLE = """\
R 6 (#70c710)
D 5 (#0dc571)
L 2 (#5713f0)
D 2 (#d2c081)
R 2 (#59c680)
D 2 (#411b91)
L 5 (#8ceee2)
U 2 (#caa173)
L 1 (#1b58a2)
U 2 (#caa171)
R 2 (#7807d2)
U 3 (#a77fa3)
L 2 (#015232)
U 2 (#7a21e3)
"""


def test_example_part_one():
    assert part_one(EXAMPLE) == 62


def test_example_part_two():
    assert part_two(EXAMPLE) == 952408144115


def test_parse_plain_step():
    assert parse_step("R 6 (#70c710)") == ("R", 6)


def test_parse_hexadecimal_step():
    assert parse_step("R 6 (#70c710)", True) == ("R", int("70c71", 16))
    assert parse_step("D 5 (#0dc571)", True)[0] == "D"


def test_parse_rejects_bad_code():
    with pytest.raises(ValueError):
        parse_step("R 6 (#70c717)", True)


@pytest.mark.parametrize("side", [1, 4, 10])
def test_square_loop(side):
    steps = [("R", side), ("D", side), ("L", side), ("U", side)]
    assert lagoon_size(steps) == (side + 1) ** 2


def test_orientation_does_not_matter():
    steps = [parse_step(line) for line in EXAMPLE.splitlines()]
    reverse = {"R": "L", "L": "R", "U": "D", "D": "U"}
    mirrored = [(reverse[d], n) for d, n in reversed(steps)]
    assert lagoon_size(mirrored) == lagoon_size(steps)


def test_unknown_direction_rejected():
    with pytest.raises(ValueError):
        lagoon_size([("X", 3)])