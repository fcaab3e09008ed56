import pytest

from aocsolutions.y2020_day25 import find_loop_size, part_one, transform

CARD_KEY = 5764801
DOOR_KEY = 17807724


def test_worked_example_loop_sizes():
    assert find_loop_size(CARD_KEY, 7) == 8
    assert find_loop_size(DOOR_KEY, 7) == 11


def test_part_one_example():
    assert part_one(f"{CARD_KEY}\n{DOOR_KEY}\n") == 14897079


def test_encryption_key_is_symmetric():
    card_loop = find_loop_size(CARD_KEY, 7)
    door_loop = find_loop_size(DOOR_KEY, 7)
    assert transform(CARD_KEY, door_loop) == transform(DOOR_KEY, card_loop)


@pytest.mark.parametrize("loop_size", [1, 2, 5, 17, 40])
def test_loop_size_round_trip(loop_size):
    assert find_loop_size(transform(7, loop_size), 7) == loop_size


def test_transform_with_zero_loops_is_one():
    assert transform(CARD_KEY, 0) == 1


def test_invalid_inputs_raise():
    with pytest.raises(ValueError):
        transform(7, -1)
    with pytest.raises(ValueError):
        find_loop_size(0, 7)
    with pytest.raises(ValueError):
        part_one("123\n")