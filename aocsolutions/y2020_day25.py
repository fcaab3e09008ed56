"""Door and card handshake keys."""

from __future__ import annotations

MODULUS = 20201227
SUBJECT_NUMBER = 7


def transform(subject_number: int, loop_size: int) -> int:
    """Apply the handshake transform ``loop_size`` times."""
    if loop_size < 0:
        raise ValueError("loop size must not be negative")
    return pow(subject_number, loop_size, MODULUS)


def find_loop_size(public_key: int, subject_number: int = SUBJECT_NUMBER) -> int:
    """Smallest positive loop size that turns the subject number into the key."""
    if not 0 < public_key < MODULUS:
        raise ValueError(f"public key must lie between 1 and {MODULUS - 1}")
    first = subject_number % MODULUS
    value = first
    loop_size = 1
    while value != public_key:
        value = value * subject_number % MODULUS
        loop_size += 1
        if value == first:
            raise ValueError("public key cannot be reached from this subject number")
    return loop_size


def part_one(text: str) -> int:
    keys = [int(token) for token in text.split()]
    if len(keys) != 2:
        raise ValueError("expected a card key and a door key")
    card_key, door_key = keys
    return transform(card_key, find_loop_size(door_key))