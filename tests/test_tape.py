"""
Tests for the signed-byte tape.
"""

import pytest

from bfexec import Tape
from bfexec.tape import wrap_cell


def test_unwritten_cells_read_zero():
    tape = Tape()
    assert tape.read(0) == 0
    assert tape.read(-10_000) == 0
    assert tape.read(10_000) == 0
    assert tape.snapshot() == {}


@pytest.mark.parametrize("value,expected", [
    (0, 0), (127, 127), (128, -128), (255, -1), (256, 0), (-129, 127), (-1, -1), (65, 65),
])
def test_wrap_cell(value, expected):
    assert wrap_cell(value) == expected


def test_increment_wraps_at_signed_byte_bounds():
    tape = Tape()
    for _ in range(127):
        tape.increment(0)
    assert tape.read(0) == 127
    tape.increment(0)
    assert tape.read(0) == -128
    tape.decrement(0)
    assert tape.read(0) == 127


def test_decrement_from_zero_wraps_to_minus_one():
    tape = Tape()
    tape.decrement(3)
    assert tape.read(3) == -1


def test_grows_in_both_directions():
    tape = Tape(initial_size=4)
    tape.write(-50, 7)
    tape.write(50, 9)
    tape.write(0, 1)
    assert tape.read(-50) == 7
    assert tape.read(50) == 9
    assert tape.read(0) == 1
    assert tape.read(49) == 0
    assert len(tape) >= 101
    assert tape.snapshot() == {-50: 7, 0: 1, 50: 9}


def test_initial_size_must_be_positive():
    with pytest.raises(ValueError):
        Tape(initial_size=0)
