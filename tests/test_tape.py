import numpy as np
import pytest

from punched_tape import OutOfBounds, Tape
from punched_tape.constants import BACKWARD_STEP, FORWARD_STEP


@pytest.mark.parametrize("bits", [1, 3, 5, 8])
def test_fresh_tape_reads_blank(bits):
    tape = Tape(bits=bits)
    assert tape.get() == " " * bits
    assert tape.get(zero="0", one="1") == "0" * bits
    assert tape.positions() == []


def test_punch_then_get_three_bits():
    tape = Tape(bits=3)
    assert tape.punch("x0x") == 1
    assert tape.get(0) == "* *"
    assert tape.position == 1
    assert tape.get() == "   "


def test_punch_back_get_round_trip_maps_blank_marks():
    tape = Tape(bits=6)
    tape.punch("a0_-b ")
    tape.back()
    assert tape.get() == "*   * "
    assert tape.get(zero="0", one="1") == "100010"


def test_overpunch_is_bitwise_or():
    tape = Tape(bits=4)
    tape.punch("xx__")
    first = tape.holes(0)
    tape.back()
    tape.punch("_x_x")
    assert tape.get(0) == "** *"
    assert np.array_equal(tape.holes(0), first | np.array([False, True, False, True]))


def test_overpunch_never_removes_holes():
    tape = Tape(bits=4)
    tape.punch("xxxx")
    tape.back()
    tape.punch("____")
    assert tape.get(0) == "****"


def test_punch_short_and_long_data():
    tape = Tape(bits=5)
    tape.punch("x")
    assert tape.get(0) == "*    "

    narrow = Tape(bits=2)
    narrow.punch("xxxxx")
    assert narrow.get(0) == "**"
    assert narrow.holes(0).shape == (2,)


def test_punch_accepts_character_lists():
    tape = Tape(bits=3)
    tape.punch(["x", "-", "y"])
    assert tape.get(0) == "* *"


def test_rewind_sign_convention():
    tape = Tape()
    tape.position = 7
    assert tape.rewind(3) == 4
    assert tape.rewind(-3) == 7
    assert tape.rewind() == 0


def test_step_constants_match_cursor_moves():
    tape = Tape(position=5)
    assert tape.rewind(BACKWARD_STEP) == 6
    assert tape.rewind(FORWARD_STEP) == 5


def test_back_moves_one_step_backward():
    tape = Tape(position=3)
    assert tape.back() == 2
    assert tape.back() == 1


def test_next_scans_forward():
    tape = Tape(bits=2)
    tape.punch("x")
    tape.punch("_x")
    assert tape.position == 2
    tape.rewind()
    assert tape.next() == "* "
    assert tape.position == 1
    assert tape.next() == " *"
    assert tape.position == 2


def test_next_with_explicit_position_advances_cursor():
    tape = Tape(bits=2)
    assert tape.next(5) == "  "
    assert tape.position == 1


def test_negative_positions_are_sparse_cells():
    tape = Tape(bits=2)
    assert tape.rewind(2) == -2
    tape.punch("_x")
    assert tape.position == -1
    assert tape.get(-2) == " *"
    assert tape.positions() == [-2]


def test_reads_do_not_materialize_cells():
    tape = Tape(bits=3)
    tape.get(10)
    tape.holes(11)
    tape.next(12)
    assert tape.positions() == []

    tape.position = 1000
    tape.punch("x")
    assert tape.positions() == [1000]


def test_get_beyond_length_fails():
    tape = Tape(bits=3, length=3)
    with pytest.raises(OutOfBounds) as info:
        tape.get(5)
    assert info.value.position == 5
    assert info.value.length == 3
    assert isinstance(info.value, IndexError)
    assert tape.get(2) == "   "


def test_length_can_be_set_later():
    tape = Tape(bits=2)
    for _ in range(4):
        tape.punch("xx")
    tape.length = 2
    assert tape.get(1) == "**"
    with pytest.raises(OutOfBounds):
        tape.get(3)
    with pytest.raises(OutOfBounds):
        tape.get()

    tape.length = None
    assert tape.get(3) == "**"


def test_failed_read_leaves_state_alone():
    tape = Tape(bits=2, length=2)
    tape.punch("x")
    with pytest.raises(OutOfBounds):
        tape.next(3)
    assert tape.position == 1
    assert tape.positions() == [0]


def test_punch_is_not_bounded_by_length():
    tape = Tape(bits=1, length=1)
    tape.position = 4
    tape.punch("x")
    assert tape.positions() == [4]


def test_position_none_resets_to_start():
    tape = Tape(position=9)
    tape.position = None
    assert tape.position == 0


def test_bits_must_be_positive():
    with pytest.raises(ValueError):
        Tape(bits=0)


def test_indexing_and_repr():
    tape = Tape(bits=3, length=4)
    tape.punch("__x")
    assert tape[0] == "  *"
    with pytest.raises(OutOfBounds):
        tape[4]
    assert repr(tape) == "Tape(bits=3, length=4, position=1)"


def test_holes_returns_a_copy():
    tape = Tape(bits=2)
    tape.punch("x")
    holes = tape.holes(0)
    holes[1] = True
    assert tape.get(0) == "* "
