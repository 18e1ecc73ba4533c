"""Tests for the move catalog."""

import pytest

from robopi import moves
from robopi.moves import RESET, UnknownMoveError, describe_moves, list_all, lookup, move_name


EXPECTED_PAIRS = [
    ("base", "left"),
    ("base", "right"),
    ("elbow", "down"),
    ("elbow", "up"),
    ("grip", "close"),
    ("grip", "open"),
    ("shoulder", "down"),
    ("shoulder", "up"),
    ("wrist", "down"),
    ("wrist", "up"),
]


class TestCatalog:
    def test_list_all_is_complete_and_sorted(self):
        """list_all should return exactly the ten moves, sorted."""
        assert list_all() == EXPECTED_PAIRS

    def test_codes_are_distinct(self):
        """No two moves may share a code."""
        codes = [lookup(j, d) for j, d in list_all()]
        assert len(set(codes)) == len(codes)

    def test_codes_differ_from_reset(self):
        """No move may use the neutral code."""
        assert all(lookup(j, d) != RESET for j, d in list_all())

    def test_codes_are_three_bytes(self):
        assert all(len(lookup(j, d)) == 3 for j, d in list_all())
        assert RESET == bytes(3)

    def test_describe_moves(self):
        """The help text lists joint and direction separated by a space."""
        text = describe_moves()
        assert text.startswith("base left, base right, elbow down")
        assert text.endswith("wrist down, wrist up")


class TestLookup:
    def test_known_move(self):
        assert lookup("base", "left") == moves.BASE_LEFT
        assert lookup("shoulder", "down") == bytes([0x80, 0x00, 0x00])

    def test_unknown_direction(self):
        """base has no 'up' direction."""
        with pytest.raises(UnknownMoveError) as exc:
            lookup("base", "up")
        assert exc.value.joint == "base"
        assert exc.value.direction == "up"

    def test_case_sensitive(self):
        with pytest.raises(UnknownMoveError):
            lookup("Base", "left")

    def test_unknown_move_is_value_error(self):
        with pytest.raises(ValueError):
            lookup("knee", "up")


class TestMoveName:
    def test_named_codes(self):
        assert move_name(moves.WRIST_UP) == "wrist up"
        assert move_name(RESET) == "reset"

    def test_unknown_code_shows_hex(self):
        assert move_name(bytes([0xFF, 0x00, 0x01])) == "ff 00 01"
