"""Tests for move parsing and the dance store."""

import pytest

from robopi.choreography import (
    DanceExistsError,
    DanceStore,
    Move,
    NoSuchDanceError,
    parse_duration,
    parse_move,
)
from robopi.choreography.script import MAX_DURATION_S
from robopi.moves import BASE_LEFT, GRIP_OPEN, WRIST_UP, UnknownMoveError


class TestParseDuration:
    def test_decimal_seconds(self):
        assert parse_duration("0.5") == 0.5
        assert parse_duration("2") == 2.0

    def test_zero_is_allowed(self):
        assert parse_duration("0") == 0.0

    def test_malformed_becomes_zero(self):
        """Unparseable durations do not fail the command."""
        assert parse_duration("soon") == 0.0
        assert parse_duration("1,5") == 0.0

    def test_negative_becomes_zero(self):
        assert parse_duration("-3") == 0.0

    def test_non_finite_becomes_zero(self):
        assert parse_duration("inf") == 0.0
        assert parse_duration("nan") == 0.0

    def test_huge_duration_is_capped(self):
        assert parse_duration("1e300") == MAX_DURATION_S
        assert parse_duration(repr(MAX_DURATION_S)) == MAX_DURATION_S
        assert parse_duration("3600") == 3600.0


class TestParseMove:
    def test_valid_move(self):
        assert parse_move("base", "left", "1") == Move(BASE_LEFT, 1.0)

    def test_malformed_duration_keeps_move(self):
        assert parse_move("grip", "open", "abc") == Move(GRIP_OPEN, 0.0)

    def test_unknown_move(self):
        with pytest.raises(UnknownMoveError):
            parse_move("base", "up", "1")

    def test_move_str(self):
        assert str(Move(WRIST_UP, 0.5)) == "wrist up x0.5s"


@pytest.fixture
def store():
    return DanceStore()


class TestDanceStore:
    def test_define_creates_empty_dance(self, store):
        store.define("wave")
        assert "wave" in store
        assert store.get("wave") == []

    def test_define_existing_is_rejected(self, store):
        """Existing dances are never overwritten."""
        store.define("wave")
        store.append("wave", Move(BASE_LEFT, 1.0))
        with pytest.raises(DanceExistsError):
            store.define("wave")
        assert store.get("wave") == [Move(BASE_LEFT, 1.0)]

    def test_define_empty_name(self, store):
        with pytest.raises(ValueError):
            store.define("")

    def test_append_keeps_order(self, store):
        store.define("wave")
        store.append("wave", Move(BASE_LEFT, 1.0))
        store.append("wave", Move(WRIST_UP, 0.5))
        store.append("wave", Move(BASE_LEFT, 0.0))
        assert store.get("wave") == [
            Move(BASE_LEFT, 1.0),
            Move(WRIST_UP, 0.5),
            Move(BASE_LEFT, 0.0),
        ]

    def test_append_unknown_dance(self, store):
        with pytest.raises(NoSuchDanceError):
            store.append("wave", Move(BASE_LEFT, 1.0))

    def test_get_unknown_dance(self, store):
        with pytest.raises(NoSuchDanceError) as exc:
            store.get("tango")
        assert exc.value.name == "tango"

    def test_get_returns_copy(self, store):
        store.define("wave")
        store.get("wave").append(Move(BASE_LEFT, 1.0))
        assert store.get("wave") == []

    def test_forget_is_idempotent(self, store):
        store.define("wave")
        store.forget("wave")
        store.forget("wave")
        store.forget("never-defined")
        assert "wave" not in store
        assert len(store) == 0

    def test_names_sorted(self, store):
        for name in ["zumba", "Tango", "wave"]:
            store.define(name)
        assert store.names() == ["Tango", "wave", "zumba"]

    def test_names_case_sensitive(self, store):
        store.define("wave")
        store.define("Wave")
        assert len(store) == 2
