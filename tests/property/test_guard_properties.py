"""
Property-based tests for argument guards.

Uses Hypothesis to check passthrough, rejection and idempotence properties.
"""

from enum import Enum

import pytest
from hypothesis import given, strategies as st
from hypothesis import settings

from argguard.exceptions import InvalidArgumentError, NullArgumentError
from argguard.validation.guard import (
    argument_enum_valid,
    argument_not_null,
    argument_not_null_or_empty,
    argument_valid,
    file_exists,
    generic_argument_not_null,
    not_null,
)


class Level(Enum):
    TRACE = 0
    DEBUG = 1
    INFO = 2
    WARN = 3
    ERROR = 4


@st.composite
def enum_split(draw):
    """Split the Level members into a non-empty valid set and the rest."""
    members = list(Level)
    valid = draw(st.sets(st.sampled_from(members), min_size=1, max_size=len(members)))
    invalid = [m for m in members if m not in valid]
    return valid, invalid


present_values = st.one_of(
    st.integers(),
    st.floats(allow_nan=False),
    st.text(),
    st.booleans(),
    st.lists(st.integers()),
    st.dictionaries(st.text(), st.integers()),
)


class TestEnumProperties:
    """Property-based tests for argument_enum_valid."""

    @given(split=enum_split())
    @settings(max_examples=50)
    def test_valid_members_pass_through(self, split):
        """
        Property: every member of the valid set is returned unchanged.
        """
        valid, _ = split
        for member in valid:
            assert argument_enum_valid(member, valid, "level") is member

    @given(split=enum_split())
    @settings(max_examples=50)
    def test_other_members_rejected(self, split):
        """
        Property: every member outside the valid set raises InvalidArgumentError.
        """
        valid, invalid = split
        for member in invalid:
            with pytest.raises(InvalidArgumentError):
                argument_enum_valid(member, valid, "level")


class TestNotNullProperties:
    """Property-based tests for the not-null guards."""

    @given(value=present_values)
    @settings(max_examples=100)
    def test_present_values_returned_identically(self, value):
        """
        Property: any non-None value is returned as the same object.
        """
        assert argument_not_null(value, "value") is value
        assert generic_argument_not_null(value, "value") is value

    @given(value=present_values)
    @settings(max_examples=50)
    def test_idempotent(self, value):
        """
        Property: guarding twice yields the same result as guarding once.
        """
        once = argument_not_null(value, "value")
        twice = argument_not_null(argument_not_null(value, "value"), "value")
        assert once is twice


class TestNotNullOrEmptyProperties:
    """Property-based tests for argument_not_null_or_empty."""

    @given(items=st.lists(st.integers(), min_size=1))
    @settings(max_examples=100)
    def test_non_empty_lists_unchanged(self, items):
        """
        Property: non-empty lists pass through with order and contents intact.
        """
        snapshot = list(items)

        result = argument_not_null_or_empty(items, "items")

        assert result is items
        assert result == snapshot

    @given(text=st.text(min_size=1))
    @settings(max_examples=50)
    def test_non_empty_strings_unchanged(self, text):
        """
        Property: non-empty strings pass through.
        """
        assert argument_not_null_or_empty(text, "text") is text

    @given(empty=st.sampled_from(["", [], (), {}, set(), frozenset(), b""]))
    def test_empty_containers_rejected(self, empty):
        """
        Property: empty containers raise InvalidArgumentError, never NullArgumentError.
        """
        with pytest.raises(InvalidArgumentError):
            argument_not_null_or_empty(empty, "value")

    def test_none_is_null_argument(self):
        """Test None raises NullArgumentError."""
        with pytest.raises(NullArgumentError):
            argument_not_null_or_empty(None, "value")


class TestArgumentValidProperties:
    """Property-based tests for argument_valid."""

    @given(test=st.booleans(), message=st.text(min_size=1))
    @settings(max_examples=100)
    def test_raises_exactly_when_false(self, test, message):
        """
        Property: argument_valid raises iff the test is false, carrying the message.
        """
        if test:
            assert argument_valid(test, message) is None
        else:
            with pytest.raises(InvalidArgumentError) as exc_info:
                argument_valid(test, message)
            assert exc_info.value.message == message


class TestIdempotenceProperties:
    """Property-based tests: guarding twice equals guarding once."""

    @given(split=enum_split())
    @settings(max_examples=50)
    def test_enum_valid_idempotent(self, split):
        """
        Property: argument_enum_valid returns the same member on every call.
        """
        valid, _ = split
        for member in valid:
            once = argument_enum_valid(member, valid, "level")
            twice = argument_enum_valid(argument_enum_valid(member, valid, "level"), valid, "level")
            assert once is twice is member

    @given(items=st.lists(st.text(), min_size=1))
    @settings(max_examples=50)
    def test_not_null_or_empty_idempotent(self, items):
        """
        Property: argument_not_null_or_empty leaves the value intact across calls.
        """
        snapshot = list(items)

        once = argument_not_null_or_empty(items, "items")
        twice = argument_not_null_or_empty(argument_not_null_or_empty(items, "items"), "items")

        assert once is twice is items
        assert items == snapshot

    @given(value=present_values, default=present_values)
    @settings(max_examples=50)
    def test_generic_not_null_idempotent(self, value, default):
        """
        Property: generic_argument_not_null gives the same result on repeat calls.
        """
        if value == default:
            for _ in range(2):
                with pytest.raises(NullArgumentError):
                    generic_argument_not_null(value, "value", default=default)
        else:
            once = generic_argument_not_null(value, "value", default=default)
            twice = generic_argument_not_null(once, "value", default=default)
            assert once is twice is value

    @given(value=present_values)
    @settings(max_examples=50)
    def test_not_null_idempotent(self, value):
        """
        Property: not_null returns the same object on repeat calls.
        """
        once = not_null(value, "State missing")
        twice = not_null(not_null(value, "State missing"), "State missing")
        assert once is twice is value

    def test_file_exists_idempotent(self, existing_file):
        """Test file_exists returns the same path on repeat calls."""
        once = file_exists(existing_file)
        twice = file_exists(file_exists(existing_file))

        assert once is twice is existing_file
