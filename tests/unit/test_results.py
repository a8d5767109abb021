"""Unit tests for explicit results."""

import pytest

from errordemo import (
    DivisionByZeroError,
    ErrorKind,
    Outcome,
    attempt,
    divide,
    factorial,
    squares,
)


class TestAttempt:
    """Tests for the attempt function."""

    def test_success_carries_value(self):
        outcome = attempt(divide, 10, 2)
        assert outcome.ok
        assert outcome.value == 5.0
        assert outcome.error is None
        assert outcome.kind is None

    def test_failure_carries_error(self):
        outcome = attempt(divide, 5, 0)
        assert not outcome.ok
        assert outcome.value is None
        assert isinstance(outcome.error, DivisionByZeroError)
        assert outcome.kind is ErrorKind.DIVISION_BY_ZERO

    def test_kinds_follow_operation(self):
        assert attempt(factorial, -1).kind is ErrorKind.DOMAIN
        assert attempt(squares, 0).kind is ErrorKind.INVALID_ARGUMENT

    def test_keyword_arguments_are_forwarded(self):
        assert attempt(divide, a=9, b=3).value == 3.0

    def test_other_exceptions_propagate(self):
        def broken():
            raise KeyError("not a demo error")

        with pytest.raises(KeyError):
            attempt(broken)


class TestOutcome:
    """Tests for the Outcome record."""

    def test_is_immutable(self):
        outcome = Outcome(value=1)
        with pytest.raises(AttributeError):
            outcome.value = 2  # type: ignore
