"""Unit tests for division."""

import pytest

from errordemo import DivisionByZeroError, ErrorKind, InvalidArgumentError, divide


class TestDivide:
    """Tests for the divide function."""

    def test_divide_evenly(self):
        result = divide(10, 2)
        assert result == 5.0
        assert isinstance(result, float)

    def test_divide_with_remainder(self):
        assert divide(7, 2) == 3.5

    def test_divide_by_one(self):
        assert divide(42, 1) == 42

    def test_divide_negative(self):
        assert divide(-10, 2) == -5
        assert divide(10, -2) == -5

    def test_divide_zero_by_number(self):
        assert divide(0, 5) == 0

    def test_divide_by_zero_raises(self):
        with pytest.raises(DivisionByZeroError) as exc_info:
            divide(5, 0)
        assert exc_info.value.numerator == 5
        assert exc_info.value.kind is ErrorKind.DIVISION_BY_ZERO
        assert str(exc_info.value) == "Division by zero: 5"

    def test_divide_by_float_zero_raises(self):
        with pytest.raises(DivisionByZeroError):
            divide(5.0, 0.0)

    def test_divide_by_negative_zero_raises(self):
        with pytest.raises(DivisionByZeroError):
            divide(5.0, -0.0)

    def test_tiny_divisor_is_not_zero(self):
        assert divide(1e-300, 1e-300) == 1.0

    def test_rejects_nan(self):
        with pytest.raises(InvalidArgumentError):
            divide(float("nan"), 1)

    def test_rejects_inf_divisor(self):
        with pytest.raises(InvalidArgumentError):
            divide(1, float("inf"))

    def test_rejects_string(self):
        with pytest.raises(InvalidArgumentError):
            divide("10", 2)  # type: ignore
