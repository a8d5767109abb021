"""Input validation shared by the demo operations."""

import logging
import math
from typing import TypeVar

from errordemo.exceptions import DomainError, InvalidArgumentError

logger = logging.getLogger(__name__)

T = TypeVar("T", int, float)


def validate_integer(value: int) -> int:
    """
    Validate that a value is an integer.

    Booleans are rejected even though ``bool`` subclasses ``int``.

    Args:
        value: The value to validate

    Returns:
        The validated value

    Raises:
        InvalidArgumentError: If value is not an int
    """
    if isinstance(value, bool) or not isinstance(value, int):
        logger.debug("rejected non-integer %r", value)
        raise InvalidArgumentError(value, f"Expected integer, got {type(value).__name__}")
    return value


def validate_number(value: T) -> T:
    """
    Validate that a value is a finite number.

    Args:
        value: The value to validate

    Returns:
        The validated value

    Raises:
        InvalidArgumentError: If value is NaN, Inf, or not a number
    """
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        logger.debug("rejected non-number %r", value)
        raise InvalidArgumentError(value, f"Expected number, got {type(value).__name__}")

    if isinstance(value, float):
        if math.isnan(value):
            raise InvalidArgumentError(value, "NaN is not allowed")
        if math.isinf(value):
            raise InvalidArgumentError(value, "Infinity is not allowed")

    return value


def validate_positive(value: T, reason: str = "Value must be positive") -> T:
    """Validate that a number is strictly greater than zero."""
    validate_number(value)

    if value <= 0:
        logger.debug("rejected non-positive %r", value)
        raise InvalidArgumentError(value, reason)

    return value


def validate_range(
    value: T,
    min_val: float | None = None,
    max_val: float | None = None,
    reason: str = "Value outside the domain",
) -> T:
    """
    Validate that a value lies within inclusive bounds.

    Args:
        value: The value to validate
        min_val: Minimum allowed value (None for no limit)
        max_val: Maximum allowed value (None for no limit)
        reason: Message carried by the raised error

    Returns:
        The validated value

    Raises:
        DomainError: If value is outside the range
    """
    validate_number(value)

    if min_val is not None and value < min_val:
        logger.debug("%r below minimum %r", value, min_val)
        raise DomainError(reason, value)

    if max_val is not None and value > max_val:
        logger.debug("%r above maximum %r", value, max_val)
        raise DomainError(reason, value)

    return value
