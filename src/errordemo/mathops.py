"""Recursive integer sequences with domain validation."""

import logging

from errordemo.validators import validate_integer, validate_range

logger = logging.getLogger(__name__)

# Largest n whose factorial fits in a signed 64-bit integer
MAX_FACTORIAL_INPUT = 20


def factorial(n: int) -> int:
    """
    Compute n! for 0 <= n <= MAX_FACTORIAL_INPUT.

    Properties:
        - Base case: factorial(0) == 1
        - Recurrence: factorial(n) == n * factorial(n - 1)

    Args:
        n: Non-negative integer

    Returns:
        The product 1 * 2 * ... * n

    Raises:
        InvalidArgumentError: If n is not an integer
        DomainError: If n is negative or its factorial overflows a 64-bit integer
    """
    validate_integer(n)
    validate_range(n, min_val=0, reason="Factorial is not defined for negative numbers")
    validate_range(
        n,
        max_val=MAX_FACTORIAL_INPUT,
        reason="Factorial input too large, result overflows the numeric type",
    )

    result = 1
    for k in range(2, n + 1):
        result *= k

    logger.debug("factorial(%d) = %d", n, result)
    return result


def fibonacci(n: int) -> int:
    """
    Compute the n-th Fibonacci number.

    Properties:
        - Base cases: fibonacci(0) == 0, fibonacci(1) == 1
        - Recurrence: fibonacci(n) == fibonacci(n - 1) + fibonacci(n - 2)

    There is no upper bound on n.

    Args:
        n: Non-negative integer

    Returns:
        The n-th Fibonacci number

    Raises:
        InvalidArgumentError: If n is not an integer
        DomainError: If n is negative
    """
    validate_integer(n)
    validate_range(n, min_val=0, reason="Fibonacci is not defined for negative numbers")

    previous, current = 0, 1
    for _ in range(n):
        previous, current = current, previous + current

    logger.debug("fibonacci(%d) computed, %d bits", n, previous.bit_length())
    return previous
