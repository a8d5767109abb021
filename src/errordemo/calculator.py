"""Division with zero protection."""

import logging

from errordemo.exceptions import DivisionByZeroError
from errordemo.validators import validate_number

logger = logging.getLogger(__name__)


def divide(a: float, b: float) -> float:
    """
    Divide a by b with zero protection.

    Zero is detected by exact comparison, so ``-0.0`` is a zero divisor
    while arbitrarily small non-zero divisors are accepted.

    Properties:
        - Identity: divide(a, 1) == a
        - Self-division: divide(a, a) == 1 (for a != 0)

    Args:
        a: Dividend
        b: Divisor

    Returns:
        Quotient of a and b as a float

    Raises:
        InvalidArgumentError: If inputs are not finite numbers
        DivisionByZeroError: If b is zero
    """
    validate_number(a)
    validate_number(b)

    if b == 0:
        logger.debug("division of %r by zero", a)
        raise DivisionByZeroError(a)

    return a / b
