"""Sequence generation."""

import logging

from errordemo.validators import validate_integer, validate_positive

logger = logging.getLogger(__name__)


def squares(size: int) -> list[int]:
    """
    Build the list of squares ``[0, 1, 4, ..., (size - 1) ** 2]``.

    There is no upper limit on size; the whole list is built in memory, so a
    very large size fails with MemoryError rather than a DemoError.

    Raises:
        InvalidArgumentError: If size is not a positive integer
    """
    validate_integer(size)
    validate_positive(size, reason="Array size must be positive")

    logger.debug("generating %d squares", size)
    return [i * i for i in range(size)]
