"""Explicit value-or-error results for guarded calls."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Generic, TypeVar

from errordemo.exceptions import DemoError, ErrorKind

if TYPE_CHECKING:
    from collections.abc import Callable

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass(frozen=True)
class Outcome(Generic[T]):
    """Result of one guarded call: a value, or the error that stopped it."""

    value: T | None = None
    error: DemoError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def kind(self) -> ErrorKind | None:
        """Category of the captured error, or None on success."""
        return self.error.kind if self.error is not None else None


def attempt(func: Callable[..., T], *args: Any, **kwargs: Any) -> Outcome[T]:
    """
    Call func and capture any DemoError into an Outcome.

    Exceptions outside the DemoError hierarchy propagate unchanged.

    Example:
        >>> from errordemo.calculator import divide
        >>> attempt(divide, 10, 2).value
        5.0
        >>> attempt(divide, 5, 0).kind
        <ErrorKind.DIVISION_BY_ZERO: 'division_by_zero'>
    """
    try:
        value = func(*args, **kwargs)
    except DemoError as exc:
        logger.debug("%s failed with %s: %s", getattr(func, "__name__", func), exc.kind.name, exc)
        return Outcome(error=exc)
    return Outcome(value=value)
