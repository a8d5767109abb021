"""Error taxonomy for the demo operations."""

from __future__ import annotations

import enum
import os
from typing import Any


class ErrorKind(enum.Enum):
    """Category of a failed operation, used by callers to branch on."""

    DOMAIN = "domain"
    DIVISION_BY_ZERO = "division_by_zero"
    INVALID_ARGUMENT = "invalid_argument"
    FILE_NOT_FOUND = "file_not_found"
    IO = "io"
    UNEXPECTED = "unexpected"


class DemoError(Exception):
    """Base exception for all demo errors."""

    kind: ErrorKind = ErrorKind.UNEXPECTED

    def __init__(self, message: str, value: Any = None) -> None:
        self.message = message
        self.value = value
        super().__init__(self.message)

    def __str__(self) -> str:
        if self.value is not None:
            return f"{self.message}: {self.value}"
        return self.message


class DomainError(DemoError):
    """Raised when input lies outside the mathematical domain of an operation."""

    kind = ErrorKind.DOMAIN


class DivisionByZeroError(DemoError):
    """Raised when attempting to divide by zero."""

    kind = ErrorKind.DIVISION_BY_ZERO

    def __init__(self, numerator: float) -> None:
        super().__init__("Division by zero", numerator)
        self.numerator = numerator


class InvalidArgumentError(DemoError):
    """Raised when an argument has the wrong type or an unusable value."""

    kind = ErrorKind.INVALID_ARGUMENT

    def __init__(self, value: Any, reason: str = "invalid argument") -> None:
        super().__init__(reason, value)
        self.reason = reason


class _FileError(DemoError):
    def __init__(self, message: str, path: str | os.PathLike[str]) -> None:
        super().__init__(message, os.fspath(path))
        self.path = os.fspath(path)


class FileNotFoundError(_FileError):
    """Raised when the target file or its directory does not exist."""

    kind = ErrorKind.FILE_NOT_FOUND

    def __init__(self, path: str | os.PathLike[str]) -> None:
        super().__init__("File not found", path)


class IOError(_FileError):
    """Raised when the file exists but cannot be written or read."""

    kind = ErrorKind.IO

    def __init__(self, path: str | os.PathLike[str], reason: str = "I/O error") -> None:
        super().__init__(reason, path)
        self.reason = reason


class UnexpectedError(_FileError):
    """Raised for any other failure while handling the file."""

    kind = ErrorKind.UNEXPECTED

    def __init__(self, path: str | os.PathLike[str], reason: str = "Unexpected error") -> None:
        super().__init__(reason, path)
        self.reason = reason
