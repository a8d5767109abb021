"""Write a fixed payload to a file and read it back."""

from __future__ import annotations

import builtins
import logging
import os

from errordemo.exceptions import (
    FileNotFoundError,
    InvalidArgumentError,
    IOError,
    UnexpectedError,
)

logger = logging.getLogger(__name__)

PAYLOAD = "Hello, this is a test file.\nIt has two lines.\n"
ENCODING = "utf-8"


def _write(path: str) -> None:
    with open(path, "w", encoding=ENCODING) as handle:
        handle.write(PAYLOAD)


def _read(path: str) -> str:
    with open(path, encoding=ENCODING) as handle:
        return handle.read()


def process_file(path: str | os.PathLike[str] | None) -> str | None:
    """
    Write ``PAYLOAD`` to path, overwriting it, then read the file back.

    A missing or blank path is skipped: nothing is written and ``None`` is returned.
    Both handles are scoped to ``with`` blocks and are closed on every
    exit path.

    Args:
        path: Destination file

    Returns:
        The content read back, or None for a blank path

    Raises:
        InvalidArgumentError: If path is not a string or path-like object
        FileNotFoundError: If the path or its directory does not exist
        IOError: For any other OS-level access failure
        UnexpectedError: For anything else
    """
    if path is None:
        logger.debug("no path given, skipping file round-trip")
        return None

    try:
        target = os.fspath(path)
    except TypeError as exc:
        raise InvalidArgumentError(path, "Expected a file path") from exc

    if not isinstance(target, str):
        raise InvalidArgumentError(path, "Expected a text file path")

    if not target.strip():
        logger.debug("blank path, skipping file round-trip")
        return None

    try:
        _write(target)
        logger.debug("wrote %d characters to %s", len(PAYLOAD), target)
        content = _read(target)
    except builtins.FileNotFoundError as exc:
        raise FileNotFoundError(target) from exc
    except OSError as exc:
        raise IOError(target, exc.strerror or str(exc)) from exc
    except Exception as exc:
        raise UnexpectedError(target, str(exc) or type(exc).__name__) from exc

    logger.debug("read %d characters back from %s", len(content), target)
    return content
