"""Interactive console walking through each demo operation."""

from __future__ import annotations

import logging
import math
from typing import TYPE_CHECKING, TextIO

from errordemo.arrays import squares
from errordemo.calculator import divide
from errordemo.exceptions import ErrorKind, InvalidArgumentError
from errordemo.mathops import factorial, fibonacci
from errordemo.results import Outcome, attempt
from errordemo.roundtrip import PAYLOAD, process_file

if TYPE_CHECKING:
    from collections.abc import Callable

logger = logging.getLogger(__name__)

BANNER = "=== Error Handling Demo ==="
LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"

ERROR_LABELS = {
    ErrorKind.DOMAIN: "Domain error",
    ErrorKind.DIVISION_BY_ZERO: "Math error",
    ErrorKind.INVALID_ARGUMENT: "Invalid argument",
    ErrorKind.FILE_NOT_FOUND: "File error",
    ErrorKind.IO: "I/O error",
    ErrorKind.UNEXPECTED: "Unexpected error",
}


def format_integer(value: int) -> str:
    """
    Render an integer, summarising it when it is too long to print.

    Python refuses to convert integers past ``sys.get_int_max_str_digits()``
    digits to text, and unbounded Fibonacci numbers reach that limit.
    """
    try:
        return str(value)
    except ValueError:
        digits = int(math.log10(abs(value))) + 1
        return f"<integer with {digits} digits>"


def parse_int(text: str) -> int:
    """Parse console text as an integer."""
    try:
        return int(text.strip())
    except ValueError as exc:
        raise InvalidArgumentError(text, "Expected an integer") from exc


def parse_float(text: str) -> float:
    """Parse console text as a real number."""
    try:
        return float(text.strip())
    except ValueError as exc:
        raise InvalidArgumentError(text, "Expected a number") from exc


class InteractiveShell:
    """
    Prompt-driven walk through the demo operations.

    Each section reads its own input, runs its operation through ``attempt``
    and prints either the result or a message for the error kind. A failure
    in one section never stops the next one.
    """

    def __init__(
        self,
        input_func: Callable[[str], str] | None = None,
        output: TextIO | None = None,
    ) -> None:
        self._input = input_func if input_func is not None else input
        self._output = output

    def _say(self, text: str = "") -> None:
        print(text, file=self._output)

    def _ask(self, prompt: str) -> str:
        try:
            return self._input(prompt)
        except EOFError:
            logger.debug("end of input at prompt %r", prompt)
            return ""

    def _report(self, outcome: Outcome) -> None:
        label = ERROR_LABELS.get(outcome.kind, "Error")
        self._say(f"{label}: {outcome.error}")

    def _ask_number(self, prompt: str, parser: Callable[[str], float]) -> Outcome:
        parsed = attempt(parser, self._ask(prompt))
        if not parsed.ok:
            self._report(parsed)
            self._say("Skipping this section.")
        return parsed

    def run_math_section(self) -> None:
        """Factorial and Fibonacci of one integer."""
        self._say("-- Factorial and Fibonacci --")
        parsed = self._ask_number("Enter a non-negative integer N: ", parse_int)
        if not parsed.ok:
            return
        n = parsed.value

        for name, func in (("Factorial", factorial), ("Fibonacci", fibonacci)):
            outcome = attempt(func, n)
            if outcome.ok:
                self._say(f"{name}({n}) = {format_integer(outcome.value)}")
            else:
                self._report(outcome)

    def run_division_section(self) -> None:
        """Division of two reals."""
        self._say("-- Safe division --")
        dividend = self._ask_number("Enter the dividend: ", parse_float)
        if not dividend.ok:
            return
        divisor = self._ask_number("Enter the divisor: ", parse_float)
        if not divisor.ok:
            return

        outcome = attempt(divide, dividend.value, divisor.value)
        if outcome.ok:
            self._say(f"{dividend.value} / {divisor.value} = {outcome.value}")
        else:
            self._report(outcome)

    def run_array_section(self) -> None:
        """Squares of 0 .. size - 1."""
        self._say("-- Array of squares --")
        parsed = self._ask_number("Enter the array size: ", parse_int)
        if not parsed.ok:
            return

        outcome = attempt(squares, parsed.value)
        if outcome.ok:
            self._say("Squares: " + ", ".join(str(value) for value in outcome.value))
        else:
            self._report(outcome)

    def run_file_section(self) -> None:
        """Write the payload to a file and read it back."""
        self._say("-- File round-trip --")
        path = self._ask("Enter a file path (blank to skip): ").strip()

        outcome = attempt(process_file, path)
        if not outcome.ok:
            self._report(outcome)
        elif outcome.value is None:
            self._say("No path given, file section skipped.")
        else:
            self._say(f"Wrote to {path}:")
            self._say(PAYLOAD.rstrip("\n"))
            self._say("Read back:")
            self._say(outcome.value.rstrip("\n"))

    def run(self) -> None:
        """Run every section in order."""
        self._say(BANNER)
        for section in (
            self.run_math_section,
            self.run_division_section,
            self.run_array_section,
            self.run_file_section,
        ):
            self._say()
            section()
        self._say()
        self._say("Done.")


def main() -> int:
    logging.basicConfig(level=logging.WARNING, format=LOG_FORMAT)
    try:
        InteractiveShell().run()
    except KeyboardInterrupt:
        print()
        return 130
    return 0
