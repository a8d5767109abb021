"""
Console demo of input validation and error handling.

This package pairs small operations with a strict error taxonomy:
- Integer sequences with domain checks (factorial, Fibonacci)
- Division with zero protection
- Array generation with size checks
- A file write/read round-trip with scoped handles
"""

from errordemo.arrays import squares
from errordemo.calculator import divide
from errordemo.exceptions import (
    DemoError,
    DivisionByZeroError,
    DomainError,
    ErrorKind,
    FileNotFoundError,
    InvalidArgumentError,
    IOError,
    UnexpectedError,
)
from errordemo.mathops import MAX_FACTORIAL_INPUT, factorial, fibonacci
from errordemo.results import Outcome, attempt
from errordemo.roundtrip import PAYLOAD, process_file

__all__ = [
    "MAX_FACTORIAL_INPUT",
    "PAYLOAD",
    "DemoError",
    "DivisionByZeroError",
    "DomainError",
    "ErrorKind",
    "FileNotFoundError",
    "IOError",
    "InvalidArgumentError",
    "Outcome",
    "UnexpectedError",
    "attempt",
    "divide",
    "factorial",
    "fibonacci",
    "process_file",
    "squares",
]

__version__ = "0.1.0"
