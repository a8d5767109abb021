"""Pytest configuration and shared fixtures."""

import os
import sys

import pytest
from hypothesis import Verbosity, settings

# Configure Hypothesis profiles
settings.register_profile("ci", max_examples=200, deadline=None)
settings.register_profile("dev", max_examples=50, deadline=None)
settings.register_profile("debug", max_examples=10, verbosity=Verbosity.verbose)

profile = os.environ.get("HYPOTHESIS_PROFILE", "dev")
settings.load_profile(profile)


@pytest.fixture
def target_file(tmp_path):
    """Provide a path inside a fresh temporary directory."""
    return tmp_path / "roundtrip.txt"


@pytest.fixture
def scripted_input():
    """Build an input function that replays the given answers, then hits EOF."""

    def build(*answers: str):
        remaining = iter(answers)

        def fake_input(prompt: str) -> str:
            try:
                return next(remaining)
            except StopIteration:
                raise EOFError from None

        return fake_input

    return build


@pytest.fixture
def known_factorials():
    """Provide reference values for n! at interesting n."""
    return {
        0: 1,
        1: 1,
        2: 2,
        5: 120,
        10: 3628800,
        20: 2432902008176640000,
    }


@pytest.fixture
def int_digit_limit():
    """Enforce a small int-to-text digit limit for the duration of a test."""
    if not hasattr(sys, "set_int_max_str_digits"):
        pytest.skip("interpreter has no int string conversion limit")
    previous = sys.get_int_max_str_digits()
    sys.set_int_max_str_digits(640)
    yield 640
    sys.set_int_max_str_digits(previous)
