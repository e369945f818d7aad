"""Shared pytest setup for the ParsecEngine suite.

Hypothesis profiles:
    dev      200 examples, random seed (default for local runs)
    ci       50 examples, derandomized so failures reproduce across runs
    verbose  dev with per-example output, for debugging a shrink

Choose one with HYPOTHESIS_PROFILE=<name>; CI=true selects "ci".

Randomly composed parsers (tests/strategies/parsers.py) nest eventually()
inside times() and friends, and eventually() is quadratic. Per-example
timing is therefore noisy, so every profile runs without a deadline.

Tests marked @pytest.mark.fuzz are skipped unless selected with -m fuzz.
"""

import os

import pytest
from hypothesis import HealthCheck, Verbosity, settings

_PROFILES = ("dev", "ci", "verbose")

settings.register_profile(
    "dev",
    max_examples=200,
    deadline=None,
    suppress_health_check=[HealthCheck.too_slow],
)
settings.register_profile(
    "ci",
    parent=settings.get_profile("dev"),
    max_examples=50,
    derandomize=True,
    print_blob=True,
)
settings.register_profile(
    "verbose",
    parent=settings.get_profile("dev"),
    verbosity=Verbosity.verbose,
)


def _selected_profile() -> str:
    requested = os.environ.get("HYPOTHESIS_PROFILE")
    if requested in _PROFILES:
        return requested
    return "ci" if os.environ.get("CI") == "true" else "dev"


settings.load_profile(_selected_profile())


def pytest_configure(config: pytest.Config) -> None:
    config.addinivalue_line(
        "markers",
        "fuzz: long-running property tests over large random grammars (pytest -m fuzz)",
    )


def pytest_collection_modifyitems(
    config: pytest.Config, items: list[pytest.Item]
) -> None:
    if "fuzz" in str(config.getoption("-m", default="")):
        return

    skip_fuzz = pytest.mark.skip(reason="fuzz test; select with: pytest -m fuzz")
    for item in items:
        if "fuzz" in item.keywords:
            item.add_marker(skip_fuzz)
