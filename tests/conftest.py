"""Pytest configuration for the chronofmt test suite.

Hypothesis profiles (single source of truth for max_examples):
- dev: local runs, 300 examples
- ci: CI runs, 50 examples, derandomized
- verbose: 100 examples with progress output

Profile selection:
- HYPOTHESIS_PROFILE env var -> explicit choice
- CI=true -> "ci"
- otherwise -> "dev"

Tests marked @pytest.mark.fuzz are skipped unless requested with -m fuzz.
"""

import os

import pytest
from hypothesis import Phase, Verbosity, settings

from chronofmt import Instant

# =============================================================================
# HYPOTHESIS PROFILES
# =============================================================================

_PHASES = [Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink]

settings.register_profile("dev", max_examples=300, phases=_PHASES, derandomize=False)

settings.register_profile(
    "ci",
    max_examples=50,
    phases=_PHASES,
    derandomize=True,
    print_blob=True,
)

settings.register_profile(
    "verbose",
    max_examples=100,
    phases=_PHASES,
    derandomize=False,
    verbosity=Verbosity.verbose,
)


def _detect_profile() -> str:
    """Pick the Hypothesis profile for this run."""
    explicit = os.environ.get("HYPOTHESIS_PROFILE")
    if explicit in ("dev", "ci", "verbose"):
        return explicit
    if os.environ.get("CI") == "true":
        return "ci"
    return "dev"


settings.load_profile(_detect_profile())


# =============================================================================
# FUZZ MARKER
# =============================================================================


def pytest_configure(config: pytest.Config) -> None:
    """Register the 'fuzz' marker for long-running property tests."""
    config.addinivalue_line(
        "markers",
        "fuzz: long-running property tests (excluded from normal test runs)",
    )


def pytest_collection_modifyitems(config: pytest.Config, items: list[pytest.Item]) -> None:
    """Skip fuzz-marked tests unless the run selects them with -m fuzz."""
    if "fuzz" in str(config.getoption("-m", default="")):
        return
    skip_fuzz = pytest.mark.skip(reason="Fuzzing test - run with: pytest -m fuzz")
    for item in items:
        if "fuzz" in item.keywords:
            item.add_marker(skip_fuzz)


# =============================================================================
# SHARED FIXTURES
# =============================================================================


@pytest.fixture
def march_11() -> Instant:
    """2010-03-11T00:00:00.000Z, the reference date used across the suite."""
    return Instant.of(2010, 3, 11)


@pytest.fixture
def afternoon() -> Instant:
    """2010-03-11T14:05:09.042Z: every time field non-zero and distinct."""
    return Instant.of(2010, 3, 11, 14, 5, 9, 42)
