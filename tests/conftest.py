"""Shared pytest setup for numsniff.

Hypothesis profile, chosen once at import:
    HYPOTHESIS_PROFILE=dev|ci|verbose   explicit choice
    CI=true                             "ci" (few examples, derandomized)
    otherwise                           "dev"

@pytest.mark.fuzz tests are skipped unless selected with `pytest -m fuzz`.
"""

import logging
import os
from collections.abc import Iterator

import pytest
from hypothesis import Phase, Verbosity, settings

_PHASES = (Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink)

_PROFILES: dict[str, dict[str, object]] = {
    "dev": {"max_examples": 300},
    "ci": {"max_examples": 50, "derandomize": True, "print_blob": True},
    "verbose": {"max_examples": 100, "verbosity": Verbosity.verbose},
}

for _name, _options in _PROFILES.items():
    settings.register_profile(_name, phases=_PHASES, **_options)  # type: ignore[arg-type]


def _selected_profile() -> str:
    requested = os.environ.get("HYPOTHESIS_PROFILE", "")
    if requested in _PROFILES:
        return requested
    return "ci" if os.environ.get("CI") == "true" else "dev"


settings.load_profile(_selected_profile())


def pytest_configure(config: pytest.Config) -> None:
    config.addinivalue_line(
        "markers",
        "fuzz: long-running property tests, run with: pytest -m fuzz",
    )


def pytest_collection_modifyitems(config: pytest.Config, items: list[pytest.Item]) -> None:
    """Skip fuzz tests unless the -m expression mentions them."""
    if "fuzz" in str(config.getoption("-m", default="")):
        return
    skip = pytest.mark.skip(reason="fuzz test; run with: pytest -m fuzz")
    for item in items:
        if "fuzz" in item.keywords:
            item.add_marker(skip)


@pytest.fixture
def numsniff_debug(caplog: pytest.LogCaptureFixture) -> Iterator[pytest.LogCaptureFixture]:
    """caplog capturing DEBUG records from every numsniff logger."""
    with caplog.at_level(logging.DEBUG, logger="numsniff"):
        yield caplog
