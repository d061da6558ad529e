"""Shared pytest setup for typedl10n.

Hypothesis profiles (select with HYPOTHESIS_PROFILE, CI=true picks "ci"):
    dev       300 examples, random seeds
    ci        100 examples, fixed seeds, failure blobs printed
    thorough  2000 examples for long lexer and builder runs
    verbose   100 examples with per-example output

Tests marked fuzz only run when the marker expression names them:
    pytest -m fuzz
"""

from __future__ import annotations

import os
from pathlib import Path

import pytest
from hypothesis import HealthCheck, Verbosity, settings

_PROFILES: dict[str, dict[str, object]] = {
    "dev": {"max_examples": 300},
    "ci": {"max_examples": 100, "derandomize": True, "print_blob": True},
    "thorough": {
        "max_examples": 2000,
        "deadline": None,
        "suppress_health_check": [HealthCheck.too_slow],
    },
    "verbose": {"max_examples": 100, "verbosity": Verbosity.verbose},
}

for _name, _options in _PROFILES.items():
    settings.register_profile(_name, **_options)


def _profile_name() -> str:
    requested = os.environ.get("HYPOTHESIS_PROFILE", "")
    if requested in _PROFILES:
        return requested
    return "ci" if os.environ.get("CI") == "true" else "dev"


settings.load_profile(_profile_name())


# =============================================================================
# FUZZ SELECTION
# =============================================================================


def pytest_collection_modifyitems(config: pytest.Config, items: list[pytest.Item]) -> None:
    """Leave fuzz tests out of runs whose -m expression does not mention them."""
    if "fuzz" in (config.option.markexpr or ""):
        return

    skip = pytest.mark.skip(reason="long property run; select with -m fuzz")
    for item in items:
        if item.get_closest_marker("fuzz") is not None:
            item.add_marker(skip)


# =============================================================================
# FIXTURES
# =============================================================================


@pytest.fixture
def write_toml(tmp_path: Path):
    """Write a translation file into tmp_path and return the directory."""

    def _write(filename: str, content: str) -> Path:
        (tmp_path / filename).write_text(content, encoding="utf-8")
        return tmp_path

    return _write
