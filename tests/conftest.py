"""Shared pytest fixtures and Hypothesis configuration.

This module provides pytest fixtures and configures Hypothesis profiles
for the test suite.
"""

from __future__ import annotations

import pytest
from hypothesis import Verbosity, settings

# Configure Hypothesis settings for the test suite
settings.register_profile("ci", max_examples=200, deadline=None)
settings.register_profile("dev", max_examples=50, deadline=None)
settings.register_profile("debug", max_examples=10, deadline=None, verbosity=Verbosity.verbose)

_CONFIG_ENV_VARS = (
    "RYANDATA_VALIDATION_DEFAULT_PATH",
    "RYANDATA_VALIDATION_LOG_FAILURES",
    "RYANDATA_VALIDATION_ON_INIT",
)


@pytest.fixture(autouse=True)
def clean_validation_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Run every test with the default configuration."""
    for name in _CONFIG_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
