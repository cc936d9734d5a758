"""Shared pytest fixtures."""

from unittest.mock import MagicMock

import pytest

from phrasebook.logging import configure_logging

LOCALE_ENVIRONMENT_VARIABLES = ("LANGUAGE", "LC_ALL", "LC_MESSAGES", "LANG")


@pytest.fixture
def clean_locale_environment(monkeypatch):
    """Remove locale variables from the process environment."""
    for variable in LOCALE_ENVIRONMENT_VARIABLES:
        monkeypatch.delenv(variable, raising=False)


@pytest.fixture
def warn_sink():
    """Mock warn sink collecting missing-key warnings."""
    return MagicMock()


@pytest.fixture(scope="session", autouse=True)
def quiet_logging():
    """Keep phrasebook log events out of the test output."""
    configure_logging()
