"""Shared fixtures for the numwords test suite."""

from __future__ import annotations

import pytest

from numwords.log import reset_logging
from numwords.registry import get_default_registry


@pytest.fixture(autouse=True)
def clean_logging():
    """Undo handlers installed by configure_logging or the CLI."""
    yield
    reset_logging()


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Keep NUMWORDS_* variables from the developer shell out of tests."""
    import os

    for key in list(os.environ):
        if key.startswith("NUMWORDS_"):
            monkeypatch.delenv(key, raising=False)
    yield


@pytest.fixture(scope="session")
def registry():
    """The default registry of built-in locales."""
    return get_default_registry()


@pytest.fixture(scope="session")
def all_locales(registry):
    return registry.codes
