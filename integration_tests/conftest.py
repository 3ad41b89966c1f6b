"""Pytest configuration for integration tests."""

import pytest

from forge_levels.config import get_settings


def pytest_collection_modifyitems(items):
    """Mark everything under integration_tests/ as an integration test."""
    for item in items:
        if "integration_tests" in str(item.fspath):
            item.add_marker(pytest.mark.integration)


@pytest.fixture(autouse=True)
def fresh_settings(monkeypatch):
    """Run each pipeline against default settings."""
    monkeypatch.delenv("FORGE_LEVELS_THRESHOLDS_FILE", raising=False)
    monkeypatch.delenv("FORGE_LEVELS_DEFAULT_UNIT", raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
