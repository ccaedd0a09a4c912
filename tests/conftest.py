"""Pytest configuration and shared fixtures for rql-client tests."""

import pytest


@pytest.fixture(autouse=True)
def clear_env(monkeypatch):
    """Auto-cleanup: Clear test-related environment variables before each test.

    This prevents test pollution when testing settings resolution.
    """
    import os

    test_prefixes = ("TEST_", "API_", "RQL_CLIENT_")

    for key in list(os.environ.keys()):
        if any(key.startswith(prefix) for prefix in test_prefixes):
            monkeypatch.delenv(key, raising=False)

    yield


@pytest.fixture
def warnings_sink():
    """Collects diagnostics passed to an ``on_warning`` callback."""
    messages: list[str] = []
    return messages
