"""Pytest configuration and shared fixtures for rest-api-builder tests."""

import pytest


@pytest.fixture(autouse=True)
def clear_env(monkeypatch):
    """Auto-cleanup: Clear test-related environment variables before each test.

    This prevents test pollution when testing environment configuration.
    """
    import os

    test_prefixes = ("TEST_", "API_", "CLIENT_")

    for key in list(os.environ.keys()):
        if any(key.startswith(prefix) for prefix in test_prefixes):
            monkeypatch.delenv(key, raising=False)

    yield


@pytest.fixture
def key_token_options():
    """KeyToken auth options with both credentials in the query string."""
    return {
        "type": "KeyToken",
        "add_to": "query",
        "token": {"name": "token", "value": "tokenValue"},
        "secret": {"name": "secret", "value": "secretValue"},
    }
