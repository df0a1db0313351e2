"""Pytest configuration and shared fixtures for courier-client tests."""

import pytest

from courier_client import CourierClient
from courier_client.testing import RecordingTransport


@pytest.fixture(autouse=True)
def clear_env(monkeypatch):
    """Auto-cleanup: Clear Courier and test-related environment variables before each test.

    This prevents a developer's real COURIER_* settings from leaking into
    credential resolution tests.
    """
    import os

    test_prefixes = ("COURIER_", "TEST_")

    for key in list(os.environ.keys()):
        if any(key.startswith(prefix) for prefix in test_prefixes):
            monkeypatch.delenv(key, raising=False)

    yield


@pytest.fixture
def transport():
    """A recording fake transport answering `{}` with 200."""
    return RecordingTransport()


@pytest.fixture
def client(transport):
    """A bearer-authenticated client wired to the recording transport."""
    return CourierClient(auth_token="pk_test_123", transport=transport)
