"""Shared fixtures for the jobhub tests."""

import time

import pytest


@pytest.fixture
def pacific_time(monkeypatch):
    """Run the test with America/Los_Angeles as the local zone."""
    if not hasattr(time, "tzset"):
        pytest.skip("time.tzset is not available on this platform")
    monkeypatch.setenv("TZ", "America/Los_Angeles")
    time.tzset()
    yield
    monkeypatch.undo()
    time.tzset()
