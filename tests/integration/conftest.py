"""Shared fixtures for integration tests."""

import os

import pytest

# Skip all integration tests unless RUN_SERVICEWORKER_NETWORK_TESTS=1
pytestmark = pytest.mark.skipif(
    os.environ.get("RUN_SERVICEWORKER_NETWORK_TESTS") != "1",
    reason="Requires network access. Set RUN_SERVICEWORKER_NETWORK_TESTS=1 to run",
)

HTTPBIN_URL = os.environ.get("SERVICEWORKER_HTTPBIN_URL", "https://httpbin.org")


@pytest.fixture
def httpbin_url() -> str:
    return HTTPBIN_URL.rstrip("/")
