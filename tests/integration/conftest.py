"""Shared fixtures for integration tests."""

import os

import pytest

from bonfire.graphql import ClientConfig


@pytest.fixture
def live_config() -> ClientConfig:
    """Config for the live endpoint; skips unless RUN_BONFIRE_NETWORK_TESTS=1."""
    if os.environ.get("RUN_BONFIRE_NETWORK_TESTS") != "1":
        pytest.skip("Requires network access. Set RUN_BONFIRE_NETWORK_TESTS=1 to run")
    return ClientConfig.from_env()
