"""Shared fixtures for integration tests."""

import os

import pytest
import pytest_asyncio

from prelate import AoE4WorldClient

# Skip all integration tests unless RUN_PRELATE_NETWORK_TESTS=1
pytestmark = pytest.mark.skipif(
    os.environ.get("RUN_PRELATE_NETWORK_TESTS") != "1",
    reason="Requires network access. Set RUN_PRELATE_NETWORK_TESTS=1 to run",
)


@pytest_asyncio.fixture
async def client():
    async with AoE4WorldClient() as client:
        yield client
