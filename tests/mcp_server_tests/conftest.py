"""Pytest configuration for MCP server tests."""

import pytest


# The server handlers are plain coroutines; run them on asyncio only
@pytest.fixture(scope="session")
def anyio_backend():
    return "asyncio"
