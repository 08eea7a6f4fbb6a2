"""Pytest configuration and fixtures."""
import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport

from ecolife.main import app
from ecolife.state import InMemoryState, state


@pytest_asyncio.fixture
async def app_client():
    """
    Create a test client over freshly seeded in-memory state.

    This fixture:
    - Re-seeds the shared state
    - Yields an async HTTP client for testing
    - Clears dependency overrides and re-seeds again afterwards
    """
    state.reset()

    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test"
    ) as client:
        yield client

    app.dependency_overrides.clear()
    state.reset()


@pytest.fixture
def fresh_state():
    """A standalone seeded state for service tests."""
    return InMemoryState()
