"""Test harness for unit, integration and E2E tests.

Integration tests assume PostgreSQL is reachable at DATABASE__URL with
the schema created by scripts/init_db.py.
"""

import httpx
import pytest_asyncio

from prep.interface.api.app import create_app
from prep.util.di import Component
from tests.di import build_test_container


def create_env_fixture(unmock: set[Component] | None = None):
    """Factory for creating test environment fixtures.

    Creates a pytest fixture that builds a test container with the
    specified unmocking and yields a request-scoped container for service
    access.

    Args:
        unmock: Components to use real implementations for

    Returns:
        Pytest fixture function that yields AsyncContainer

    Usage:
        # Unit tests - everything mocked
        unit_env = create_env_fixture()

        # Integration tests - real persistence, assumes postgres running
        integration_env = create_env_fixture(unmock={"persistence"})

        @pytest.mark.asyncio
        async def test_sync(integration_env):
            service = await integration_env.get(UserService)
            user = await service.sync_identity(identity)
            assert user.id is not None
    """

    @pytest_asyncio.fixture
    async def _test_environment():
        container = build_test_container(unmock=unmock or set())

        async with container() as request_container:
            yield request_container

        await container.close()

    return _test_environment


def create_client_fixture(unmock: set[Component] | None = None):
    """Factory for creating HTTP client fixtures.

    The app is served from a fresh test container, so the in-memory store
    lives for the duration of one test and is shared by all its requests.

    Args:
        unmock: Components to use real implementations for

    Returns:
        Pytest fixture function that yields (AsyncClient, AsyncContainer)

    Usage:
        api = create_client_fixture()

        @pytest.mark.asyncio
        async def test_health(api):
            client, container = api
            response = await client.get("/health")
            assert response.status_code == 200
    """

    @pytest_asyncio.fixture
    async def _test_client():
        container = build_test_container(unmock=unmock or set())
        app = create_app(container)
        transport = httpx.ASGITransport(app=app)

        async with httpx.AsyncClient(
            transport=transport, base_url="http://testserver"
        ) as client:
            yield client, container

        await container.close()

    return _test_client
