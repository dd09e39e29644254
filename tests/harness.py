"""Test harness for unit, integration and E2E tests.

Integration tests assume PostgreSQL is reachable at ``DATABASE__URL`` with
migrations applied.
"""

import asyncio

import pytest_asyncio
from dishka import AsyncContainer

from masacarri.domain.service import UserService
from masacarri.domain.value import Username
from masacarri.util.di import Component
from tests.di import build_test_container


def create_env_fixture(unmock: set[Component] | None = None):
    """Factory for creating test environment fixtures.

    Creates a pytest fixture that:
    - Builds a test container with specified unmocking
    - Yields request-scoped container for service access
    - Closes the container afterwards

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
        async def test_list_comments(unit_env):
            service = await unit_env.get(CommentService)
            ...
    """

    @pytest_asyncio.fixture
    async def _test_environment():
        container = build_test_container(unmock=unmock or set())

        async with container() as request_container:
            yield request_container

        await container.close()

    return _test_environment


def with_client_address(app, host: str = "127.0.0.1"):
    """Wrap an ASGI app so every HTTP request comes from ``host``.

    The test client reports its peer as ``testclient``, which is not an IP
    address and would be rejected as a comment submitter.
    """

    async def asgi(scope, receive, send):
        if scope["type"] == "http":
            scope = {**scope, "client": (host, 50000)}
        await app(scope, receive, send)

    return asgi


def seed_user(container: AsyncContainer, username: str, password: str) -> None:
    """Create an account through the container, outside any request."""

    async def _seed():
        async with container() as request_container:
            user_service = await request_container.get(UserService)
            await user_service.create_user(Username(username), password)

    asyncio.run(_seed())
