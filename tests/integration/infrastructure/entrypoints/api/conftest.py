from collections.abc import AsyncGenerator
from collections.abc import Iterator
from unittest import mock
from unittest.mock import AsyncMock

from httpx import ASGITransport
from httpx import AsyncClient

from sqlalchemy.ext.asyncio import AsyncSession

import pytest

from vanguardmoney.domain.entities.user import User
from vanguardmoney.domain.ports.security import AccessTokenManagerPort
from vanguardmoney.infrastructure.entrypoints.api.dependencies import get_access_token_manager
from vanguardmoney.infrastructure.entrypoints.api.dependencies import get_db
from vanguardmoney.infrastructure.entrypoints.api.dependencies import get_password_hasher
from vanguardmoney.infrastructure.entrypoints.api.main import app


@pytest.fixture(name="mock_api_logger")
def block_api_logging_reconfiguration() -> Iterator[mock.Mock]:
    """Prevents FastAPI lifespan from overwriting test logging config."""
    with mock.patch("vanguardmoney.infrastructure.entrypoints.api.main.configure_loggers") as patched:
        yield patched


@pytest.fixture
async def mock_db_session() -> AsyncMock:
    return AsyncMock(spec=AsyncSession)


@pytest.fixture
def access_token(access_token_manager: AccessTokenManagerPort, user: User) -> str:
    return access_token_manager.issue(user.id)


@pytest.fixture
async def async_client(
    mock_api_logger: None,
    async_session_db: AsyncSession,
    request: pytest.FixtureRequest,
) -> AsyncGenerator[AsyncClient]:
    """
    AsyncClient with optional authentication.

    IMPORTANT: Place fixtures dependencies first:
        async def test_XXX(user, access_token, async_client):
    NOT: async_client BEFORE:
        async def test_XXX(async_client, user, access_token):

    Usage:
        # Anonymous
        async def test_public(async_client): ...

        # Authenticated (note the order!)
        async def test_protected(access_token, async_client): ...

        # Broken database (note the order!)
        async def test_broken(mock_db_session, async_client): ...
    """

    # Override get_db: use mock_db if present, otherwise use test session
    if "mock_db_session" in request.fixturenames:
        mock_db_session = request.getfixturevalue("mock_db_session")

        async def override_get_db():
            yield mock_db_session

        app.dependency_overrides[get_db] = override_get_db
    else:

        async def override_get_db():
            yield async_session_db

        app.dependency_overrides[get_db] = override_get_db

    # Override security password hasher ports
    if "password_hasher" in request.fixturenames:
        password_hasher_fixture = request.getfixturevalue("password_hasher")
        app.dependency_overrides[get_password_hasher] = lambda: password_hasher_fixture

    # Override security access token manager ports
    if "access_token_manager" in request.fixturenames:
        access_token_manager_fixture = request.getfixturevalue("access_token_manager")
        app.dependency_overrides[get_access_token_manager] = lambda: access_token_manager_fixture

    # Check if access_token fixture is available in test
    headers: dict[str, str] = {}
    if "access_token" in request.fixturenames:
        access_token = request.getfixturevalue("access_token")
        headers["Authorization"] = f"Bearer {access_token}"

    async with AsyncClient(
        transport=ASGITransport(app=app, raise_app_exceptions=False),
        base_url="http://test",
        headers=headers,
    ) as client:
        yield client

    # Clean up
    app.dependency_overrides.clear()
