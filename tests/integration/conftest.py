from collections.abc import AsyncGenerator

from sqlalchemy import make_url
from sqlalchemy.ext.asyncio import AsyncEngine
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.ext.asyncio import create_async_engine

import pytest

from vanguardmoney.domain.entities.transaction import Transaction
from vanguardmoney.domain.entities.user import User
from vanguardmoney.domain.ports.repositories.transactions import TransactionRepository
from vanguardmoney.domain.ports.repositories.users import UserRepository
from vanguardmoney.domain.ports.security import AccessTokenManagerPort
from vanguardmoney.domain.ports.security import PasswordHasherPort
from vanguardmoney.domain.schemas.user import UserRegister
from vanguardmoney.infrastructure.adapters.database.models import Base
from vanguardmoney.infrastructure.adapters.database.repositories.transactions import TransactionSQLRepository
from vanguardmoney.infrastructure.adapters.database.repositories.users import UserSQLRepository
from vanguardmoney.infrastructure.adapters.database.session import async_session_factory
from vanguardmoney.infrastructure.config.settings.database import database_settings
from vanguardmoney.infrastructure.entrypoints.api import dependencies

from tests.integration.factories.base import BaseModelFactory
from tests.integration.factories.transactions import TransactionModelFactory
from tests.integration.factories.users import UserModelFactory
from tests.unit.factories.schemas.user import UserRegisterFactory


@pytest.fixture(scope="session")
async def async_engine() -> AsyncGenerator[AsyncEngine]:
    assert database_settings.URI is not None
    url = make_url(database_settings.URI)
    async_engine = create_async_engine(url=url)

    async with async_engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
        await conn.run_sync(Base.metadata.create_all)

    yield async_engine

    async with async_engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)

    await async_engine.dispose()


@pytest.fixture(scope="function")
async def async_session_trans(async_engine: AsyncEngine) -> AsyncGenerator[AsyncSession]:
    """
    Provides an async session that really commits, then cleans up every table.

    Use this fixture when you need to test actual database commits, e.g. when
    several sessions must see each other's data.
    """
    async_session_factory.configure(bind=async_engine)

    async with async_session_factory() as async_session_db:
        BaseModelFactory.__async_session__ = async_session_db

        yield async_session_db

        await async_session_db.close()

        async with async_engine.begin() as conn:
            for table in reversed(Base.metadata.sorted_tables):
                await conn.execute(table.delete())


@pytest.fixture(scope="function", autouse=True)
async def async_session_db(
    async_engine: AsyncEngine,
    request: pytest.FixtureRequest,
) -> AsyncGenerator[AsyncSession | None]:
    """
    Provides an async session wrapped in a transaction that rolls back after the test.

    This is the default fixture (autouse=True). It is faster than cleaning up the
    tables because data is never permanently written.
    """
    # Check if the conflicting fixture is requested for this test
    if "async_session_trans" in request.fixturenames:
        yield None
        return

    async with async_engine.connect() as conn:
        transaction = await conn.begin()

        async with async_session_factory(bind=conn) as async_session:
            BaseModelFactory.__async_session__ = async_session

            # When the API or CLI calls 'await session.commit()', only send the SQL:
            # the data is visible to the test, and the rollback below still works.
            async_session.commit = async_session.flush  # type: ignore[method-assign]

            yield async_session

        await transaction.rollback()


# --- Security impl ---


@pytest.fixture
def password_hasher() -> PasswordHasherPort:
    return get_password_hasher()


@pytest.fixture
def access_token_manager() -> AccessTokenManagerPort:
    return get_access_token_manager()


# --- Repository impl ---


@pytest.fixture
def user_repository(async_session_db: AsyncSession) -> UserRepository:
    return UserSQLRepository(async_session_db)


@pytest.fixture
def transaction_repository(async_session_db: AsyncSession) -> TransactionRepository:
    return TransactionSQLRepository(async_session_db)


# --- Schema factories ---


@pytest.fixture
def user_register(request: pytest.FixtureRequest) -> UserRegister:
    return UserRegisterFactory.build(**getattr(request, "param", {}))


# --- Models DB factories ---


@pytest.fixture
async def user(request: pytest.FixtureRequest) -> User:
    user_db = await UserModelFactory.create_async(**getattr(request, "param", {}))
    return user_db.to_entity()


@pytest.fixture
async def transaction(request: pytest.FixtureRequest, user: User) -> Transaction:
    params = getattr(request, "param", {})
    params.setdefault("user_id", user.id)

    transaction_db = await TransactionModelFactory.create_async(**params)
    return transaction_db.to_entity()


# --- Security impl helper ---


def get_password_hasher() -> PasswordHasherPort:
    return dependencies.get_password_hasher()


def get_access_token_manager() -> AccessTokenManagerPort:
    return dependencies.get_access_token_manager()
