from datetime import timedelta
from unittest import mock

import pytest

from vanguardmoney.domain.entities.user import User
from vanguardmoney.domain.ports.repositories.transactions import TransactionRepository
from vanguardmoney.domain.ports.repositories.users import UserRepository
from vanguardmoney.domain.ports.security import AccessTokenManagerPort
from vanguardmoney.domain.ports.security import PasswordHasherPort
from vanguardmoney.domain.schemas.user import UserPublic
from vanguardmoney.infrastructure.adapters.security import Argon2PasswordHasher
from vanguardmoney.infrastructure.adapters.security import JwtAccessTokenManager
from vanguardmoney.infrastructure.adapters.security import JwtConfig

from tests.unit.factories.entities.user import UserFactory
from tests.unit.factories.schemas.user import UserPublicFactory
from tests.unit.fakes.user_repository import FakeUserRepository

# --- Security Mocks ---


@pytest.fixture
def mock_password_hasher() -> mock.Mock:
    return mock.Mock(spec=PasswordHasherPort)


@pytest.fixture
def mock_access_token_manager() -> mock.Mock:
    return mock.Mock(spec=AccessTokenManagerPort, expires_in="24h")


# --- Security impl ---


@pytest.fixture
def password_hasher() -> PasswordHasherPort:
    # Lowest costs: the hashing itself is not under test.
    return Argon2PasswordHasher(cost_factor=1, memory_cost=1024)


@pytest.fixture
def jwt_config(request: pytest.FixtureRequest) -> JwtConfig:
    params = {
        "secret_key": "unit-test-secret-key-with-at-least-32-chars",
        "expires_in": "1h",
        "ttl": timedelta(hours=1),
        **getattr(request, "param", {}),
    }
    return JwtConfig(**params)


@pytest.fixture
def access_token_manager(jwt_config: JwtConfig) -> AccessTokenManagerPort:
    return JwtAccessTokenManager(jwt_config)


# --- Repository Mocks ---


@pytest.fixture
def mock_user_repository() -> mock.AsyncMock:
    return mock.AsyncMock(spec=UserRepository)


@pytest.fixture
def mock_transaction_repository() -> mock.AsyncMock:
    return mock.AsyncMock(spec=TransactionRepository)


@pytest.fixture
def fake_user_repository() -> FakeUserRepository:
    return FakeUserRepository()


# --- Entity Mocks ---


@pytest.fixture
def user(request: pytest.FixtureRequest) -> User:
    return UserFactory.build(**getattr(request, "param", {}))


@pytest.fixture
def user_public(request: pytest.FixtureRequest) -> UserPublic:
    return UserPublicFactory.build(**getattr(request, "param", {}))
