from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from sqlalchemy.ext.asyncio import AsyncSession

from vanguardmoney.domain.ports.repositories.users import UserRepository
from vanguardmoney.domain.ports.security import AccessTokenManagerPort
from vanguardmoney.domain.ports.security import PasswordHasherPort
from vanguardmoney.infrastructure.adapters.database.repositories.users import UserSQLRepository
from vanguardmoney.infrastructure.adapters.database.session import session_scope
from vanguardmoney.infrastructure.adapters.security import Argon2PasswordHasher
from vanguardmoney.infrastructure.adapters.security import JwtAccessTokenManager
from vanguardmoney.infrastructure.adapters.security import JwtConfig
from vanguardmoney.infrastructure.config.settings.app import app_settings


def get_password_hasher() -> PasswordHasherPort:
    return Argon2PasswordHasher(
        cost_factor=app_settings.PASSWORD_HASH_COST,
        memory_cost=app_settings.PASSWORD_HASH_MEMORY_COST,
    )


def get_access_token_manager() -> AccessTokenManagerPort:
    return JwtAccessTokenManager(
        JwtConfig(
            secret_key=app_settings.SECRET_KEY,
            expires_in=app_settings.ACCESS_TOKEN_EXPIRES_IN,
            ttl=app_settings.access_token_ttl,
            issuer=app_settings.ACCESS_TOKEN_ISSUER,
            algorithm=app_settings.ACCESS_TOKEN_ALGORITHM,
        )
    )


@asynccontextmanager
async def get_db() -> AsyncGenerator[AsyncSession]:
    async with session_scope() as session:
        yield session


def get_user_repository(session: AsyncSession) -> UserRepository:
    return UserSQLRepository(session)
