import logging
from collections.abc import AsyncGenerator

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials
from fastapi.security import HTTPBearer

from sqlalchemy.ext.asyncio import AsyncSession

from vanguardmoney.application.use_cases.token_verify import token_verify
from vanguardmoney.domain.exceptions import TokenMissing
from vanguardmoney.domain.ports.repositories.transactions import TransactionRepository
from vanguardmoney.domain.ports.repositories.users import UserRepository
from vanguardmoney.domain.ports.security import AccessTokenManagerPort
from vanguardmoney.domain.ports.security import PasswordHasherPort
from vanguardmoney.domain.schemas.auth import TokenVerification
from vanguardmoney.domain.schemas.user import UserPublic
from vanguardmoney.infrastructure.adapters.database.repositories.transactions import TransactionSQLRepository
from vanguardmoney.infrastructure.adapters.database.repositories.users import UserSQLRepository
from vanguardmoney.infrastructure.adapters.database.session import session_scope
from vanguardmoney.infrastructure.adapters.security import Argon2PasswordHasher
from vanguardmoney.infrastructure.adapters.security import JwtAccessTokenManager
from vanguardmoney.infrastructure.adapters.security import JwtConfig
from vanguardmoney.infrastructure.config.settings.app import app_settings

bearer_scheme = HTTPBearer(auto_error=False)


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


async def get_db() -> AsyncGenerator[AsyncSession]:  # pragma: no cover
    async with session_scope() as session:
        yield session


def get_user_repository(session: AsyncSession = Depends(get_db)) -> UserRepository:
    return UserSQLRepository(session)


def get_transaction_repository(session: AsyncSession = Depends(get_db)) -> TransactionRepository:
    return TransactionSQLRepository(session)


def get_bearer_token(credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme)) -> str:
    logger = logging.getLogger(f"{__name__}.get_bearer_token")

    if credentials is None or not credentials.credentials:
        logger.debug("No bearer token provided")
        raise TokenMissing()

    return credentials.credentials


async def get_token_verification(
    token: str = Depends(get_bearer_token),
    user_repository: UserRepository = Depends(get_user_repository),
    access_token_manager: AccessTokenManagerPort = Depends(get_access_token_manager),
) -> TokenVerification:
    return await token_verify(
        token=token,
        user_repository=user_repository,
        access_token_manager=access_token_manager,
    )


async def get_current_user(verification: TokenVerification = Depends(get_token_verification)) -> UserPublic:
    return verification.user
