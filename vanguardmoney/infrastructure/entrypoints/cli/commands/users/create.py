from vanguardmoney.application.use_cases.user_register import user_register
from vanguardmoney.domain.schemas.user import UserPublic
from vanguardmoney.infrastructure.entrypoints.cli.dependencies import get_access_token_manager
from vanguardmoney.infrastructure.entrypoints.cli.dependencies import get_db
from vanguardmoney.infrastructure.entrypoints.cli.dependencies import get_password_hasher
from vanguardmoney.infrastructure.entrypoints.cli.dependencies import get_user_repository


async def user_create_logic(
    email: str,
    password: str,
    first_name: str | None = None,
    last_name: str | None = None,
) -> UserPublic:
    async with get_db() as session:
        auth_session = await user_register(
            email=email,
            password=password,
            first_name=first_name,
            last_name=last_name,
            user_repository=get_user_repository(session),
            password_hasher=get_password_hasher(),
            access_token_manager=get_access_token_manager(),
        )

    return auth_session.user
