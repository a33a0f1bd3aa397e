from vanguardmoney.application.use_cases.user_update import user_update
from vanguardmoney.domain.entities.user import User
from vanguardmoney.domain.exceptions import UserNotFound
from vanguardmoney.domain.schemas.user import UserUpdate
from vanguardmoney.domain.schemas.user import normalize_email
from vanguardmoney.infrastructure.entrypoints.cli.dependencies import get_db
from vanguardmoney.infrastructure.entrypoints.cli.dependencies import get_password_hasher
from vanguardmoney.infrastructure.entrypoints.cli.dependencies import get_user_repository


async def user_update_logic(email: str, user_data: UserUpdate) -> User:
    async with get_db() as session:
        user_repository = get_user_repository(session)

        user = await user_repository.get_by_email(normalize_email(email))
        if not user:
            raise UserNotFound()

        return await user_update(
            user=user,
            user_data=user_data,
            user_repository=user_repository,
            password_hasher=get_password_hasher(),
        )
