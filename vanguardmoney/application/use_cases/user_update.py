import asyncio

from vanguardmoney.domain.entities.user import User
from vanguardmoney.domain.exceptions import DuplicateEmailError
from vanguardmoney.domain.exceptions import EmailAlreadyExists
from vanguardmoney.domain.ports.repositories.users import UserRepository
from vanguardmoney.domain.ports.security import PasswordHasherPort
from vanguardmoney.domain.schemas.user import UserUpdate


async def user_update(
    user: User,
    user_data: UserUpdate,
    user_repository: UserRepository,
    password_hasher: PasswordHasherPort,
) -> User:
    """Updates an existing user's information.

    This use case handles updating user details, including email, password and
    the active flag. It checks for email uniqueness if the email is being changed
    and hashes the new password only if one is provided.

    Args:
        user: The `User` entity to be updated.
        user_data: The data for the user update.
        user_repository: The repository for user data.
        password_hasher: The password hasher.

    Returns:
        The updated `User` entity.

    Raises:
        EmailAlreadyExists: If the new email is already registered by another user.
    """
    # Check if email is being changed and if it's already taken
    if user_data.email and user_data.email != user.email:
        existing = await user_repository.get_by_email(user_data.email)
        if existing:
            raise EmailAlreadyExists()

    hashed_password = await asyncio.to_thread(password_hasher.hash, user_data.password) if user_data.password else None

    try:
        return await user_repository.update(user.id, user_data, hashed_password)
    except DuplicateEmailError as e:
        raise EmailAlreadyExists() from e
