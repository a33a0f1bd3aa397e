import asyncio
import logging

from pydantic import ValidationError

from vanguardmoney.domain.exceptions import CredentialStoreUnavailable
from vanguardmoney.domain.exceptions import DomainError
from vanguardmoney.domain.exceptions import DuplicateEmailError
from vanguardmoney.domain.exceptions import EmailAlreadyExists
from vanguardmoney.domain.exceptions import RegistrationFailed
from vanguardmoney.domain.exceptions import UserValidationError
from vanguardmoney.domain.ports.repositories.users import UserRepository
from vanguardmoney.domain.ports.security import AccessTokenManagerPort
from vanguardmoney.domain.ports.security import PasswordHasherPort
from vanguardmoney.domain.schemas.auth import AuthSession
from vanguardmoney.domain.schemas.base import to_field_errors
from vanguardmoney.domain.schemas.user import UserPublic
from vanguardmoney.domain.schemas.user import UserRegister
from vanguardmoney.domain.schemas.user import normalize_email

logger = logging.getLogger(__name__)


async def user_register(
    email: str,
    password: str,
    user_repository: UserRepository,
    password_hasher: PasswordHasherPort,
    access_token_manager: AccessTokenManagerPort,
    first_name: str | None = None,
    last_name: str | None = None,
) -> AuthSession:
    """Registers a new user and opens a session for them.

    The email is normalized and checked for uniqueness before the fields are
    validated. The password is hashed in a worker thread before the user is
    persisted, then an access token is issued for the new user.

    Args:
        email: The raw email address.
        password: The plain text password.
        user_repository: The credential store.
        password_hasher: The password hasher.
        access_token_manager: The access token issuer.
        first_name: An optional first name.
        last_name: An optional last name.

    Returns:
        The safe projection of the new user along with its access token.

    Raises:
        EmailAlreadyExists: If the email is already registered, including when a
            concurrent registration wins the race at the store.
        UserValidationError: If any field is invalid; every violation is listed.
        RegistrationFailed: On any unexpected failure.
    """
    try:
        normalized_email = normalize_email(email)

        if await user_repository.get_by_email(normalized_email):
            raise EmailAlreadyExists()

        try:
            user_data = UserRegister(
                email=normalized_email,
                password=password,
                first_name=first_name,
                last_name=last_name,
            )
        except ValidationError as e:
            raise UserValidationError(details=to_field_errors(e)) from e

        hashed_password = await asyncio.to_thread(password_hasher.hash, user_data.password)

        try:
            user = await user_repository.create(user_data, hashed_password=hashed_password)
        except DuplicateEmailError as e:
            raise EmailAlreadyExists() from e

        access_token = access_token_manager.issue(user.id)
    except (DomainError, CredentialStoreUnavailable):
        raise
    except Exception as e:
        logger.exception("Registration failed")
        raise RegistrationFailed() from e

    logger.info(f"User {user.id} registered")

    return AuthSession(
        user=UserPublic.model_validate(user),
        access_token=access_token,
        expires_in=access_token_manager.expires_in,
    )
