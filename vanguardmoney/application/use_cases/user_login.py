import asyncio
import logging
from datetime import UTC
from datetime import datetime

from vanguardmoney.domain.exceptions import CredentialStoreUnavailable
from vanguardmoney.domain.exceptions import DomainError
from vanguardmoney.domain.exceptions import InvalidCredentials
from vanguardmoney.domain.exceptions import LoginFailed
from vanguardmoney.domain.exceptions import UserInactive
from vanguardmoney.domain.ports.repositories.users import UserRepository
from vanguardmoney.domain.ports.security import AccessTokenManagerPort
from vanguardmoney.domain.ports.security import PasswordHasherPort
from vanguardmoney.domain.schemas.auth import AuthSession
from vanguardmoney.domain.schemas.user import UserPublic
from vanguardmoney.domain.schemas.user import normalize_email

logger = logging.getLogger(__name__)


async def user_login(
    email: str,
    password: str,
    user_repository: UserRepository,
    password_hasher: PasswordHasherPort,
    access_token_manager: AccessTokenManagerPort,
) -> AuthSession:
    """Authenticates a user based on their email and password.

    An unknown email and a wrong password are reported with the same error, so
    callers cannot tell whether an account exists. Recording the login time is
    best-effort: a failure there is logged and the login still succeeds.

    Args:
        email: The raw email address.
        password: The plain text password.
        user_repository: The credential store.
        password_hasher: The password hasher.
        access_token_manager: The access token issuer.

    Returns:
        The safe projection of the user along with a new access token.

    Raises:
        InvalidCredentials: If the email is unknown or the password does not match.
        UserInactive: If the user account is not active.
        LoginFailed: On any unexpected failure.
    """
    try:
        user = await user_repository.get_by_email(normalize_email(email))
        if not user:
            # Unknown emails go through the same Argon2 work as a password check.
            await asyncio.to_thread(password_hasher.hash, password)
            raise InvalidCredentials()

        if not user.is_active:
            raise UserInactive()

        if not await asyncio.to_thread(password_hasher.verify, password, user.hashed_password):
            raise InvalidCredentials()

        logged_in_at = datetime.now(UTC)
        try:
            await user_repository.update_last_login(user.id, logged_in_at)
        except Exception:
            logger.warning(f"Unable to record the last login of user {user.id}", exc_info=True)
            user_public = UserPublic.model_validate(user)
        else:
            user_public = UserPublic.model_validate(user).model_copy(update={"last_login_at": logged_in_at})

        access_token = access_token_manager.issue(user.id)
    except (DomainError, CredentialStoreUnavailable):
        raise
    except Exception as e:
        logger.exception("Login failed")
        raise LoginFailed() from e

    return AuthSession(
        user=user_public,
        access_token=access_token,
        expires_in=access_token_manager.expires_in,
    )
