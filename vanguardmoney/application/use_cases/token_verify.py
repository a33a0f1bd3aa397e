import asyncio
import logging

from vanguardmoney.domain.exceptions import CredentialStoreUnavailable
from vanguardmoney.domain.exceptions import DomainError
from vanguardmoney.domain.exceptions import InvalidToken
from vanguardmoney.domain.exceptions import TokenVerificationFailed
from vanguardmoney.domain.ports.repositories.users import UserRepository
from vanguardmoney.domain.ports.security import AccessTokenManagerPort
from vanguardmoney.domain.schemas.auth import TokenVerification
from vanguardmoney.domain.schemas.user import UserPublic

logger = logging.getLogger(__name__)


async def token_verify(
    token: str,
    user_repository: UserRepository,
    access_token_manager: AccessTokenManagerPort,
) -> TokenVerification:
    """Verifies an access token against the current state of the credential store.

    A token referring to a missing or inactive user is reported as invalid,
    without telling which one.

    Args:
        token: The bearer token.
        user_repository: The credential store.
        access_token_manager: The access token verifier.

    Returns:
        The safe projection of the token's user along with the decoded claims.

    Raises:
        TokenExpired: If the token has expired.
        InvalidToken: If the token is invalid, or its user is missing or inactive.
        TokenVerificationFailed: On any unexpected failure.
    """
    try:
        claims = await asyncio.to_thread(access_token_manager.verify, token)

        user = await user_repository.get_by_id(claims.user_id)
        if user is None or not user.is_active:
            logger.debug(f"No active user associated to the token of {claims.user_id}")
            raise InvalidToken()
    except (DomainError, CredentialStoreUnavailable):
        raise
    except Exception as e:
        logger.exception("Token verification failed")
        raise TokenVerificationFailed() from e

    return TokenVerification(user=UserPublic.model_validate(user), claims=claims)
