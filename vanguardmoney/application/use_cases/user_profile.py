import logging
import uuid

from vanguardmoney.domain.exceptions import CredentialStoreUnavailable
from vanguardmoney.domain.exceptions import DomainError
from vanguardmoney.domain.exceptions import ProfileFetchFailed
from vanguardmoney.domain.exceptions import UserNotFound
from vanguardmoney.domain.ports.repositories.users import UserRepository
from vanguardmoney.domain.schemas.user import UserPublic

logger = logging.getLogger(__name__)


async def user_profile(user_id: uuid.UUID, user_repository: UserRepository) -> UserPublic:
    """Fetches the profile of an already authenticated user.

    Raises:
        UserNotFound: If the user no longer exists.
        ProfileFetchFailed: On any unexpected failure.
    """
    try:
        user = await user_repository.get_by_id(user_id)
        if user is None:
            raise UserNotFound()
    except (DomainError, CredentialStoreUnavailable):
        raise
    except Exception as e:
        logger.exception("Profile fetch failed")
        raise ProfileFetchFailed() from e

    return UserPublic.model_validate(user)
