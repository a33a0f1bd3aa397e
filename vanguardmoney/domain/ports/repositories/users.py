import uuid
from abc import ABC
from abc import abstractmethod
from datetime import datetime

from vanguardmoney.domain.entities.user import User
from vanguardmoney.domain.schemas.user import UserRegister
from vanguardmoney.domain.schemas.user import UserUpdate


class UserRepository(ABC):
    """A repository for managing `User` entities (the credential store).

    Soft-deleted users are never returned by the lookups. Implementations raise
    `CredentialStoreUnavailable` when the underlying storage cannot be reached.
    """

    @abstractmethod
    async def get_by_id(self, user_id: uuid.UUID) -> User | None:
        """Retrieves a user by their unique ID.

        Args:
            user_id: The UUID of the user to retrieve.

        Returns:
            The `User` entity if found, otherwise None.
        """
        ...

    @abstractmethod
    async def get_by_email(self, email: str) -> User | None:
        """Retrieves a user by their normalized email address.

        Args:
            email: The lowercased email address of the user to retrieve.

        Returns:
            The `User` entity if found, otherwise None.
        """
        ...

    @abstractmethod
    async def create(self, user_data: UserRegister, hashed_password: str) -> User:
        """Creates a new, active user.

        The creation is atomic: on failure, no row is left behind.

        Args:
            user_data: The validated registration fields (the password is ignored).
            hashed_password: The user's password, already hashed.

        Returns:
            The newly created `User` entity.

        Raises:
            DuplicateEmailError: If the email is already taken.
        """
        ...

    @abstractmethod
    async def update(self, user_id: uuid.UUID, user_data: UserUpdate, hashed_password: str | None = None) -> User:
        """Updates the fields explicitly set on `user_data`.

        Args:
            user_id: The ID of the user to update.
            user_data: A schema object with the fields to be updated.
            hashed_password: An optional new hashed password if the password is being changed.

        Returns:
            The updated `User` entity.

        Raises:
            DuplicateEmailError: If the new email is already taken.
        """
        ...

    @abstractmethod
    async def update_last_login(self, user_id: uuid.UUID, logged_in_at: datetime) -> None:
        """Persists the last successful login time of a user.

        Args:
            user_id: The ID of the user who logged in.
            logged_in_at: The login time.
        """
        ...

    @abstractmethod
    async def delete(self, user_id: uuid.UUID) -> None:
        """Soft-deletes a user.

        Args:
            user_id: The ID of the user to delete.
        """
        ...
