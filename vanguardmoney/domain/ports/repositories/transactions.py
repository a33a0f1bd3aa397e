import uuid
from abc import ABC
from abc import abstractmethod

from vanguardmoney.domain.entities.transaction import Transaction
from vanguardmoney.domain.schemas.transaction import TransactionCreate
from vanguardmoney.domain.types import TransactionKind


class TransactionRepository(ABC):
    """A repository for the income and expense entries of the users."""

    @abstractmethod
    async def create(self, user_id: uuid.UUID, kind: TransactionKind, transaction_data: TransactionCreate) -> Transaction:
        """Records a new transaction owned by a user.

        Args:
            user_id: The ID of the owner.
            kind: Whether it is an income or an expense.
            transaction_data: The validated transaction fields.

        Returns:
            The newly created `Transaction` entity.
        """
        ...

    @abstractmethod
    async def get_for_user(self, user_id: uuid.UUID, kind: TransactionKind | None = None) -> list[Transaction]:
        """Retrieves the transactions of a user, newest first.

        Args:
            user_id: The ID of the owner.
            kind: An optional filter on the transaction kind.

        Returns:
            The list of matching `Transaction` entities.
        """
        ...
