import logging

from vanguardmoney.domain.entities.transaction import Transaction
from vanguardmoney.domain.exceptions import CredentialStoreUnavailable
from vanguardmoney.domain.exceptions import TransactionRecordFailed
from vanguardmoney.domain.ports.repositories.transactions import TransactionRepository
from vanguardmoney.domain.schemas.transaction import TransactionCreate
from vanguardmoney.domain.schemas.user import UserPublic
from vanguardmoney.domain.types import TransactionKind

logger = logging.getLogger(__name__)


async def transaction_record(
    user: UserPublic,
    kind: TransactionKind,
    transaction_data: TransactionCreate,
    transaction_repository: TransactionRepository,
) -> Transaction:
    """Records an income or an expense on behalf of the authenticated user.

    Raises:
        TransactionRecordFailed: If the transaction cannot be persisted.
    """
    try:
        transaction = await transaction_repository.create(user.id, kind, transaction_data)
    except CredentialStoreUnavailable:
        raise
    except Exception as e:
        logger.exception(f"Unable to record the {kind} of user {user.id}")
        raise TransactionRecordFailed() from e

    logger.info(f"Recorded {kind} {transaction.id} for user {user.id}")
    return transaction
