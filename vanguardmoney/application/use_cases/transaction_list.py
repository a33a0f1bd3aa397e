from vanguardmoney.domain.entities.transaction import Transaction
from vanguardmoney.domain.ports.repositories.transactions import TransactionRepository
from vanguardmoney.domain.schemas.user import UserPublic
from vanguardmoney.domain.types import TransactionKind


async def transaction_list(
    user: UserPublic,
    transaction_repository: TransactionRepository,
    kind: TransactionKind | None = None,
) -> list[Transaction]:
    return await transaction_repository.get_for_user(user.id, kind=kind)
