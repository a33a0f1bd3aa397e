from fastapi import APIRouter
from fastapi import Depends
from fastapi import status

from vanguardmoney.application.use_cases.transaction_list import transaction_list
from vanguardmoney.application.use_cases.transaction_record import transaction_record
from vanguardmoney.domain.ports.repositories.transactions import TransactionRepository
from vanguardmoney.domain.schemas.transaction import TransactionCreate
from vanguardmoney.domain.schemas.user import UserPublic
from vanguardmoney.domain.types import TransactionKind
from vanguardmoney.infrastructure.entrypoints.api.dependencies import get_current_user
from vanguardmoney.infrastructure.entrypoints.api.dependencies import get_transaction_repository
from vanguardmoney.infrastructure.entrypoints.api.schemas import TransactionResponse

router = APIRouter()


@router.post("/incomes", name="transaction_income_record", status_code=status.HTTP_201_CREATED)
async def record_income(
    transaction_data: TransactionCreate,
    current_user: UserPublic = Depends(get_current_user),
    transaction_repository: TransactionRepository = Depends(get_transaction_repository),
) -> TransactionResponse:
    transaction = await transaction_record(
        user=current_user,
        kind=TransactionKind.INCOME,
        transaction_data=transaction_data,
        transaction_repository=transaction_repository,
    )
    return TransactionResponse.model_validate(transaction)


@router.post("/expenses", name="transaction_expense_record", status_code=status.HTTP_201_CREATED)
async def record_expense(
    transaction_data: TransactionCreate,
    current_user: UserPublic = Depends(get_current_user),
    transaction_repository: TransactionRepository = Depends(get_transaction_repository),
) -> TransactionResponse:
    transaction = await transaction_record(
        user=current_user,
        kind=TransactionKind.EXPENSE,
        transaction_data=transaction_data,
        transaction_repository=transaction_repository,
    )
    return TransactionResponse.model_validate(transaction)


@router.get("", name="transaction_list")
async def list_transactions(
    kind: TransactionKind | None = None,
    current_user: UserPublic = Depends(get_current_user),
    transaction_repository: TransactionRepository = Depends(get_transaction_repository),
) -> list[TransactionResponse]:
    transactions = await transaction_list(current_user, transaction_repository=transaction_repository, kind=kind)
    return [TransactionResponse.model_validate(transaction) for transaction in transactions]
