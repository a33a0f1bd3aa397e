import uuid

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from vanguardmoney.domain.entities.transaction import Transaction
from vanguardmoney.domain.ports.repositories.transactions import TransactionRepository
from vanguardmoney.domain.schemas.transaction import TransactionCreate
from vanguardmoney.domain.types import TransactionKind
from vanguardmoney.infrastructure.adapters.database.models import Transaction as TransactionModel
from vanguardmoney.infrastructure.adapters.database.repositories.base import store_errors


class TransactionSQLRepository(TransactionRepository):
    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def create(self, user_id: uuid.UUID, kind: TransactionKind, transaction_data: TransactionCreate) -> Transaction:
        transaction_db = TransactionModel(user_id=user_id, kind=kind, **transaction_data.model_dump())

        async with store_errors():
            self.session.add(transaction_db)
            await self.session.commit()
            await self.session.refresh(transaction_db)

        return transaction_db.to_entity()

    async def get_for_user(self, user_id: uuid.UUID, kind: TransactionKind | None = None) -> list[Transaction]:
        stmt = select(TransactionModel).where(TransactionModel.user_id == user_id)
        if kind is not None:
            stmt = stmt.where(TransactionModel.kind == kind)
        stmt = stmt.order_by(
            TransactionModel.occurred_on.desc(),
            TransactionModel.occurred_at.desc(),
            TransactionModel.created_at.desc(),
        )

        async with store_errors():
            result = await self.session.execute(stmt)

        return [transaction_db.to_entity() for transaction_db in result.scalars().all()]
