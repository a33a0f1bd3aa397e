import uuid
from datetime import date
from datetime import time
from decimal import Decimal

from sqlalchemy import Date
from sqlalchemy import Enum
from sqlalchemy import ForeignKey
from sqlalchemy import Index
from sqlalchemy import Numeric
from sqlalchemy import String
from sqlalchemy import Time
from sqlalchemy import Uuid
from sqlalchemy.orm import Mapped
from sqlalchemy.orm import mapped_column

from vanguardmoney.domain.entities.transaction import Transaction as TransactionEntity
from vanguardmoney.domain.types import TransactionKind
from vanguardmoney.infrastructure.adapters.database.models.base import Base
from vanguardmoney.infrastructure.adapters.database.models.base import DatetimeTrackMixin
from vanguardmoney.infrastructure.adapters.database.models.base import UUIDIdMixin


class Transaction(UUIDIdMixin, DatetimeTrackMixin, Base):
    __tablename__ = "vanguardmoney_transaction"
    __table_args__ = (Index("ix_vanguardmoney_transaction_user_kind", "user_id", "kind"),)

    user_id: Mapped[uuid.UUID] = mapped_column(
        Uuid(as_uuid=True),
        ForeignKey("vanguardmoney_user.id", ondelete="CASCADE"),
        nullable=False,
    )
    kind: Mapped[TransactionKind] = mapped_column(
        Enum(
            TransactionKind,
            native_enum=False,
            length=16,
            values_callable=lambda kinds: [kind.value for kind in kinds],
        ),
        nullable=False,
    )
    amount: Mapped[Decimal] = mapped_column(Numeric(12, 2), nullable=False)
    occurred_on: Mapped[date] = mapped_column(Date, nullable=False)
    occurred_at: Mapped[time] = mapped_column(Time, nullable=False)
    place: Mapped[str] = mapped_column(String(255), nullable=False)

    def to_entity(self) -> TransactionEntity:
        return TransactionEntity(
            id=self.id,
            user_id=self.user_id,
            kind=self.kind,
            amount=self.amount,
            occurred_on=self.occurred_on,
            occurred_at=self.occurred_at,
            place=self.place,
            created_at=self.created_at,
            updated_at=self.updated_at,
        )
