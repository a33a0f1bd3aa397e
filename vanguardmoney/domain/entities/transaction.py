import uuid
from dataclasses import dataclass
from datetime import date
from datetime import datetime
from datetime import time
from decimal import Decimal

from vanguardmoney.domain.types import TransactionKind


@dataclass(frozen=True, kw_only=True)
class Transaction:
    id: uuid.UUID
    user_id: uuid.UUID

    kind: TransactionKind
    amount: Decimal
    occurred_on: date
    occurred_at: time
    place: str

    created_at: datetime
    updated_at: datetime
