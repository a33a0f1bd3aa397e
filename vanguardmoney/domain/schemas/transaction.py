from datetime import date
from datetime import time
from decimal import Decimal
from typing import Annotated

from pydantic import Field
from pydantic import StringConstraints

from vanguardmoney.domain.schemas.base import BaseEntity


class TransactionCreate(BaseEntity):
    """Schema for recording an income or an expense."""

    amount: Annotated[Decimal, Field(gt=0, max_digits=12, decimal_places=2)]
    occurred_on: date
    occurred_at: time
    place: Annotated[str, StringConstraints(strip_whitespace=True, min_length=1, max_length=255)]
