import uuid
from datetime import date
from datetime import datetime
from datetime import time
from decimal import Decimal

from pydantic import BaseModel
from pydantic import ConfigDict

from vanguardmoney.domain.types import ErrorCode
from vanguardmoney.domain.types import TransactionKind


class HealthCheckResponse(BaseModel):
    status: str
    database: str


class RegisterRequest(BaseModel):
    # Fields are validated by the registration workflow, after the uniqueness check.
    email: str
    password: str
    first_name: str | None = None
    last_name: str | None = None


class LoginRequest(BaseModel):
    email: str
    password: str


class FieldErrorResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    field: str
    message: str


class ErrorResponse(BaseModel):
    success: bool = False
    message: str
    error: ErrorCode
    details: list[FieldErrorResponse] | None = None


class TransactionResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: uuid.UUID
    kind: TransactionKind
    amount: Decimal
    occurred_on: date
    occurred_at: time
    place: str
    created_at: datetime
