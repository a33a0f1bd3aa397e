import uuid
from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True, kw_only=True)
class User:
    id: uuid.UUID
    email: str
    hashed_password: str

    first_name: str | None = None
    last_name: str | None = None

    is_active: bool = True
    last_login_at: datetime | None = None

    created_at: datetime
    updated_at: datetime
    deleted_at: datetime | None = None
