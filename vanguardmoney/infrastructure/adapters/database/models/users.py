from datetime import datetime

from sqlalchemy import DateTime
from sqlalchemy import String
from sqlalchemy.orm import Mapped
from sqlalchemy.orm import mapped_column

from vanguardmoney.domain.entities.user import User as UserEntity
from vanguardmoney.infrastructure.adapters.database.models.base import Base
from vanguardmoney.infrastructure.adapters.database.models.base import DatetimeTrackMixin
from vanguardmoney.infrastructure.adapters.database.models.base import UUIDIdMixin


class User(UUIDIdMixin, DatetimeTrackMixin, Base):
    __tablename__ = "vanguardmoney_user"

    email: Mapped[str] = mapped_column(String(255), unique=True, index=True, nullable=False)
    hashed_password: Mapped[str] = mapped_column(String(255), nullable=False)

    first_name: Mapped[str | None] = mapped_column(String(50), default=None)
    last_name: Mapped[str | None] = mapped_column(String(50), default=None)

    is_active: Mapped[bool] = mapped_column(default=True)
    last_login_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), default=None)
    deleted_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), default=None)

    def to_entity(self) -> UserEntity:
        return UserEntity(
            id=self.id,
            email=self.email,
            hashed_password=self.hashed_password,
            first_name=self.first_name,
            last_name=self.last_name,
            is_active=self.is_active,
            last_login_at=self.last_login_at,
            created_at=self.created_at,
            updated_at=self.updated_at,
            deleted_at=self.deleted_at,
        )
