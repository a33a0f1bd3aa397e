import uuid
from datetime import UTC
from datetime import datetime
from typing import Any

from sqlalchemy import select
from sqlalchemy import update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from vanguardmoney.domain.entities.user import User
from vanguardmoney.domain.exceptions import DuplicateEmailError
from vanguardmoney.domain.ports.repositories.users import UserRepository
from vanguardmoney.domain.schemas.user import UserRegister
from vanguardmoney.domain.schemas.user import UserUpdate
from vanguardmoney.infrastructure.adapters.database.models import User as UserModel
from vanguardmoney.infrastructure.adapters.database.repositories.base import store_errors


class UserSQLRepository(UserRepository):
    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def get_by_id(self, user_id: uuid.UUID) -> User | None:
        stmt = select(UserModel).where(UserModel.id == user_id, UserModel.deleted_at.is_(None))
        async with store_errors():
            result = await self.session.execute(stmt)
        user_db = result.scalar_one_or_none()

        return user_db.to_entity() if user_db else None

    async def get_by_email(self, email: str) -> User | None:
        stmt = select(UserModel).where(UserModel.email == email, UserModel.deleted_at.is_(None))
        async with store_errors():
            result = await self.session.execute(stmt)
        user_db = result.scalar_one_or_none()

        return user_db.to_entity() if user_db else None

    async def create(self, user_data: UserRegister, hashed_password: str) -> User:
        user_dict: dict[str, Any] = user_data.model_dump(exclude={"password"})
        user_dict["hashed_password"] = hashed_password

        user_db = UserModel(**user_dict)

        async with store_errors():
            self.session.add(user_db)
            try:
                await self.session.commit()
            except IntegrityError as e:
                await self.session.rollback()
                raise DuplicateEmailError(user_data.email) from e
            await self.session.refresh(user_db)

        return user_db.to_entity()

    async def update(self, user_id: uuid.UUID, user_data: UserUpdate, hashed_password: str | None = None) -> User:
        update_data: dict[str, Any] = user_data.model_dump(exclude_unset=True, exclude={"password"})

        if hashed_password:
            update_data["hashed_password"] = hashed_password

        stmt = update(UserModel).where(UserModel.id == user_id).values(**update_data).returning(UserModel)

        async with store_errors():
            try:
                result = await self.session.execute(stmt)
                user_db = result.scalar_one()
                await self.session.commit()
            except IntegrityError as e:
                await self.session.rollback()
                raise DuplicateEmailError(update_data.get("email")) from e
            await self.session.refresh(user_db)

        return user_db.to_entity()

    async def update_last_login(self, user_id: uuid.UUID, logged_in_at: datetime) -> None:
        stmt = update(UserModel).where(UserModel.id == user_id).values(last_login_at=logged_in_at)

        async with store_errors():
            await self.session.execute(stmt)
            await self.session.commit()

    async def delete(self, user_id: uuid.UUID) -> None:
        stmt = update(UserModel).where(UserModel.id == user_id).values(deleted_at=datetime.now(UTC))

        async with store_errors():
            await self.session.execute(stmt)
            await self.session.commit()
