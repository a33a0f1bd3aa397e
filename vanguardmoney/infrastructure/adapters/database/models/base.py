import uuid
from datetime import UTC
from datetime import datetime

from sqlalchemy import DateTime
from sqlalchemy import Uuid
from sqlalchemy import func
from sqlalchemy.ext.asyncio import AsyncAttrs
from sqlalchemy.orm import DeclarativeBase
from sqlalchemy.orm import Mapped
from sqlalchemy.orm import MappedAsDataclass
from sqlalchemy.orm import mapped_column


class Base(MappedAsDataclass, AsyncAttrs, DeclarativeBase, kw_only=True):
    """Base class for all SQLAlchemy declarative models in the application.

    This class combines:
      - `MappedAsDataclass` for dataclass-like behavior
      - `AsyncAttrs` for asynchronous attribute access
      - `DeclarativeBase` to enable declarative mapping of Python classes to database tables.
    """

    pass


class DatetimeTrackMixin(MappedAsDataclass, kw_only=True):
    """Adds `created_at` and `updated_at` columns, refreshed by the database on each modification."""

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        default_factory=lambda: datetime.now(UTC),
        nullable=False,
        sort_order=998,
        init=False,
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        onupdate=func.now(),
        default_factory=lambda: datetime.now(UTC),
        nullable=False,
        sort_order=999,
        init=False,
    )


class UUIDIdMixin(MappedAsDataclass, kw_only=True):
    """Adds a UUID primary key generated on creation.

    The generic `Uuid` type maps to a native column on PostgreSQL and to a
    fixed-length string elsewhere (e.g. SQLite).
    """

    id: Mapped[uuid.UUID] = mapped_column(
        Uuid(as_uuid=True),
        primary_key=True,
        default_factory=uuid.uuid4,
        sort_order=-100,
    )
