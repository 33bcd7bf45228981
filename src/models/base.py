from datetime import UTC, datetime
from uuid import UUID, uuid4

import sqlalchemy as sa
from sqlalchemy.orm import Mapped, declarative_base, mapped_column
from sqlalchemy_utils import UUIDType

BaseModel = declarative_base()


def utcnow() -> datetime:
    return datetime.now(UTC)


class Base(BaseModel):
    __abstract__ = True

    id: Mapped[UUID] = mapped_column(UUIDType(binary=False), primary_key=True, default=uuid4)


class CreatedAt(BaseModel):
    """Rows that are immutable once written only carry a creation time."""

    __abstract__ = True

    created_at: Mapped[datetime] = mapped_column(
        sa.DateTime(timezone=True),
        default=utcnow,
        server_default=sa.func.current_timestamp(),
        nullable=False,
        index=True,
    )


def ensure_utc(value: datetime) -> datetime:
    """SQLite hands back naive datetimes; everything else is already aware."""
    if value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value
