from datetime import datetime

import sqlalchemy as sa
from sqlalchemy import JSON, String
from sqlalchemy.orm import Mapped, mapped_column

from src.config.table_names import TableNames
from src.models.base import BaseModel, utcnow


class Setting(BaseModel):
    """Key-value settings row; the value is a JSON blob."""

    __tablename__ = TableNames.SETTINGS.value

    key: Mapped[str] = mapped_column(String(100), primary_key=True)
    value: Mapped[dict] = mapped_column(JSON, nullable=False)
    updated_at: Mapped[datetime] = mapped_column(
        sa.DateTime(timezone=True),
        default=utcnow,
        onupdate=utcnow,
        server_default=sa.func.current_timestamp(),
        nullable=False,
    )

    def __repr__(self) -> str:
        return f"<Setting {self.key}>"
