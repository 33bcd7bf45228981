from sqlalchemy import Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from src.config.table_names import TableNames
from src.memories.dtos import MAX_MESSAGE_LENGTH, SubmissionDTO
from src.models.base import Base, CreatedAt, ensure_utc


class Submission(Base, CreatedAt):
    __tablename__ = TableNames.SUBMISSIONS.value

    guest_name: Mapped[str | None] = mapped_column(String(255), nullable=True)
    message: Mapped[str] = mapped_column(String(MAX_MESSAGE_LENGTH), nullable=False)
    photo_url: Mapped[str] = mapped_column(Text, nullable=False)
    table_number: Mapped[int | None] = mapped_column(Integer, nullable=True, index=True)

    def to_dto(self) -> SubmissionDTO:
        return SubmissionDTO(
            id=self.id,
            guest_name=self.guest_name,
            message=self.message,
            photo_url=self.photo_url,
            table_number=self.table_number,
            created_at=ensure_utc(self.created_at),
        )

    def __repr__(self) -> str:
        return f"<Submission {self.id} table={self.table_number}>"
