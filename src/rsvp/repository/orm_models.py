from sqlalchemy import Enum, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from src.config.table_names import TableNames
from src.models.base import Base, CreatedAt, ensure_utc
from src.rsvp.dtos import RSVPDTO, Attendance


class RSVP(Base, CreatedAt):
    __tablename__ = TableNames.RSVP.value

    guest_name: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    email: Mapped[str | None] = mapped_column(String(255), nullable=True)
    phone: Mapped[str | None] = mapped_column(String(50), nullable=True)
    attendance: Mapped[Attendance] = mapped_column(
        Enum(Attendance, name="attendance_enum", values_callable=lambda x: [e.value for e in x]),
        nullable=False,
    )
    guest_count: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    dietary_restrictions: Mapped[str | None] = mapped_column(Text, nullable=True)
    message: Mapped[str | None] = mapped_column(Text, nullable=True)

    def to_dto(self) -> RSVPDTO:
        return RSVPDTO(
            id=self.id,
            guest_name=self.guest_name,
            email=self.email,
            phone=self.phone,
            attendance=Attendance(self.attendance),
            guest_count=self.guest_count,
            dietary_restrictions=self.dietary_restrictions,
            message=self.message,
            created_at=ensure_utc(self.created_at),
        )

    def __repr__(self) -> str:
        return f"<RSVP {self.guest_name} - {self.attendance}>"
