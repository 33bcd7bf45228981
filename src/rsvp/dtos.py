from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from uuid import UUID


class Attendance(str, Enum):
    ATTENDING = "attending"
    NOT_ATTENDING = "not_attending"
    MAYBE = "maybe"


@dataclass(frozen=True)
class NewRSVPDTO:
    """Normalized RSVP intake. guest_count already follows the attendance rule."""

    guest_name: str
    attendance: Attendance
    guest_count: int
    email: str | None = None
    phone: str | None = None
    dietary_restrictions: str | None = None
    message: str | None = None


@dataclass(frozen=True)
class RSVPDTO:
    """A stored RSVP."""

    id: UUID
    guest_name: str
    attendance: Attendance
    guest_count: int
    created_at: datetime
    email: str | None = None
    phone: str | None = None
    dietary_restrictions: str | None = None
    message: str | None = None
