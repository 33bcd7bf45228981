from typing import Any

from src.errors import ValidationError
from src.rsvp.dtos import Attendance, NewRSVPDTO


def _blank_to_none(value: str | None) -> str | None:
    if value is None:
        return None
    value = value.strip()
    return value or None


def parse_guest_count(value: Any) -> int | None:
    """A whole, non-negative number of guests, or None when left blank."""
    if value is None or (isinstance(value, str) and not value.strip()):
        return None
    if isinstance(value, bool):
        raise ValidationError("guest_count must be a whole number")
    if isinstance(value, float) and value.is_integer():
        value = int(value)
    if isinstance(value, str):
        try:
            value = int(value.strip())
        except ValueError:
            raise ValidationError("guest_count must be a whole number")
    if not isinstance(value, int):
        raise ValidationError("guest_count must be a whole number")
    if value < 0:
        raise ValidationError("guest_count must not be negative")
    return value


def normalize_guest_count(attendance: Attendance, guest_count: int | None) -> int:
    """Attending responses count at least one guest; every other answer counts zero."""
    if attendance == Attendance.ATTENDING:
        return guest_count or 1
    elif attendance == Attendance.NOT_ATTENDING:
        return 0
    elif attendance == Attendance.MAYBE:
        return 0
    raise ValueError(f"Unhandled attendance: {attendance!r}")


def validate_rsvp(
    guest_name: str | None,
    attendance: str | None,
    email: str | None = None,
    phone: str | None = None,
    guest_count: Any = None,
    dietary_restrictions: str | None = None,
    message: str | None = None,
) -> NewRSVPDTO:
    """
    Check an RSVP and compute what is stored.

    guest_count is always derived here from attendance, whatever the client
    sent; it is only read at all for attending guests. Repeated RSVPs from the
    same guest are separate records.
    """
    guest_name = _blank_to_none(guest_name)
    if not guest_name or not attendance:
        raise ValidationError("guest_name and attendance required")

    try:
        parsed_attendance = Attendance(attendance)
    except ValueError:
        raise ValidationError("invalid attendance")

    requested = None
    if parsed_attendance == Attendance.ATTENDING:
        requested = parse_guest_count(guest_count)

    return NewRSVPDTO(
        guest_name=guest_name,
        attendance=parsed_attendance,
        guest_count=normalize_guest_count(parsed_attendance, requested),
        email=_blank_to_none(email),
        phone=_blank_to_none(phone),
        dietary_restrictions=_blank_to_none(dietary_restrictions),
        message=_blank_to_none(message),
    )
