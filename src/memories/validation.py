from src.errors import ValidationError
from src.memories.dtos import MAX_MESSAGE_LENGTH, NewSubmissionDTO


def parse_table_number(value: str | int | None) -> int | None:
    """Positive integer table number, or None when absent or unparseable."""
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value if value >= 1 else None
    value = value.strip()
    if not value:
        return None
    try:
        number = int(value)
    except ValueError:
        return None
    return number if number >= 1 else None


def validate_submission(
    message: str | None,
    photo_url: str | None,
    guest_name: str | None = None,
    table_number: str | int | None = None,
) -> NewSubmissionDTO:
    """
    Decide whether a guest submission may be stored and normalize it.

    The message is trimmed and must stay within MAX_MESSAGE_LENGTH; the form
    truncates before sending, so anything longer is rejected rather than cut.
    """
    photo_url = (photo_url or "").strip()
    if not photo_url:
        raise ValidationError("missing photo")

    message = (message or "").strip()
    if not message:
        raise ValidationError("missing message")
    if len(message) > MAX_MESSAGE_LENGTH:
        raise ValidationError(f"message must be at most {MAX_MESSAGE_LENGTH} characters")

    guest_name = (guest_name or "").strip() or None

    return NewSubmissionDTO(
        message=message,
        photo_url=photo_url,
        guest_name=guest_name,
        table_number=parse_table_number(table_number),
    )
