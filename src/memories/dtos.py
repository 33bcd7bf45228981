from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from uuid import UUID

MAX_MESSAGE_LENGTH = 500
ANONYMOUS_GUEST = "Anonymous Guest"


@dataclass(frozen=True)
class NewSubmissionDTO:
    """Normalized guest intake, ready to be stored."""

    message: str
    photo_url: str
    guest_name: str | None = None
    table_number: int | None = None


@dataclass(frozen=True)
class SubmissionDTO:
    """A stored blessing: photo plus message."""

    id: UUID
    message: str
    photo_url: str
    created_at: datetime
    guest_name: str | None = None
    table_number: int | None = None

    @property
    def display_name(self) -> str:
        return self.guest_name or ANONYMOUS_GUEST


class ChangeType(str, Enum):
    INSERT = "insert"
    DELETE = "delete"
    # the subscriber missed events and has to reload from the store
    RESYNC = "resync"


@dataclass(frozen=True)
class SubmissionChange:
    """One change-feed notification."""

    type: ChangeType
    submission_id: UUID | None = None
    submission: SubmissionDTO | None = None

    @classmethod
    def inserted(cls, submission: SubmissionDTO) -> "SubmissionChange":
        return cls(type=ChangeType.INSERT, submission_id=submission.id, submission=submission)

    @classmethod
    def deleted(cls, submission_id: UUID) -> "SubmissionChange":
        return cls(type=ChangeType.DELETE, submission_id=submission_id)

    @classmethod
    def resync(cls) -> "SubmissionChange":
        return cls(type=ChangeType.RESYNC)
