"""Response shapes shared by the RSVP endpoints."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from src.rsvp.dtos import RSVPDTO, Attendance
from src.stats.dtos import RSVPStats


class RSVPResponse(BaseModel):
    id: UUID
    guest_name: str
    email: str | None = None
    phone: str | None = None
    attendance: Attendance
    guest_count: int
    dietary_restrictions: str | None = None
    message: str | None = None
    created_at: datetime

    @classmethod
    def from_dto(cls, rsvp: RSVPDTO) -> "RSVPResponse":
        return cls(
            id=rsvp.id,
            guest_name=rsvp.guest_name,
            email=rsvp.email,
            phone=rsvp.phone,
            attendance=rsvp.attendance,
            guest_count=rsvp.guest_count,
            dietary_restrictions=rsvp.dietary_restrictions,
            message=rsvp.message,
            created_at=rsvp.created_at,
        )


class RSVPStatsResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    total: int
    attending: int
    not_attending: int = Field(alias="notAttending")
    maybe: int
    total_guests: int = Field(alias="totalGuests")

    @classmethod
    def from_stats(cls, stats: RSVPStats) -> "RSVPStatsResponse":
        return cls(
            total=stats.total,
            attending=stats.attending,
            not_attending=stats.not_attending,
            maybe=stats.maybe,
            total_guests=stats.total_guests,
        )
