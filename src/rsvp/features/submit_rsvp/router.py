import logging
from typing import Any

from fastapi import APIRouter, Depends
from pydantic import BaseModel

from src.rsvp.repository.write_models import RSVPWriteModel, SqlRSVPWriteModel
from src.rsvp.schemas import RSVPResponse
from src.rsvp.validation import validate_rsvp

logger = logging.getLogger(__name__)

router = APIRouter()

RSVP_URL = "/api/rsvp"


class RSVPSubmit(BaseModel):
    """Raw form input. Everything is checked by validate_rsvp, not here."""

    guest_name: str | None = None
    attendance: str | None = None
    email: str | None = None
    phone: str | None = None
    # only read for attending guests, so any value is accepted here
    guest_count: Any = None
    dietary_restrictions: str | None = None
    message: str | None = None


class RSVPSubmitResponse(BaseModel):
    success: bool
    rsvp: RSVPResponse


def get_rsvp_write_model() -> RSVPWriteModel:
    """Dependency to get RSVP write model instance."""
    return SqlRSVPWriteModel()


@router.post(RSVP_URL, response_model=RSVPSubmitResponse)
async def submit_rsvp(
    rsvp_data: RSVPSubmit,
    write_model: RSVPWriteModel = Depends(get_rsvp_write_model),
) -> RSVPSubmitResponse:
    """
    Record a guest's RSVP.
    guest_count is recomputed from attendance; what the client sends is only a hint.
    """
    new_rsvp = validate_rsvp(
        guest_name=rsvp_data.guest_name,
        attendance=rsvp_data.attendance,
        email=rsvp_data.email,
        phone=rsvp_data.phone,
        guest_count=rsvp_data.guest_count,
        dietary_restrictions=rsvp_data.dietary_restrictions,
        message=rsvp_data.message,
    )
    rsvp = await write_model.create_rsvp(new_rsvp)
    logger.info(f"RSVP {rsvp.id}: {rsvp.attendance.value} x{rsvp.guest_count}")
    return RSVPSubmitResponse(success=True, rsvp=RSVPResponse.from_dto(rsvp))
