import logging
from uuid import UUID

from fastapi import APIRouter, Depends, Query
from pydantic import BaseModel

from src.admin.auth import require_admin
from src.errors import ValidationError
from src.rsvp.repository.write_models import RSVPWriteModel, SqlRSVPWriteModel

logger = logging.getLogger(__name__)

router = APIRouter()

RSVP_URL = "/api/rsvp"


class DeleteResponse(BaseModel):
    success: bool


def get_rsvp_delete_model() -> RSVPWriteModel:
    """Dependency to get RSVP write model instance for deletes."""
    return SqlRSVPWriteModel()


@router.delete(RSVP_URL, response_model=DeleteResponse, dependencies=[Depends(require_admin)])
async def delete_rsvp(
    id: str | None = Query(default=None),
    write_model: RSVPWriteModel = Depends(get_rsvp_delete_model),
) -> DeleteResponse:
    """
    Delete an RSVP. Requires ?password=.
    The dashboard reloads the list afterwards, so stats are recomputed there.
    """
    if not id:
        raise ValidationError("RSVP ID required")
    try:
        rsvp_id = UUID(id)
    except ValueError:
        raise ValidationError("Invalid RSVP ID")

    if not await write_model.delete_rsvp(rsvp_id):
        logger.info(f"RSVP {rsvp_id} was already deleted")
    return DeleteResponse(success=True)
