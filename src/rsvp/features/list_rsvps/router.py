from fastapi import APIRouter, Depends
from pydantic import BaseModel

from src.admin.auth import require_admin
from src.rsvp.repository.read_models import RSVPReadModel, SqlRSVPReadModel
from src.rsvp.schemas import RSVPResponse, RSVPStatsResponse
from src.stats.aggregation import compute_rsvp_stats

router = APIRouter()

RSVP_URL = "/api/rsvp"


class RSVPListResponse(BaseModel):
    rsvps: list[RSVPResponse]
    stats: RSVPStatsResponse


def get_rsvp_read_model() -> RSVPReadModel:
    """Dependency to get RSVP read model instance."""
    return SqlRSVPReadModel()


@router.get(RSVP_URL, response_model=RSVPListResponse, dependencies=[Depends(require_admin)])
async def list_rsvps(
    read_model: RSVPReadModel = Depends(get_rsvp_read_model),
) -> RSVPListResponse:
    """All RSVPs, newest first, with stats recomputed from them. Requires ?password=."""
    rsvps = await read_model.list_rsvps()
    return RSVPListResponse(
        rsvps=[RSVPResponse.from_dto(r) for r in rsvps],
        stats=RSVPStatsResponse.from_stats(compute_rsvp_stats(rsvps)),
    )
