from fastapi import APIRouter, Depends, Query
from pydantic import BaseModel

from src.errors import UpstreamServiceError
from src.memories.live import get_wall_view
from src.memories.schemas import SubmissionResponse, SubmissionStatsResponse
from src.memories.validation import parse_table_number
from src.stats.wall import WallView

router = APIRouter()

SUBMISSIONS_URL = "/api/submissions"


class WallResponse(BaseModel):
    submissions: list[SubmissionResponse]
    stats: SubmissionStatsResponse
    tables: list[int]


@router.get(SUBMISSIONS_URL, response_model=WallResponse)
async def list_memories(
    table: str | None = Query(default=None),
    wall: WallView = Depends(get_wall_view),
) -> WallResponse:
    """
    The blessing wall, newest first.

    Every call reloads from the store and recomputes the stats. `table`
    narrows submissions and stats to one table; `tables` always lists every
    table that has submissions so the wall can offer a filter.
    """
    try:
        await wall.load()
    except UpstreamServiceError as e:
        raise e.public() from e
    snapshot = await wall.snapshot(table=parse_table_number(table))
    return WallResponse(
        submissions=[SubmissionResponse.from_dto(s) for s in snapshot.submissions],
        stats=SubmissionStatsResponse.from_stats(snapshot.stats),
        tables=snapshot.tables,
    )
