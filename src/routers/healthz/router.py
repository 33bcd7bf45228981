from fastapi import APIRouter, Depends
from pydantic import BaseModel

from src.memories.feed import SubmissionFeed
from src.memories.live import get_submission_feed, get_wall_view
from src.stats.wall import WallView

router = APIRouter()


class HealthCheckResponse(BaseModel):
    status: str
    version: str = "0.1.0"
    wall_loaded: bool
    live_subscribers: int


@router.get("/", response_model=HealthCheckResponse)
async def health_check(
    wall: WallView = Depends(get_wall_view),
    feed: SubmissionFeed = Depends(get_submission_feed),
) -> HealthCheckResponse:
    """
    Health check endpoint to verify the API is running.
    Also reports whether the live wall has loaded and how many listeners follow it.
    """
    return HealthCheckResponse(
        status="healthy",
        wall_loaded=wall.loaded,
        live_subscribers=feed.subscriber_count,
    )
