import json
from collections.abc import AsyncIterator

from fastapi import APIRouter, Depends
from fastapi.responses import StreamingResponse

from src.memories.dtos import SubmissionChange
from src.memories.feed import SubmissionFeed
from src.memories.live import get_submission_feed
from src.memories.schemas import SubmissionResponse

router = APIRouter()

SUBMISSION_EVENTS_URL = "/api/submissions/events"


def format_event(change: SubmissionChange) -> str:
    """One server-sent event for a change-feed notification."""
    payload: dict = {"id": str(change.submission_id) if change.submission_id else None}
    if change.submission is not None:
        payload["submission"] = SubmissionResponse.from_dto(change.submission).model_dump(
            mode="json"
        )
    return f"event: {change.type.value}\ndata: {json.dumps(payload)}\n\n"


async def change_events(feed: SubmissionFeed) -> AsyncIterator[str]:
    async with feed.subscribe() as subscription:
        # tells the client it is (re)connected and should reload the wall
        yield format_event(SubmissionChange.resync())
        async for change in subscription:
            yield format_event(change)


@router.get(SUBMISSION_EVENTS_URL)
async def stream_changes(feed: SubmissionFeed = Depends(get_submission_feed)) -> StreamingResponse:
    """Live inserts and deletes for the blessing wall as server-sent events."""
    return StreamingResponse(
        change_events(feed),
        media_type="text/event-stream",
        headers={"Cache-Control": "no-cache"},
    )
