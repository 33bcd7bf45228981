import logging

from fastapi import APIRouter, Depends
from pydantic import BaseModel

from src.errors import UpstreamServiceError
from src.memories.dtos import SubmissionChange
from src.memories.feed import SubmissionFeed
from src.memories.live import get_submission_feed, get_wall_view
from src.memories.repository.write_models import SqlSubmissionWriteModel, SubmissionWriteModel
from src.memories.schemas import SubmissionResponse
from src.memories.validation import validate_submission
from src.stats.wall import WallView

logger = logging.getLogger(__name__)

router = APIRouter()

SUBMISSIONS_URL = "/api/submissions"


class SubmissionCreate(BaseModel):
    message: str | None = None
    photo_url: str | None = None
    guest_name: str | None = None
    # free text from the form or the ?table= query of a QR link
    table_number: str | int | None = None


class SubmissionCreateResponse(BaseModel):
    success: bool
    submission: SubmissionResponse


def get_submission_write_model() -> SubmissionWriteModel:
    """Dependency to get submission write model instance."""
    return SqlSubmissionWriteModel()


@router.post(SUBMISSIONS_URL, response_model=SubmissionCreateResponse)
async def submit_memory(
    request: SubmissionCreate,
    write_model: SubmissionWriteModel = Depends(get_submission_write_model),
    wall: WallView = Depends(get_wall_view),
    feed: SubmissionFeed = Depends(get_submission_feed),
) -> SubmissionCreateResponse:
    """
    Add a blessing to the wall.
    The photo must already be uploaded through /api/upload.
    """
    new_submission = validate_submission(
        message=request.message,
        photo_url=request.photo_url,
        guest_name=request.guest_name,
        table_number=request.table_number,
    )
    try:
        submission = await write_model.create_submission(new_submission)
    except UpstreamServiceError as e:
        raise e.public() from e
    logger.info(f"New submission {submission.id} for table {submission.table_number}")

    await wall.apply_insert(submission)
    feed.publish(SubmissionChange.inserted(submission))

    return SubmissionCreateResponse(
        success=True,
        submission=SubmissionResponse.from_dto(submission),
    )
