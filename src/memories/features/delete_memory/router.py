from uuid import UUID

from fastapi import APIRouter, Depends, Query
from pydantic import BaseModel

from src.admin.auth import require_admin
from src.errors import ValidationError
from src.media.store import get_image_store
from src.memories.features.delete_memory.coordinator import SubmissionDeleter
from src.memories.live import get_submission_feed, get_wall_view
from src.memories.repository.read_models import SqlSubmissionReadModel
from src.memories.repository.write_models import SqlSubmissionWriteModel

router = APIRouter()

SUBMISSIONS_URL = "/api/submissions"


class DeleteResponse(BaseModel):
    success: bool


def get_submission_deleter() -> SubmissionDeleter:
    """Dependency to get the deletion coordinator. Override in tests."""
    return SubmissionDeleter(
        read_model=SqlSubmissionReadModel(),
        write_model=SqlSubmissionWriteModel(),
        image_store=get_image_store(),
        wall=get_wall_view(),
        feed=get_submission_feed(),
    )


@router.delete(
    SUBMISSIONS_URL,
    response_model=DeleteResponse,
    dependencies=[Depends(require_admin)],
)
async def delete_memory(
    id: str | None = Query(default=None),
    deleter: SubmissionDeleter = Depends(get_submission_deleter),
) -> DeleteResponse:
    """Delete a submission and its photo. Requires ?password=."""
    if not id:
        raise ValidationError("Submission ID required")
    try:
        submission_id = UUID(id)
    except ValueError:
        raise ValidationError("Invalid submission ID")

    await deleter.delete(submission_id)
    return DeleteResponse(success=True)
