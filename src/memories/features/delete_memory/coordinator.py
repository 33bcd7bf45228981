"""
Admin deletion of a submission.

The photo is removed first on a best-effort basis: an orphaned photo is
acceptable, a row pointing at a missing photo is not. The row delete must be
confirmed before the live wall and the change-feed hear about it.
"""

import logging
from uuid import UUID

from src.errors import NotFoundError
from src.media.store import ImageStore
from src.memories.dtos import SubmissionChange, SubmissionDTO
from src.memories.feed import SubmissionFeed
from src.memories.repository.read_models import SubmissionReadModel
from src.memories.repository.write_models import SubmissionWriteModel
from src.stats.wall import WallView

logger = logging.getLogger(__name__)


class SubmissionDeleter:
    def __init__(
        self,
        read_model: SubmissionReadModel,
        write_model: SubmissionWriteModel,
        image_store: ImageStore,
        wall: WallView,
        feed: SubmissionFeed,
    ):
        self._read_model = read_model
        self._write_model = write_model
        self._image_store = image_store
        self._wall = wall
        self._feed = feed

    async def _delete_photo(self, submission: SubmissionDTO) -> None:
        try:
            deleted = await self._image_store.delete(submission.photo_url)
        except Exception as e:
            logger.warning(f"Could not delete photo for submission {submission.id}: {e}")
            return
        if not deleted:
            logger.info(f"Photo for submission {submission.id} was already gone")

    async def delete(self, submission_id: UUID) -> SubmissionDTO:
        submission = await self._read_model.get_submission(submission_id)
        if submission is None:
            raise NotFoundError("Submission not found")

        await self._delete_photo(submission)

        # UpstreamServiceError propagates and leaves the wall untouched
        if not await self._write_model.delete_submission(submission_id):
            raise NotFoundError("Submission not found")

        await self._wall.apply_local_delete(submission)
        self._feed.publish(SubmissionChange.deleted(submission_id))
        logger.info(f"Deleted submission {submission_id}")
        return submission
