import abc
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from src.config.database import async_session_manager
from src.errors import UpstreamServiceError
from src.memories.dtos import SubmissionDTO
from src.memories.repository.orm_models import Submission


class SubmissionReadModel(abc.ABC):
    @abc.abstractmethod
    async def list_submissions(self, table_number: int | None = None) -> list[SubmissionDTO]:
        """
        All submissions, newest first.
        Restricted to one table when table_number is given.
        """
        raise NotImplementedError

    @abc.abstractmethod
    async def get_submission(self, submission_id: UUID) -> SubmissionDTO | None:
        raise NotImplementedError


class SqlSubmissionReadModel(SubmissionReadModel):
    """SQL implementation of the submission read model."""

    def __init__(self, session_overwrite: AsyncSession | None = None) -> None:
        self._session_overwrite = session_overwrite

    async def list_submissions(self, table_number: int | None = None) -> list[SubmissionDTO]:
        stmt = select(Submission).order_by(Submission.created_at.desc())
        if table_number is not None:
            stmt = stmt.where(Submission.table_number == table_number)
        try:
            async with async_session_manager(session_overwrite=self._session_overwrite) as session:
                result = await session.execute(stmt)
                return [row.to_dto() for row in result.scalars().all()]
        except SQLAlchemyError as e:
            raise UpstreamServiceError("Failed to fetch submissions", details=str(e)) from e

    async def get_submission(self, submission_id: UUID) -> SubmissionDTO | None:
        try:
            async with async_session_manager(session_overwrite=self._session_overwrite) as session:
                result = await session.execute(
                    select(Submission).where(Submission.id == submission_id)
                )
                submission = result.scalar_one_or_none()
                return submission.to_dto() if submission else None
        except SQLAlchemyError as e:
            raise UpstreamServiceError("Failed to fetch submission", details=str(e)) from e
