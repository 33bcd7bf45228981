"""Submission write models. Return DTOs, never ORM models."""

from abc import ABC, abstractmethod
from uuid import UUID

from sqlalchemy import delete
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from src.config.database import async_session_manager
from src.errors import UpstreamServiceError, ValidationError
from src.memories.dtos import MAX_MESSAGE_LENGTH, NewSubmissionDTO, SubmissionDTO
from src.memories.repository.orm_models import Submission


class SubmissionWriteModel(ABC):
    @abstractmethod
    async def create_submission(self, submission: NewSubmissionDTO) -> SubmissionDTO:
        """Store a validated submission and return it with its id and created_at."""
        raise NotImplementedError

    @abstractmethod
    async def delete_submission(self, submission_id: UUID) -> bool:
        """Delete a submission row. Returns False when no row had that id."""
        raise NotImplementedError


class SqlSubmissionWriteModel(SubmissionWriteModel):
    def __init__(self, session_overwrite: AsyncSession | None = None) -> None:
        self._session_overwrite = session_overwrite

    async def create_submission(self, submission: NewSubmissionDTO) -> SubmissionDTO:
        if len(submission.message) > MAX_MESSAGE_LENGTH:
            raise ValidationError(f"message must be at most {MAX_MESSAGE_LENGTH} characters")

        try:
            async with async_session_manager(session_overwrite=self._session_overwrite) as session:
                row = Submission(
                    guest_name=submission.guest_name,
                    message=submission.message,
                    photo_url=submission.photo_url,
                    table_number=submission.table_number,
                )
                session.add(row)
                await session.flush()
                await session.refresh(row)
                return row.to_dto()
        except SQLAlchemyError as e:
            raise UpstreamServiceError("Failed to save submission", details=str(e)) from e

    async def delete_submission(self, submission_id: UUID) -> bool:
        try:
            async with async_session_manager(session_overwrite=self._session_overwrite) as session:
                result = await session.execute(
                    delete(Submission).where(Submission.id == submission_id)
                )
                await session.flush()
                return result.rowcount > 0
        except SQLAlchemyError as e:
            raise UpstreamServiceError("Failed to delete submission", details=str(e)) from e
