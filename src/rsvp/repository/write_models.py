"""RSVP write models. Return DTOs, never ORM models."""

from abc import ABC, abstractmethod
from uuid import UUID

from sqlalchemy import delete
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from src.config.database import async_session_manager
from src.errors import UpstreamServiceError
from src.rsvp.dtos import RSVPDTO, NewRSVPDTO
from src.rsvp.repository.orm_models import RSVP


class RSVPWriteModel(ABC):
    @abstractmethod
    async def create_rsvp(self, rsvp: NewRSVPDTO) -> RSVPDTO:
        """Store a validated RSVP. Every call creates a new record."""
        raise NotImplementedError

    @abstractmethod
    async def delete_rsvp(self, rsvp_id: UUID) -> bool:
        """Delete an RSVP. Returns False when no row had that id."""
        raise NotImplementedError


class SqlRSVPWriteModel(RSVPWriteModel):
    def __init__(self, session_overwrite: AsyncSession | None = None) -> None:
        self._session_overwrite = session_overwrite

    async def create_rsvp(self, rsvp: NewRSVPDTO) -> RSVPDTO:
        try:
            async with async_session_manager(session_overwrite=self._session_overwrite) as session:
                row = RSVP(
                    guest_name=rsvp.guest_name,
                    email=rsvp.email,
                    phone=rsvp.phone,
                    attendance=rsvp.attendance,
                    guest_count=rsvp.guest_count,
                    dietary_restrictions=rsvp.dietary_restrictions,
                    message=rsvp.message,
                )
                session.add(row)
                await session.flush()
                await session.refresh(row)
                return row.to_dto()
        except SQLAlchemyError as e:
            raise UpstreamServiceError("Database error", details=str(e)) from e

    async def delete_rsvp(self, rsvp_id: UUID) -> bool:
        try:
            async with async_session_manager(session_overwrite=self._session_overwrite) as session:
                result = await session.execute(delete(RSVP).where(RSVP.id == rsvp_id))
                await session.flush()
                return result.rowcount > 0
        except SQLAlchemyError as e:
            raise UpstreamServiceError("Database error", details=str(e)) from e
