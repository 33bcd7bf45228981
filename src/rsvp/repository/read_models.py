import abc

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from src.config.database import async_session_manager
from src.errors import UpstreamServiceError
from src.rsvp.dtos import RSVPDTO
from src.rsvp.repository.orm_models import RSVP


class RSVPReadModel(abc.ABC):
    @abc.abstractmethod
    async def list_rsvps(self) -> list[RSVPDTO]:
        """All RSVPs, newest first."""
        raise NotImplementedError


class SqlRSVPReadModel(RSVPReadModel):
    """SQL implementation of RSVP read model."""

    def __init__(self, session_overwrite: AsyncSession | None = None) -> None:
        self._session_overwrite = session_overwrite

    async def list_rsvps(self) -> list[RSVPDTO]:
        try:
            async with async_session_manager(session_overwrite=self._session_overwrite) as session:
                result = await session.execute(select(RSVP).order_by(RSVP.created_at.desc()))
                return [row.to_dto() for row in result.scalars().all()]
        except SQLAlchemyError as e:
            raise UpstreamServiceError("Database error", details=str(e)) from e
