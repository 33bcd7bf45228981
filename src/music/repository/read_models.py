import abc

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from src.config.database import async_session_manager
from src.errors import UpstreamServiceError
from src.music.dtos import MUSIC_SETTINGS_KEY, MusicSettingsDTO
from src.music.repository.orm_models import Setting


class MusicSettingsReadModel(abc.ABC):
    @abc.abstractmethod
    async def get_music_settings(self) -> MusicSettingsDTO:
        """Current settings, defaults when no row exists."""
        raise NotImplementedError


class SqlMusicSettingsReadModel(MusicSettingsReadModel):
    def __init__(self, session_overwrite: AsyncSession | None = None) -> None:
        self._session_overwrite = session_overwrite

    async def get_music_settings(self) -> MusicSettingsDTO:
        try:
            async with async_session_manager(session_overwrite=self._session_overwrite) as session:
                result = await session.execute(
                    select(Setting).where(Setting.key == MUSIC_SETTINGS_KEY)
                )
                setting = result.scalar_one_or_none()
        except SQLAlchemyError as e:
            raise UpstreamServiceError("Failed to fetch settings", details=str(e)) from e
        return MusicSettingsDTO.from_value(setting.value if setting else None)
