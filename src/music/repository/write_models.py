from abc import ABC, abstractmethod

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from src.config.database import async_session_manager
from src.errors import UpstreamServiceError
from src.music.dtos import MUSIC_SETTINGS_KEY, MusicSettingsDTO
from src.music.repository.orm_models import Setting


class MusicSettingsWriteModel(ABC):
    @abstractmethod
    async def save_music_settings(self, music: MusicSettingsDTO) -> MusicSettingsDTO:
        """Insert or replace the single music settings row."""
        raise NotImplementedError


class SqlMusicSettingsWriteModel(MusicSettingsWriteModel):
    def __init__(self, session_overwrite: AsyncSession | None = None) -> None:
        self._session_overwrite = session_overwrite

    async def save_music_settings(self, music: MusicSettingsDTO) -> MusicSettingsDTO:
        try:
            async with async_session_manager(session_overwrite=self._session_overwrite) as session:
                result = await session.execute(
                    select(Setting).where(Setting.key == MUSIC_SETTINGS_KEY)
                )
                setting = result.scalar_one_or_none()
                if setting is None:
                    session.add(Setting(key=MUSIC_SETTINGS_KEY, value=music.to_value()))
                else:
                    setting.value = music.to_value()
                await session.flush()
        except SQLAlchemyError as e:
            raise UpstreamServiceError("Failed to update settings", details=str(e)) from e
        return music
