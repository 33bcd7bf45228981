"""SQL read/write models against an in-memory SQLite database."""

import pytest

from src.music.dtos import MusicSettingsDTO
from src.music.repository.read_models import SqlMusicSettingsReadModel
from src.music.repository.write_models import SqlMusicSettingsWriteModel


@pytest.mark.asyncio
async def test_defaults_when_nothing_saved(db_session):
    music = await SqlMusicSettingsReadModel(session_overwrite=db_session).get_music_settings()

    assert music == MusicSettingsDTO()


@pytest.mark.asyncio
async def test_save_then_replace(db_session):
    write_model = SqlMusicSettingsWriteModel(session_overwrite=db_session)
    read_model = SqlMusicSettingsReadModel(session_overwrite=db_session)

    await write_model.save_music_settings(
        MusicSettingsDTO(enabled=True, url="https://cdn.example.com/a.mp3", title="A")
    )
    await write_model.save_music_settings(
        MusicSettingsDTO(enabled=False, url="https://cdn.example.com/b.mp3", title="B")
    )

    assert await read_model.get_music_settings() == MusicSettingsDTO(
        enabled=False, url="https://cdn.example.com/b.mp3", title="B"
    )
