import pytest

from src.music.dtos import MusicSettingsDTO
from src.music.features.get_music.router import MUSIC_URL, get_music_read_model
from src.music.tests.inmemory_models import InMemoryMusicSettings


@pytest.mark.asyncio
async def test_get_music(client_factory):
    store = InMemoryMusicSettings(
        MusicSettingsDTO(enabled=True, url="https://cdn.example.com/song.mp3", title="Our Song")
    )

    async with client_factory({get_music_read_model: lambda: store}) as client:
        response = await client.get(MUSIC_URL)

    assert response.status_code == 200
    assert response.json() == {
        "enabled": True,
        "url": "https://cdn.example.com/song.mp3",
        "title": "Our Song",
    }


@pytest.mark.asyncio
async def test_get_music_defaults_when_store_fails(client_factory):
    store = InMemoryMusicSettings(MusicSettingsDTO(enabled=True, url="x", title="y"))
    store.fail = True

    async with client_factory({get_music_read_model: lambda: store}) as client:
        response = await client.get(MUSIC_URL)

    assert response.status_code == 200
    assert response.json() == {"enabled": False, "url": "", "title": ""}
