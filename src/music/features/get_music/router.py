import logging

from fastapi import APIRouter, Depends

from src.music.dtos import MusicSettingsDTO
from src.music.repository.read_models import MusicSettingsReadModel, SqlMusicSettingsReadModel
from src.music.schemas import MusicSettingsResponse

logger = logging.getLogger(__name__)

router = APIRouter()

MUSIC_URL = "/api/music"


def get_music_read_model() -> MusicSettingsReadModel:
    """Dependency to get music settings read model instance."""
    return SqlMusicSettingsReadModel()


@router.get(MUSIC_URL, response_model=MusicSettingsResponse)
async def get_music(
    read_model: MusicSettingsReadModel = Depends(get_music_read_model),
) -> MusicSettingsResponse:
    """
    Background music settings for visitor pages.
    Always answers 200: a store failure falls back to 'no music'.
    """
    try:
        music = await read_model.get_music_settings()
    except Exception as e:
        logger.error(f"Error fetching music settings: {e}")
        music = MusicSettingsDTO()
    return MusicSettingsResponse.from_dto(music)
