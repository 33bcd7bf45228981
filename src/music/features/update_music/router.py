import logging

from fastapi import APIRouter, Depends
from pydantic import BaseModel

from src.admin.auth import AdminGate, get_admin_gate
from src.music.dtos import MusicSettingsDTO
from src.music.repository.write_models import MusicSettingsWriteModel, SqlMusicSettingsWriteModel

logger = logging.getLogger(__name__)

router = APIRouter()

MUSIC_URL = "/api/music"


class MusicSettingsUpdate(BaseModel):
    password: str = ""
    enabled: bool = False
    url: str | None = ""
    title: str | None = ""


class UpdateResponse(BaseModel):
    success: bool


def get_music_write_model() -> MusicSettingsWriteModel:
    """Dependency to get music settings write model instance."""
    return SqlMusicSettingsWriteModel()


@router.post(MUSIC_URL, response_model=UpdateResponse)
async def update_music(
    request: MusicSettingsUpdate,
    gate: AdminGate = Depends(get_admin_gate),
    write_model: MusicSettingsWriteModel = Depends(get_music_write_model),
) -> UpdateResponse:
    """Replace the background music settings. The admin password travels in the body."""
    gate.verify(request.password)

    await write_model.save_music_settings(
        MusicSettingsDTO(
            enabled=request.enabled,
            url=(request.url or "").strip(),
            title=(request.title or "").strip(),
        )
    )
    logger.info(f"Music settings updated (enabled={request.enabled})")
    return UpdateResponse(success=True)
