from fastapi import APIRouter

from .features.get_music.router import router as get_music_router
from .features.update_music.router import router as update_music_router

router = APIRouter()

router.include_router(get_music_router)
router.include_router(update_music_router)
