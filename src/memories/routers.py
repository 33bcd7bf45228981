from fastapi import APIRouter

from .features.delete_memory.router import router as delete_memory_router
from .features.export_photos.router import router as export_photos_router
from .features.list_memories.router import router as list_memories_router
from .features.stream_changes.router import router as stream_changes_router
from .features.submit_memory.router import router as submit_memory_router

router = APIRouter()

router.include_router(export_photos_router)
router.include_router(stream_changes_router)
router.include_router(list_memories_router)
router.include_router(submit_memory_router)
router.include_router(delete_memory_router)
