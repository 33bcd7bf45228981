from fastapi import APIRouter

from .features.upload.router import router as upload_router

router = APIRouter()

router.include_router(upload_router)
