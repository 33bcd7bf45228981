from fastapi import APIRouter

from .features.table_qr.router import router as table_qr_router

router = APIRouter()

router.include_router(table_qr_router)
