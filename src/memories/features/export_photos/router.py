from datetime import UTC, datetime

import httpx
from fastapi import APIRouter, Depends
from fastapi.responses import Response

from src.admin.auth import require_admin
from src.config.settings import settings
from src.memories.features.export_photos.exporter import PhotoExporter
from src.memories.repository.read_models import SqlSubmissionReadModel, SubmissionReadModel

router = APIRouter()

EXPORT_PHOTOS_URL = "/api/submissions/export"


def get_photo_exporter() -> PhotoExporter:
    """Dependency to get the photo exporter. Override in tests."""
    return PhotoExporter(
        http_client_class=httpx.AsyncClient,
        delay_seconds=settings.export_delay_seconds,
    )


def get_export_read_model() -> SubmissionReadModel:
    return SqlSubmissionReadModel()


@router.get(EXPORT_PHOTOS_URL, dependencies=[Depends(require_admin)])
async def export_photos(
    exporter: PhotoExporter = Depends(get_photo_exporter),
    read_model: SubmissionReadModel = Depends(get_export_read_model),
) -> Response:
    """
    Every photo on the wall as one ZIP. Requires ?password=.
    Photos that cannot be downloaded are skipped and counted in X-Export-Failed.
    """
    submissions = await read_model.list_submissions()
    archive, report = await exporter.export_to_zip(submissions)
    stamp = datetime.now(UTC).strftime("%Y%m%d")
    return Response(
        content=archive,
        media_type="application/zip",
        headers={
            "Content-Disposition": f'attachment; filename="wedding_memories_{stamp}.zip"',
            "X-Export-Written": str(len(report.written)),
            "X-Export-Failed": str(len(report.failed)),
        },
    )
