import logging

from fastapi import APIRouter, Depends, File, UploadFile
from pydantic import BaseModel

from src.errors import UpstreamServiceError, ValidationError
from src.media.intake import check_image
from src.media.store import ImageStore, get_image_store

logger = logging.getLogger(__name__)

router = APIRouter()

UPLOAD_URL = "/api/upload"


class UploadResponse(BaseModel):
    url: str
    public_id: str


@router.post(UPLOAD_URL, response_model=UploadResponse)
async def upload_photo(
    file: UploadFile | None = File(default=None),
    store: ImageStore = Depends(get_image_store),
) -> UploadResponse:
    """
    Accept one photo as multipart field `file` and forward it to the image host.
    The returned URL is what a submission stores as photo_url.
    """
    if file is None:
        raise ValidationError("No file provided")

    data = await file.read()
    content_type = check_image(file.content_type, data)

    try:
        stored = await store.upload(data, content_type, filename=file.filename or "photo")
    except UpstreamServiceError as e:
        raise e.public() from e
    logger.info(f"Stored photo {stored.public_id} ({len(data)} bytes)")
    return UploadResponse(url=stored.url, public_id=stored.public_id)
