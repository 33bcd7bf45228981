from fastapi import APIRouter, Query
from fastapi.responses import Response

from src.config.settings import settings
from src.errors import ValidationError
from src.memories.validation import parse_table_number
from src.qr.generator import qr_filename, render_qr_png, submit_url

router = APIRouter()

QR_URL = "/api/qr"


@router.get(QR_URL)
async def table_qr(table: str | None = Query(default=None)) -> Response:
    """PNG QR code linking to the submit page, for one table or the general link."""
    table_number = parse_table_number(table)
    if table and table_number is None:
        raise ValidationError("table must be a positive integer")

    png = render_qr_png(submit_url(settings.public_url, table_number))
    return Response(
        content=png,
        media_type="image/png",
        headers={"Content-Disposition": f'inline; filename="{qr_filename(table_number)}"'},
    )
