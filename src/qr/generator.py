import io
from urllib.parse import urlencode

import qrcode

SUBMIT_PATH = "/submit"


def submit_url(public_url: str, table_number: int | None = None) -> str:
    """Link a QR code points at: the submit page, pre-filled with a table when given."""
    url = f"{public_url.rstrip('/')}{SUBMIT_PATH}"
    if table_number:
        url = f"{url}?{urlencode({'table': table_number})}"
    return url


def render_qr_png(data: str, box_size: int = 10, border: int = 4) -> bytes:
    qr = qrcode.QRCode(
        version=None,
        error_correction=qrcode.constants.ERROR_CORRECT_M,
        box_size=box_size,
        border=border,
    )
    qr.add_data(data)
    qr.make(fit=True)
    img = qr.make_image(fill_color="black", back_color="white")

    buffer = io.BytesIO()
    img.save(buffer, format="PNG")
    return buffer.getvalue()


def qr_filename(table_number: int | None) -> str:
    return f"qr_table_{table_number}.png" if table_number else "qr_general.png"
