from src.errors import ValidationError

VALID_IMAGE_TYPES = {
    "image/jpeg",
    "image/png",
    "image/gif",
    "image/webp",
    "image/heic",
    "image/heif",
}


def check_image(content_type: str | None, data: bytes) -> str:
    """Reject non-image and empty uploads. Returns the content type to forward."""
    content_type = (content_type or "").lower()
    if content_type not in VALID_IMAGE_TYPES and not content_type.startswith("image/"):
        raise ValidationError(
            "Invalid file type. Please upload an image (JPEG, PNG, GIF, or WebP)."
        )
    if not data:
        raise ValidationError("Empty file received. Please try again.")
    return content_type
