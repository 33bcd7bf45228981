import pytest

from src.errors import ValidationError
from src.media.intake import check_image


@pytest.mark.parametrize("content_type", ["image/jpeg", "IMAGE/PNG", "image/heic", "image/avif"])
def test_accepts_images(content_type):
    assert check_image(content_type, b"\xff\xd8\xff") == content_type.lower()


@pytest.mark.parametrize("content_type", [None, "", "application/pdf", "text/plain"])
def test_rejects_non_images(content_type):
    with pytest.raises(ValidationError) as exc_info:
        check_image(content_type, b"data")

    assert exc_info.value.message.startswith("Invalid file type")


def test_rejects_empty_file():
    with pytest.raises(ValidationError) as exc_info:
        check_image("image/jpeg", b"")

    assert exc_info.value.message == "Empty file received. Please try again."
