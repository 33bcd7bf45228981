"""Image hosting. Photos go to Cloudinary over its REST API and come back as URLs."""

import hashlib
import logging
import time
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Protocol
from urllib.parse import unquote, urlparse

import httpx

from src.config.settings import settings
from src.errors import InvalidImageError, UpstreamServiceError

logger = logging.getLogger(__name__)

CLOUDINARY_API_URL = "https://api.cloudinary.com/v1_1"
# longest side capped at 1280px, re-encoded at good quality
UPLOAD_TRANSFORMATION = "c_limit,h_1280,w_1280/q_auto:good"


@dataclass(frozen=True)
class StoredImage:
    url: str
    public_id: str


class ImageStore(ABC):
    @abstractmethod
    async def upload(self, data: bytes, content_type: str, filename: str = "photo") -> StoredImage:
        """Store image bytes and return a stable public URL."""
        raise NotImplementedError

    @abstractmethod
    async def delete(self, photo_url: str) -> bool:
        """Delete the image behind a URL. Returns False when nothing was deleted."""
        raise NotImplementedError


def public_id_from_url(photo_url: str, folder: str = "") -> str:
    """The stored object's id: the URL's trailing path segment without extension."""
    path = urlparse(photo_url).path
    name = unquote(path.rstrip("/").rsplit("/", 1)[-1])
    stem = name.rsplit(".", 1)[0] if "." in name else name
    return f"{folder}/{stem}" if folder else stem


class CloudinaryConfig(Protocol):
    cloudinary_cloud_name: str
    cloudinary_api_key: str
    cloudinary_api_secret: str
    cloudinary_folder: str
    upload_timeout_seconds: float


class CloudinaryImageStore(ImageStore):
    def __init__(
        self,
        config: CloudinaryConfig = settings,
        http_client_class: type[httpx.AsyncClient] = httpx.AsyncClient,
    ):
        self._config = config
        self._http_client_class = http_client_class

    def _endpoint(self, action: str) -> str:
        return f"{CLOUDINARY_API_URL}/{self._config.cloudinary_cloud_name}/image/{action}"

    def sign(self, params: dict[str, str]) -> str:
        to_sign = "&".join(f"{key}={params[key]}" for key in sorted(params))
        return hashlib.sha1(
            f"{to_sign}{self._config.cloudinary_api_secret}".encode("utf-8")
        ).hexdigest()

    def _signed(self, params: dict[str, str]) -> dict[str, str]:
        params = {**params, "timestamp": str(int(time.time()))}
        return {
            **params,
            "signature": self.sign(params),
            "api_key": self._config.cloudinary_api_key,
        }

    async def upload(self, data: bytes, content_type: str, filename: str = "photo") -> StoredImage:
        form = self._signed(
            {
                "folder": self._config.cloudinary_folder,
                "transformation": UPLOAD_TRANSFORMATION,
            }
        )
        try:
            async with self._http_client_class(
                timeout=self._config.upload_timeout_seconds
            ) as client:
                response = await client.post(
                    self._endpoint("upload"),
                    data=form,
                    files={"file": (filename, data, content_type)},
                )
        except httpx.HTTPError as e:
            logger.error(f"Upload to image host failed: {e}")
            raise UpstreamServiceError("Upload failed. Please try again.", details=str(e)) from e

        if response.status_code == 400:
            logger.warning(f"Image host rejected upload: {response.text}")
            raise InvalidImageError(
                "Invalid image file. Please try a different photo or take a new one."
            )
        if response.is_error:
            logger.error(f"Image host returned {response.status_code}: {response.text}")
            raise UpstreamServiceError(
                "Upload failed. Please try again.", details=f"HTTP {response.status_code}"
            )

        payload = response.json()
        return StoredImage(url=payload["secure_url"], public_id=payload["public_id"])

    async def delete(self, photo_url: str) -> bool:
        public_id = public_id_from_url(photo_url, self._config.cloudinary_folder)
        async with self._http_client_class(timeout=self._config.upload_timeout_seconds) as client:
            response = await client.post(
                self._endpoint("destroy"),
                data=self._signed({"public_id": public_id}),
            )
            response.raise_for_status()
            return response.json().get("result") == "ok"


def get_image_store() -> ImageStore:
    """Factory for the image store. Override in tests."""
    return CloudinaryImageStore(config=settings, http_client_class=httpx.AsyncClient)
