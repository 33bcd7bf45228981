"""Error taxonomy shared by every feature and its HTTP mapping."""

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)


class WeddingError(Exception):
    """Base error. `status_code` is what the API answers with."""

    status_code = 500

    def __init__(self, message: str, details: str | None = None) -> None:
        self.message = message
        self.details = details
        super().__init__(message)

    def to_body(self) -> dict[str, str]:
        body = {"error": self.message}
        if self.details:
            body["details"] = self.details
        return body


class ValidationError(WeddingError):
    """Client-fixable input problem."""

    status_code = 400


class InvalidImageError(ValidationError):
    """The image host refused the bytes as an image."""


class AuthorizationError(WeddingError):
    """Admin password mismatch. Never says which check failed."""

    status_code = 401

    def __init__(self) -> None:
        super().__init__("Unauthorized")


class NotFoundError(WeddingError):
    status_code = 404


class UpstreamServiceError(WeddingError):
    """Image host or data store failure. `details` is only shown to the admin."""

    status_code = 500

    def public(self) -> "UpstreamServiceError":
        """The same failure without upstream detail, for guest-facing endpoints."""
        return UpstreamServiceError(self.message)


async def wedding_error_handler(request: Request, exc: WeddingError) -> JSONResponse:
    if exc.status_code >= 500:
        # a guest-facing error keeps the upstream detail on its cause
        details = exc.details or getattr(exc.__cause__, "details", None) or exc.__cause__
        logger.error(f"{request.method} {request.url.path} failed: {exc.message} ({details})")
    return JSONResponse(status_code=exc.status_code, content=exc.to_body())


async def request_validation_error_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    errors = exc.errors()
    if errors:
        first = errors[0]
        field = ".".join(str(part) for part in first.get("loc", ()) if part != "body")
        message = f"{field}: {first.get('msg')}" if field else str(first.get("msg"))
    else:
        message = "Invalid request"
    return JSONResponse(status_code=400, content={"error": message})


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(WeddingError, wedding_error_handler)  # type: ignore[arg-type]
    app.add_exception_handler(
        RequestValidationError, request_validation_error_handler  # type: ignore[arg-type]
    )
