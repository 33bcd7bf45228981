"""Admin gate: one shared password, checked on every privileged request."""

import hmac
import logging
from typing import Protocol

from fastapi import Depends, Query

from src.config.settings import settings
from src.errors import AuthorizationError

logger = logging.getLogger(__name__)


class AdminConfig(Protocol):
    admin_password: str


class AdminGate:
    def __init__(self, config: AdminConfig = settings):
        self._config = config

    def is_valid(self, password: str | None) -> bool:
        expected = self._config.admin_password
        if not expected:
            logger.warning("ADMIN_PASSWORD is not configured, rejecting admin request")
            return False
        if not password:
            return False
        return hmac.compare_digest(password.encode("utf-8"), expected.encode("utf-8"))

    def verify(self, password: str | None) -> None:
        if not self.is_valid(password):
            raise AuthorizationError()


def get_admin_gate() -> AdminGate:
    """Factory for the admin gate. Override in tests."""
    return AdminGate(config=settings)


def require_admin(
    password: str | None = Query(default=None),
    gate: AdminGate = Depends(get_admin_gate),
) -> None:
    """Dependency for endpoints that take the password as a query parameter."""
    gate.verify(password)
