from types import SimpleNamespace

import pytest

from src.admin.auth import AdminGate
from src.errors import AuthorizationError


def gate(password: str) -> AdminGate:
    return AdminGate(config=SimpleNamespace(admin_password=password))


def test_accepts_matching_password():
    assert gate("s3cret").is_valid("s3cret") is True


@pytest.mark.parametrize("candidate", [None, "", "s3cre", "S3CRET", "s3cret "])
def test_rejects_anything_else(candidate):
    assert gate("s3cret").is_valid(candidate) is False


@pytest.mark.parametrize("candidate", [None, "", "anything"])
def test_unconfigured_password_rejects_everyone(candidate):
    assert gate("").is_valid(candidate) is False


def test_verify_raises_unauthorized():
    with pytest.raises(AuthorizationError) as exc_info:
        gate("s3cret").verify("nope")

    assert exc_info.value.status_code == 401
    assert exc_info.value.to_body() == {"error": "Unauthorized"}
