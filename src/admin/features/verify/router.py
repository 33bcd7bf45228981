from fastapi import APIRouter, Depends
from pydantic import BaseModel

from src.admin.auth import AdminGate, get_admin_gate

router = APIRouter()

VERIFY_ADMIN_URL = "/api/admin/verify"


class VerifyRequest(BaseModel):
    password: str = ""


class VerifyResponse(BaseModel):
    success: bool


@router.post(VERIFY_ADMIN_URL, response_model=VerifyResponse)
async def verify_admin(
    request: VerifyRequest,
    gate: AdminGate = Depends(get_admin_gate),
) -> VerifyResponse:
    """
    Check the admin password so the dashboard can unlock itself.

    Nothing is issued: every privileged endpoint takes the password again.
    """
    gate.verify(request.password)
    return VerifyResponse(success=True)
