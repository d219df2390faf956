"""
app/api/auth.py

Purpose: WhatsApp verification code endpoints

- POST /api/auth/send-code: issue a code and send it over WhatsApp
- POST /api/auth/verify-code: check and consume a code
"""

from fastapi import APIRouter, Depends

from app.api.deps import get_verification_service
from app.core.config import settings
from app.schemas.auth import SendCodeRequest, SendCodeResponse, VerifyCodeRequest, VerifyCodeResponse
from app.services.verification_service import VerificationService
from utils.constants import CODE_SENT_MESSAGE, CODE_VERIFIED_MESSAGE

router = APIRouter(prefix="/api/auth")


@router.post("/send-code", response_model=SendCodeResponse, response_model_exclude_none=True)
async def send_code(
    payload: SendCodeRequest,
    service: VerificationService = Depends(get_verification_service),
):
    """
    Generates a 6-digit code valid for five minutes and delivers it via WhatsApp.

    The code is echoed back while EXPOSE_VERIFICATION_CODE is enabled;
    production deployments should turn that off.
    """
    code, sent = await service.send_code(payload.phoneNumber)

    return SendCodeResponse(
        message=CODE_SENT_MESSAGE,
        code=code if settings.EXPOSE_VERIFICATION_CODE else None,
        messageSid=sent.sid,
    )


@router.post("/verify-code", response_model=VerifyCodeResponse)
async def verify_code(
    payload: VerifyCodeRequest,
    service: VerificationService = Depends(get_verification_service),
):
    """
    Verifies a code. A successful check consumes it; a wrong code leaves
    it pending until it expires.
    """
    service.check_code(payload.phoneNumber, payload.code)
    return VerifyCodeResponse(message=CODE_VERIFIED_MESSAGE)
