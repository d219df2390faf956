"""
app/api/whatsapp.py

Purpose: Outbound WhatsApp message endpoints

- POST /api/whatsapp/send: bearer-token protected
- POST /api/whatsapp/send-message: public, for testing
"""

from typing import Any, Dict

from fastapi import APIRouter, Depends

from app.api.deps import get_messaging_service
from app.core.logging import get_logger
from app.core.security import require_bearer_token
from app.schemas.whatsapp import SendMessageRequest, SendMessageResponse
from app.services.messaging_service import MessagingService

logger = get_logger(__name__)
router = APIRouter(prefix="/api/whatsapp")


@router.post("/send", response_model=SendMessageResponse)
async def send_authenticated(
    payload: SendMessageRequest,
    user: Dict[str, Any] = Depends(require_bearer_token),
    messaging: MessagingService = Depends(get_messaging_service),
):
    """Sends a WhatsApp message on behalf of an authenticated caller."""
    logger.info("Authenticated send", extra={"subject": user.get("sub")})
    return await _send(payload, messaging)


@router.post("/send-message", response_model=SendMessageResponse)
async def send_public(
    payload: SendMessageRequest,
    messaging: MessagingService = Depends(get_messaging_service),
):
    """Sends a WhatsApp message without authentication."""
    return await _send(payload, messaging)


async def _send(payload: SendMessageRequest, messaging: MessagingService) -> SendMessageResponse:
    # ProviderError is logged and mapped to 500 by the app exception handlers
    sent = await messaging.dispatch(payload.to, payload.body)
    return SendMessageResponse(messageSid=sent.sid, status=sent.status)
