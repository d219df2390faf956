"""
app/services/twilio_service.py

Purpose: Twilio WhatsApp message sending

- Sends WhatsApp messages via the Twilio Messages REST API
- Normalizes sender/recipient to the whatsapp: address scheme
- Surfaces Twilio failures as ProviderError (no retries)
"""

import httpx
from typing import Optional

from app.core.config import Settings, settings
from app.core.exceptions import ProviderError
from app.core.logging import get_logger
from app.services.message_sender import MessageSender, SentMessage
from utils.whatsapp_utils import to_whatsapp_address

logger = get_logger(__name__)


class TwilioService(MessageSender):
    """Service for sending WhatsApp messages via Twilio"""

    def __init__(
        self,
        account_sid: str,
        auth_token: str,
        phone_number: str,
        base_url: str = "https://api.twilio.com/2010-04-01",
        timeout: float = 10.0,
        client: Optional[httpx.AsyncClient] = None,
    ):
        self.account_sid = account_sid
        self.auth_token = auth_token
        self.whatsapp_number = to_whatsapp_address(phone_number) if phone_number else None  # whatsapp:+14155238886
        self.messages_url = f"{base_url.rstrip('/')}/Accounts/{account_sid}/Messages.json"
        self._client = client or httpx.AsyncClient(timeout=timeout)

    @classmethod
    def from_settings(cls, config: Optional[Settings] = None) -> "TwilioService":
        config = config or settings
        return cls(
            account_sid=config.TWILIO_ACCOUNT_SID,
            auth_token=config.TWILIO_AUTH_TOKEN,
            phone_number=config.TWILIO_PHONE_NUMBER,
            base_url=config.TWILIO_API_BASE_URL,
            timeout=config.TWILIO_TIMEOUT_SECONDS,
        )

    async def send_message(self, to: str, body: str) -> SentMessage:
        """
        Sends a WhatsApp message via Twilio

        Args:
            to: Recipient (whatsapp:+15551234567 or +15551234567)
            body: Message text

        Returns:
            SentMessage(sid="SMxxx...", status="queued")

        Raises:
            ProviderError: Twilio rejected the request or was unreachable
        """
        data = {
            "From": self.whatsapp_number,
            "To": to_whatsapp_address(to),
            "Body": body,
        }

        logger.info(f"📤 Sending Twilio message to {data['To']}")

        try:
            response = await self._client.post(
                self.messages_url,
                data=data,
                auth=(self.account_sid, self.auth_token),
            )
        except httpx.TimeoutException as e:
            logger.error("Twilio API timeout")
            raise ProviderError(details="Twilio API timeout") from e
        except httpx.HTTPError as e:
            logger.error(f"Error sending Twilio message: {e}")
            raise ProviderError(details=str(e)) from e

        if response.status_code not in (200, 201):
            detail = _error_detail(response)
            logger.error(f"❌ Twilio API error: {response.status_code} - {detail}")
            raise ProviderError(details=detail)

        result = response.json()
        logger.info(f"✅ Message sent: SID={result.get('sid')}", extra={"message_sid": result.get("sid")})

        return SentMessage(sid=result.get("sid"), status=result.get("status"))

    async def close(self) -> None:
        await self._client.aclose()

    def is_configured(self) -> bool:
        """Check if Twilio is properly configured"""
        return bool(
            self.account_sid
            and self.auth_token
            and self.whatsapp_number
            and self.account_sid != "your_twilio_sid"
        )


def _error_detail(response: httpx.Response) -> str:
    # Twilio error bodies look like {"code": 21211, "message": "...", "status": 400}
    try:
        payload = response.json()
    except ValueError:
        return f"Twilio API error: {response.status_code} - {response.text}"
    message = payload.get("message") if isinstance(payload, dict) else None
    return message or f"Twilio API error: {response.status_code}"
