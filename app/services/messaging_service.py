"""
app/services/messaging_service.py

Purpose: Outbound WhatsApp dispatch

- Validates recipient and body
- Normalizes the recipient to the provider address scheme
- Delegates to the configured MessageSender
"""

from app.core.exceptions import ValidationError
from app.core.logging import get_logger
from app.services.message_sender import MessageSender, SentMessage
from utils.constants import MESSAGE_FIELDS_REQUIRED_ERROR
from utils.validation_utils import is_blank
from utils.whatsapp_utils import to_whatsapp_address

logger = get_logger(__name__)


class MessagingService:
    """Formats addresses and hands messages to the provider."""

    def __init__(self, sender: MessageSender):
        self.sender = sender

    async def dispatch(self, to: str, body: str) -> SentMessage:
        """
        Sends body to to via the provider.

        Returns the provider's message id and status verbatim. Provider
        failures propagate as ProviderError without retry.
        """
        if is_blank(to) or is_blank(body):
            raise ValidationError(MESSAGE_FIELDS_REQUIRED_ERROR)

        return await self.sender.send_message(to_whatsapp_address(to), body)
