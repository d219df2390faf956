"""
app/services/verification_service.py

Purpose: Verification code flow

- Issues a code and delivers it over WhatsApp
- Checks a supplied code and maps rejections to CodeMismatchError
"""

from typing import Tuple

from app.core.exceptions import CodeMismatchError, ProviderError, ValidationError
from app.core.logging import get_logger, LogContext
from app.core.config import settings
from app.services.code_store import VerificationCodeStore, VerifyResult
from app.services.message_sender import SentMessage
from app.services.messaging_service import MessagingService
from utils.constants import (
    PHONE_REQUIRED_ERROR,
    PHONE_AND_CODE_REQUIRED_ERROR,
    INVALID_OR_EXPIRED_CODE_ERROR,
    INCORRECT_CODE_ERROR,
    SEND_CODE_FAILED_ERROR,
)
from utils.validation_utils import is_blank
from utils.whatsapp_utils import format_verification_message

logger = get_logger(__name__)


class VerificationService:
    """Ties the code store to WhatsApp delivery."""

    def __init__(self, store: VerificationCodeStore, messaging: MessagingService):
        self.store = store
        self.messaging = messaging

    async def send_code(self, phone_number: str) -> Tuple[str, SentMessage]:
        """
        Issues a code for phone_number and sends it over WhatsApp.

        Raises:
            ValidationError: phone_number missing
            ProviderError: delivery failed (the issued code stays pending)
        """
        if is_blank(phone_number):
            raise ValidationError(PHONE_REQUIRED_ERROR)

        code = self.store.issue(phone_number)
        if settings.is_development:
            logger.debug(f"Issued verification code {code}", extra={"phone_number": phone_number})

        # LogContext is process-global, so it is not held across the await
        try:
            sent = await self.messaging.dispatch(phone_number, format_verification_message(code))
        except ProviderError as e:
            raise ProviderError(SEND_CODE_FAILED_ERROR, details=e.details) from e

        logger.info(
            "Verification code sent",
            extra={"phone_number": phone_number, "message_sid": sent.sid}
        )
        return code, sent

    def check_code(self, phone_number: str, code: str) -> None:
        """
        Verifies and consumes the pending code.

        Raises:
            ValidationError: a field is missing
            CodeMismatchError: unknown, expired or incorrect code
        """
        if is_blank(phone_number) or is_blank(code):
            raise ValidationError(PHONE_AND_CODE_REQUIRED_ERROR)

        result = self.store.verify(phone_number, code)

        with LogContext(phone_number=phone_number):
            if result is VerifyResult.INVALID_OR_EXPIRED:
                logger.info("Verification rejected: no live code")
                raise CodeMismatchError(INVALID_OR_EXPIRED_CODE_ERROR)
            if result is VerifyResult.INCORRECT_CODE:
                logger.info("Verification rejected: incorrect code")
                raise CodeMismatchError(INCORRECT_CODE_ERROR)

            logger.info("Phone number verified")
