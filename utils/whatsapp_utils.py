"""
utils/whatsapp_utils.py

Purpose: WhatsApp addressing helpers

- Converts phone numbers to Twilio's WhatsApp address scheme
- Builds the verification message text
"""

from utils.constants import VERIFICATION_MESSAGE_TEMPLATE

WHATSAPP_PREFIX = "whatsapp:"


def to_whatsapp_address(value: str) -> str:
    """
    Prefixes a phone number with the WhatsApp scheme marker.

    Idempotent: an address that already carries the prefix is returned
    unchanged, so to_whatsapp_address(to_whatsapp_address(x)) equals
    to_whatsapp_address(x).

    Args:
        value: Phone number (+15551234567) or address (whatsapp:+15551234567)

    Returns:
        Provider address string
    """
    value = value.strip()
    if value.startswith(WHATSAPP_PREFIX):
        return value
    return f"{WHATSAPP_PREFIX}{value}"


def format_verification_message(code: str) -> str:
    return VERIFICATION_MESSAGE_TEMPLATE.format(code=code)
