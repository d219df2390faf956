"""
utils/constants.py

Purpose: Centralized static content

- Outbound message templates
- API success and error messages

(Prevents hardcoding across the codebase)
"""

# ============================================================
# OUTBOUND MESSAGES
# ============================================================

VERIFICATION_MESSAGE_TEMPLATE = "Your verification code is: {code}"

# ============================================================
# SUCCESS MESSAGES
# ============================================================

CODE_SENT_MESSAGE = "Verification code sent"
CODE_VERIFIED_MESSAGE = "Code verified"

# ============================================================
# ERROR MESSAGES
# ============================================================

PHONE_REQUIRED_ERROR = "Phone number is required"
PHONE_AND_CODE_REQUIRED_ERROR = "Phone number and code are required"
INVALID_OR_EXPIRED_CODE_ERROR = "Invalid or expired code"
INCORRECT_CODE_ERROR = "Incorrect code"
MESSAGE_FIELDS_REQUIRED_ERROR = "Phone number and message body are required"
TOKEN_REQUIRED_ERROR = "Access token required"
INVALID_TOKEN_ERROR = "Invalid or expired token"
SEND_CODE_FAILED_ERROR = "Failed to send verification code"
SEND_MESSAGE_FAILED_ERROR = "Failed to send WhatsApp message"
