from typing import Optional, Any

from utils.constants import (
    TOKEN_REQUIRED_ERROR,
    INVALID_TOKEN_ERROR,
    INVALID_OR_EXPIRED_CODE_ERROR,
    SEND_MESSAGE_FAILED_ERROR,
)

class WAVerifyError(Exception):
    """
    Base exception for the verification relay.
    """
    def __init__(self, message: str, code: str = "INTERNAL_ERROR", status_code: int = 500, details: Optional[Any] = None):
        self.message = message
        self.code = code
        self.status_code = status_code
        self.details = details
        super().__init__(self.message)

class ValidationError(WAVerifyError):
    """
    Raised when request fields are missing or malformed.
    """
    def __init__(self, message: str = "Validation error", details: Optional[Any] = None):
        super().__init__(message, code="VALIDATION_ERROR", status_code=400, details=details)

class AuthenticationError(WAVerifyError):
    """
    Raised when no bearer credential is presented.
    """
    def __init__(self, message: str = TOKEN_REQUIRED_ERROR, details: Optional[Any] = None):
        super().__init__(message, code="AUTHENTICATION_REQUIRED", status_code=401, details=details)

class ForbiddenError(WAVerifyError):
    """
    Raised when a bearer credential is invalid or expired.
    """
    def __init__(self, message: str = INVALID_TOKEN_ERROR, details: Optional[Any] = None):
        super().__init__(message, code="FORBIDDEN", status_code=403, details=details)

class CodeMismatchError(WAVerifyError):
    """
    Raised when a verification code is wrong, unknown or expired.
    """
    def __init__(self, message: str = INVALID_OR_EXPIRED_CODE_ERROR, details: Optional[Any] = None):
        super().__init__(message, code="CODE_MISMATCH", status_code=400, details=details)

class ProviderError(WAVerifyError):
    """
    Raised when the messaging provider rejects or fails a send.
    """
    def __init__(self, message: str = SEND_MESSAGE_FAILED_ERROR, details: Optional[Any] = None):
        super().__init__(message, code="PROVIDER_ERROR", status_code=500, details=details)
