"""
app/core/security.py

Purpose: Bearer token access control

- "Verify a credential" capability (TokenVerifier)
- HS256 JWT implementation backed by the process-wide JWT_SECRET
- FastAPI dependency gating authenticated endpoints
- Token minting for operators and tests
"""

import time
from abc import ABC, abstractmethod
from typing import Any, Dict, Optional

import jwt
from fastapi import Request
from jwt import InvalidTokenError

from app.core.config import settings
from app.core.exceptions import AuthenticationError, ForbiddenError
from app.core.logging import get_logger

logger = get_logger(__name__)


class TokenVerifier(ABC):
    """
    Abstract credential verifier.
    Raises InvalidTokenError when the credential is rejected.
    """

    @abstractmethod
    def verify(self, token: str) -> Dict[str, Any]:
        """Return the identity claims embedded in token."""


class JWTTokenVerifier(TokenVerifier):
    """Verifies signature and expiry of HS256 bearer tokens."""

    def __init__(self, secret: str, algorithm: str = "HS256"):
        self.secret = secret
        self.algorithm = algorithm

    def verify(self, token: str) -> Dict[str, Any]:
        return jwt.decode(token, self.secret, algorithms=[self.algorithm])


def create_access_token(
    subject: str,
    expires_in: Optional[int] = 3600,
    secret: Optional[str] = None,
    algorithm: Optional[str] = None,
    **claims: Any,
) -> str:
    """
    Mint a signed bearer token.

    Args:
        subject: Identity stored in the "sub" claim
        expires_in: Lifetime in seconds; None issues a token without "exp"
        secret: Signing secret (defaults to JWT_SECRET)
        algorithm: Signing algorithm (defaults to JWT_ALGORITHM)
        **claims: Extra claims to embed

    Returns:
        Encoded JWT string
    """
    now = int(time.time())
    body: Dict[str, Any] = {"sub": subject, "iat": now}
    if expires_in is not None:
        body["exp"] = now + int(expires_in)
    body.update(claims)
    return jwt.encode(
        body,
        secret or settings.JWT_SECRET,
        algorithm=algorithm or settings.JWT_ALGORITHM,
    )


def extract_bearer_token(authorization: Optional[str]) -> Optional[str]:
    """
    Returns the credential part of an "Authorization: Bearer <token>" header.
    """
    if not authorization:
        return None
    parts = authorization.split()
    if len(parts) < 2:
        return None
    return parts[1]


async def require_bearer_token(request: Request) -> Dict[str, Any]:
    """
    Dependency for authenticated routes.

    Raises:
        AuthenticationError: no bearer credential (401)
        ForbiddenError: invalid or expired credential (403)
    """
    token = extract_bearer_token(request.headers.get("Authorization"))
    if not token:
        raise AuthenticationError()

    verifier: TokenVerifier = request.app.state.token_verifier
    try:
        claims = verifier.verify(token)
    except InvalidTokenError as e:
        logger.warning(f"Rejected bearer token: {e}")
        raise ForbiddenError() from e

    # Available to downstream collaborators
    request.state.user = claims
    return claims
