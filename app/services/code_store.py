"""
app/services/code_store.py

Purpose: Verification code storage

- Issues 6-digit codes keyed by phone number
- Single-use check-and-consume
- Lazy expiry on verify, eager expiry via a periodic sweep
- Explicit lifecycle (start sweep on startup, stop on shutdown)
"""

import asyncio
import secrets
from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Callable, Dict, Optional

from app.core.logging import get_logger
from utils.time_utils import utc_now, calculate_expiry, has_expired

logger = get_logger(__name__)

CODE_MIN = 100000
CODE_MAX = 999999


class VerifyResult(str, Enum):
    """Outcome of a verification attempt."""
    SUCCESS = "success"
    INVALID_OR_EXPIRED = "invalid_or_expired"
    INCORRECT_CODE = "incorrect_code"


@dataclass
class VerificationEntry:
    """A pending code for one phone number."""

    phone_number: str
    code: str
    expires_at: datetime


def generate_code() -> str:
    """Uniformly random code in CODE_MIN..CODE_MAX inclusive."""
    return str(CODE_MIN + secrets.randbelow(CODE_MAX - CODE_MIN + 1))


class VerificationCodeStore(ABC):
    """
    Abstract code store boundary.
    Handlers depend only on this interface, so an external shared store
    can replace the in-memory one for multi-instance deployments.
    """

    @abstractmethod
    def issue(self, phone_number: str) -> str:
        """
        Issue a new code for phone_number, replacing any pending one.

        Returns:
            The 6-digit code; the caller delivers it out-of-band.
        """

    @abstractmethod
    def verify(self, phone_number: str, supplied_code: str) -> VerifyResult:
        """Check supplied_code and consume the entry on an exact match."""

    @abstractmethod
    def sweep(self) -> int:
        """Remove expired entries and return how many were removed."""

    async def start(self) -> None:
        """Begin background maintenance. No-op by default."""

    async def stop(self) -> None:
        """End background maintenance. No-op by default."""


class InMemoryVerificationCodeStore(VerificationCodeStore):
    """
    Process-local code store.

    All mutations run on the event loop thread with no await between
    lookup and mutation, so issue/verify are atomic per phone number.
    """

    def __init__(
        self,
        ttl_seconds: float = 300,
        sweep_interval_seconds: float = 60,
        clock: Callable[[], datetime] = utc_now,
    ):
        self.ttl_seconds = ttl_seconds
        self.sweep_interval_seconds = sweep_interval_seconds
        self._clock = clock
        self._entries: Dict[str, VerificationEntry] = {}
        self._sweep_task: Optional[asyncio.Task] = None

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, phone_number: str) -> bool:
        return phone_number in self._entries

    def issue(self, phone_number: str) -> str:
        if not isinstance(phone_number, str) or not phone_number.strip():
            raise ValueError("phone_number must be a non-empty string")

        code = generate_code()
        expires_at = calculate_expiry(self._clock(), self.ttl_seconds)

        # Last write wins
        self._entries[phone_number] = VerificationEntry(
            phone_number=phone_number,
            code=code,
            expires_at=expires_at,
        )
        logger.debug(f"Code issued, expires at {expires_at.isoformat()}", extra={"phone_number": phone_number})
        return code

    def verify(self, phone_number: str, supplied_code: str) -> VerifyResult:
        entry = self._entries.get(phone_number)

        if entry is None:
            return VerifyResult.INVALID_OR_EXPIRED

        if has_expired(entry.expires_at, self._clock()):
            del self._entries[phone_number]
            return VerifyResult.INVALID_OR_EXPIRED

        if entry.code != supplied_code:
            return VerifyResult.INCORRECT_CODE

        # Consume so the code cannot be replayed
        del self._entries[phone_number]
        return VerifyResult.SUCCESS

    def sweep(self) -> int:
        now = self._clock()
        expired = [
            phone_number
            for phone_number, entry in self._entries.items()
            if has_expired(entry.expires_at, now)
        ]
        for phone_number in expired:
            del self._entries[phone_number]

        if expired:
            logger.debug(f"Swept {len(expired)} expired code(s)")
        return len(expired)

    async def start(self) -> None:
        if self._sweep_task is not None and not self._sweep_task.done():
            logger.warning("Code sweep already running")
            return

        self._sweep_task = asyncio.create_task(self._sweep_loop())
        logger.info(f"Code sweep started (every {self.sweep_interval_seconds}s)")

    async def stop(self) -> None:
        task = self._sweep_task
        if task is None:
            return

        self._sweep_task = None
        task.cancel()
        try:
            await task
        except asyncio.CancelledError:
            pass
        logger.info("Code sweep stopped")

    async def _sweep_loop(self) -> None:
        while True:
            await asyncio.sleep(self.sweep_interval_seconds)
            try:
                self.sweep()
            except Exception as e:
                logger.error(f"Code sweep failed: {e}", exc_info=True)
