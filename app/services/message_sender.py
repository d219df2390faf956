"""
app/services/message_sender.py

Purpose: Messaging provider boundary

- "Send a message" capability used by dispatch
- Provider-neutral result type
- Lets tests swap the provider without touching handlers
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional


@dataclass
class SentMessage:
    """Provider acknowledgement of an accepted message."""

    sid: str
    status: Optional[str] = None


class MessageSender(ABC):
    """
    Abstract messaging provider.
    Raises ProviderError when the provider rejects or fails a send.
    """

    @abstractmethod
    async def send_message(self, to: str, body: str) -> SentMessage:
        """
        Send body to an already-normalized provider address.

        Args:
            to: Recipient address (whatsapp:+15551234567)
            body: Message text

        Returns:
            SentMessage with the provider message id and status
        """

    async def close(self) -> None:
        """Release provider resources. No-op by default."""
