"""
app/schemas/whatsapp.py

Purpose: Outbound WhatsApp message schemas
"""

from pydantic import BaseModel, Field
from typing import Optional


class SendMessageRequest(BaseModel):
    to: Optional[str] = Field(None, description="Recipient phone number or whatsapp: address")
    body: Optional[str] = Field(None, description="Message text")

    class Config:
        json_schema_extra = {
            "example": {"to": "+15551234567", "body": "Hello from the relay"}
        }


class SendMessageResponse(BaseModel):
    success: bool = True
    messageSid: Optional[str] = None
    status: Optional[str] = None
