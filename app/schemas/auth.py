"""
app/schemas/auth.py

Purpose: Verification code request/response schemas

Fields are optional at the schema level so missing values are reported
with the API's own 400 messages instead of a generic validation error.
"""

from pydantic import BaseModel, Field
from typing import Optional


class SendCodeRequest(BaseModel):
    phoneNumber: Optional[str] = Field(None, description="Phone number in E.164 format")

    class Config:
        json_schema_extra = {
            "example": {"phoneNumber": "+15551234567"}
        }


class SendCodeResponse(BaseModel):
    success: bool = True
    message: str
    code: Optional[str] = Field(None, description="Issued code (omitted when EXPOSE_VERIFICATION_CODE is off)")
    messageSid: Optional[str] = Field(None, description="Twilio message SID")


class VerifyCodeRequest(BaseModel):
    phoneNumber: Optional[str] = None
    code: Optional[str] = None

    class Config:
        json_schema_extra = {
            "example": {"phoneNumber": "+15551234567", "code": "482913"}
        }


class VerifyCodeResponse(BaseModel):
    success: bool = True
    message: str
