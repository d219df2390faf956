"""
app/api/deps.py

Purpose: Request-scoped access to application services

Services are constructed once in the lifespan and kept on app.state.
"""

from fastapi import Request

from app.services.code_store import VerificationCodeStore
from app.services.messaging_service import MessagingService
from app.services.verification_service import VerificationService


def get_code_store(request: Request) -> VerificationCodeStore:
    return request.app.state.code_store


def get_messaging_service(request: Request) -> MessagingService:
    return MessagingService(request.app.state.message_sender)


def get_verification_service(request: Request) -> VerificationService:
    return VerificationService(
        store=get_code_store(request),
        messaging=get_messaging_service(request),
    )
