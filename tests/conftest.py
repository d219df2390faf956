import os

# Settings are read at import time; configure before the app is imported
os.environ.setdefault("ENVIRONMENT", "development")
os.environ.setdefault("TWILIO_ACCOUNT_SID", "ACtest00000000000000000000000000")
os.environ.setdefault("TWILIO_AUTH_TOKEN", "test-auth-token")
os.environ.setdefault("TWILIO_PHONE_NUMBER", "+14155238886")
os.environ.setdefault("JWT_SECRET", "test-jwt-secret-that-is-long-enough-for-hs256")

import pytest
from fastapi.testclient import TestClient

from app.main import create_app
from app.services.code_store import InMemoryVerificationCodeStore
from tests.fakes import FakeClock, FakeSender


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def store(clock):
    return InMemoryVerificationCodeStore(ttl_seconds=300, sweep_interval_seconds=60, clock=clock)


@pytest.fixture
def sender():
    return FakeSender()


@pytest.fixture
def client(store, sender):
    app = create_app(code_store=store, message_sender=sender)
    with TestClient(app) as test_client:
        yield test_client
