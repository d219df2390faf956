import re

import pytest
from fastapi.testclient import TestClient

from app.core.config import Settings, settings, validate_settings
from app.main import create_app
from tests.fakes import FakeSender


def test_health(client):
    response = client.get("/health")

    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "ok"
    assert re.fullmatch(r"\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}\.\d{3}Z", data["timestamp"])


def test_process_time_header(client):
    response = client.get("/health")

    assert "X-Process-Time" in response.headers


def test_lifespan_builds_store_and_stops_sender():
    sender = FakeSender()
    app = create_app(message_sender=sender)

    with TestClient(app) as client:
        code = client.post("/api/auth/send-code", json={"phoneNumber": "+15551234567"}).json()["code"]
        assert "+15551234567" in app.state.code_store
        assert client.post(
            "/api/auth/verify-code", json={"phoneNumber": "+15551234567", "code": code}
        ).status_code == 200

    assert sender.closed


def test_startup_refused_without_provider_credentials(monkeypatch):
    monkeypatch.setattr(settings, "TWILIO_AUTH_TOKEN", None)
    app = create_app(message_sender=FakeSender())

    with pytest.raises(ValueError, match="TWILIO_AUTH_TOKEN is required"):
        with TestClient(app):
            pass


def test_validate_settings_lists_every_missing_credential():
    config = Settings(TWILIO_ACCOUNT_SID=None, TWILIO_AUTH_TOKEN=None, TWILIO_PHONE_NUMBER=None)

    with pytest.raises(ValueError) as exc_info:
        validate_settings(config)

    message = str(exc_info.value)
    assert "TWILIO_ACCOUNT_SID" in message
    assert "TWILIO_AUTH_TOKEN" in message
    assert "TWILIO_PHONE_NUMBER" in message


def test_production_requires_custom_jwt_secret():
    with pytest.raises(ValueError):
        Settings(ENVIRONMENT="production", JWT_SECRET="your-secret-key-change-in-production")


def test_failed_startup_leaves_store_stopped(monkeypatch, store):
    def broken_verifier(*args, **kwargs):
        raise RuntimeError("verifier unavailable")

    monkeypatch.setattr("app.main.JWTTokenVerifier", broken_verifier)
    app = create_app(code_store=store, message_sender=FakeSender())

    with pytest.raises(RuntimeError, match="verifier unavailable"):
        with TestClient(app):
            pass

    assert store._sweep_task is None
