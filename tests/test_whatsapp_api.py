from fastapi.testclient import TestClient

from app.core.security import create_access_token
from app.main import create_app
from tests.fakes import FakeSender

MESSAGE = {"to": "+15551234567", "body": "Your order has shipped"}


def auth_header(token):
    return {"Authorization": f"Bearer {token}"}


def test_send_requires_token(client, sender):
    response = client.post("/api/whatsapp/send", json=MESSAGE)

    assert response.status_code == 401
    assert response.json()["error"] == "Access token required"
    assert sender.sent == []


def test_send_rejects_malformed_token(client):
    response = client.post("/api/whatsapp/send", json=MESSAGE, headers=auth_header("not-a-jwt"))

    assert response.status_code == 403
    assert response.json()["error"] == "Invalid or expired token"


def test_send_rejects_expired_token(client):
    token = create_access_token("ops", expires_in=-60)

    response = client.post("/api/whatsapp/send", json=MESSAGE, headers=auth_header(token))

    assert response.status_code == 403


def test_send_rejects_foreign_signature(client):
    token = create_access_token("ops", secret="some-other-secret-of-sufficient-length")

    response = client.post("/api/whatsapp/send", json=MESSAGE, headers=auth_header(token))

    assert response.status_code == 403


def test_send_with_valid_token_missing_fields(client):
    token = create_access_token("ops")

    for payload in ({}, {"to": "+15551234567"}, {"body": "hi"}, {"to": "", "body": "hi"}):
        response = client.post("/api/whatsapp/send", json=payload, headers=auth_header(token))
        assert response.status_code == 400
        assert response.json()["error"] == "Phone number and message body are required"


def test_send_with_valid_token(client, sender):
    token = create_access_token("ops")

    response = client.post("/api/whatsapp/send", json=MESSAGE, headers=auth_header(token))

    assert response.status_code == 200
    data = response.json()
    assert data["success"] is True
    assert data["messageSid"].startswith("SM")
    assert data["status"] == "queued"
    assert sender.sent == [{"to": "whatsapp:+15551234567", "body": "Your order has shipped"}]


def test_send_message_is_public(client, sender):
    response = client.post("/api/whatsapp/send-message", json={"to": "whatsapp:+15551234567", "body": "hi"})

    assert response.status_code == 200
    assert response.json()["messageSid"].startswith("SM")
    assert sender.sent[0]["to"] == "whatsapp:+15551234567"


def test_send_message_missing_fields(client):
    response = client.post("/api/whatsapp/send-message", json={"to": "+15551234567"})

    assert response.status_code == 400
    assert response.json()["error"] == "Phone number and message body are required"


def test_send_message_provider_failure(store):
    app = create_app(code_store=store, message_sender=FakeSender(error="Twilio API timeout"))

    with TestClient(app) as client:
        response = client.post("/api/whatsapp/send-message", json=MESSAGE)

    assert response.status_code == 500
    assert response.json()["error"] == "Failed to send WhatsApp message"
    assert response.json()["details"] == "Twilio API timeout"


def test_send_provider_failure(store):
    app = create_app(code_store=store, message_sender=FakeSender(error="Authenticate"))
    token = create_access_token("ops")

    with TestClient(app) as client:
        response = client.post("/api/whatsapp/send", json=MESSAGE, headers=auth_header(token))

    assert response.status_code == 500
    assert response.json()["error"] == "Failed to send WhatsApp message"
    assert response.json()["details"] == "Authenticate"
