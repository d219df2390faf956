from fastapi.testclient import TestClient

from app.core.config import settings
from app.main import create_app
from tests.fakes import FakeSender

PHONE = "+15551234567"


def test_send_code_delivers_code_over_whatsapp(client, sender):
    response = client.post("/api/auth/send-code", json={"phoneNumber": PHONE})

    assert response.status_code == 200
    data = response.json()
    assert data["success"] is True
    assert data["message"] == "Verification code sent"
    assert data["messageSid"].startswith("SM")
    assert len(data["code"]) == 6

    assert sender.sent == [{
        "to": f"whatsapp:{PHONE}",
        "body": f"Your verification code is: {data['code']}",
    }]


def test_send_code_then_verify_then_replay(client):
    code = client.post("/api/auth/send-code", json={"phoneNumber": PHONE}).json()["code"]

    response = client.post("/api/auth/verify-code", json={"phoneNumber": PHONE, "code": code})
    assert response.status_code == 200
    assert response.json() == {"success": True, "message": "Code verified"}

    replay = client.post("/api/auth/verify-code", json={"phoneNumber": PHONE, "code": code})
    assert replay.status_code == 400
    assert replay.json()["error"] == "Invalid or expired code"


def test_send_code_requires_phone_number(client, sender):
    for payload in ({}, {"phoneNumber": ""}, {"phoneNumber": "   "}):
        response = client.post("/api/auth/send-code", json=payload)
        assert response.status_code == 400
        assert response.json()["error"] == "Phone number is required"

    assert sender.sent == []


def test_send_code_provider_failure(store):
    app = create_app(code_store=store, message_sender=FakeSender(error="Authenticate"))

    with TestClient(app) as client:
        response = client.post("/api/auth/send-code", json={"phoneNumber": PHONE})

    assert response.status_code == 500
    data = response.json()
    assert data["error"] == "Failed to send verification code"
    assert data["details"] == "Authenticate"


def test_send_code_hides_code_when_disabled(client, monkeypatch):
    monkeypatch.setattr(settings, "EXPOSE_VERIFICATION_CODE", False)

    response = client.post("/api/auth/send-code", json={"phoneNumber": PHONE})

    assert response.status_code == 200
    assert "code" not in response.json()


def test_verify_code_incorrect_then_correct(client):
    code = client.post("/api/auth/send-code", json={"phoneNumber": PHONE}).json()["code"]
    wrong = "000000" if code != "000000" else "111111"

    response = client.post("/api/auth/verify-code", json={"phoneNumber": PHONE, "code": wrong})
    assert response.status_code == 400
    assert response.json()["error"] == "Incorrect code"

    response = client.post("/api/auth/verify-code", json={"phoneNumber": PHONE, "code": code})
    assert response.status_code == 200


def test_verify_code_expired(client, clock):
    code = client.post("/api/auth/send-code", json={"phoneNumber": PHONE}).json()["code"]

    clock.advance(5 * 60 + 1)

    response = client.post("/api/auth/verify-code", json={"phoneNumber": PHONE, "code": code})
    assert response.status_code == 400
    assert response.json()["error"] == "Invalid or expired code"


def test_verify_code_unknown_number(client):
    response = client.post("/api/auth/verify-code", json={"phoneNumber": "+15559999999", "code": "123456"})

    assert response.status_code == 400
    assert response.json()["error"] == "Invalid or expired code"


def test_verify_code_requires_both_fields(client):
    for payload in ({}, {"phoneNumber": PHONE}, {"code": "123456"}, {"phoneNumber": "", "code": "123456"}):
        response = client.post("/api/auth/verify-code", json=payload)
        assert response.status_code == 400
        assert response.json()["error"] == "Phone number and code are required"


def test_second_send_code_invalidates_first(client):
    first = client.post("/api/auth/send-code", json={"phoneNumber": PHONE}).json()["code"]
    second = client.post("/api/auth/send-code", json={"phoneNumber": PHONE}).json()["code"]

    if first != second:
        response = client.post("/api/auth/verify-code", json={"phoneNumber": PHONE, "code": first})
        assert response.json()["error"] == "Incorrect code"

    response = client.post("/api/auth/verify-code", json={"phoneNumber": PHONE, "code": second})
    assert response.status_code == 200


def test_app_uses_injected_store(store, sender):
    app = create_app(code_store=store, message_sender=sender)

    with TestClient(app) as client:
        response = client.post("/api/auth/send-code", json={"phoneNumber": PHONE})

        assert response.status_code == 200
        assert app.state.code_store is store
        assert app.state.message_sender is sender
        assert PHONE in store
