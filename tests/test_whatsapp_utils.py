import pytest

from utils.whatsapp_utils import to_whatsapp_address, format_verification_message


@pytest.mark.parametrize(
    "value, expected",
    [
        ("+15551234567", "whatsapp:+15551234567"),
        ("whatsapp:+15551234567", "whatsapp:+15551234567"),
        ("  +15551234567 ", "whatsapp:+15551234567"),
    ],
)
def test_to_whatsapp_address(value, expected):
    assert to_whatsapp_address(value) == expected


def test_to_whatsapp_address_is_idempotent():
    once = to_whatsapp_address("+447700900123")
    assert to_whatsapp_address(once) == once


def test_format_verification_message():
    assert format_verification_message("482913") == "Your verification code is: 482913"
