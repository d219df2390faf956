"""
Check Twilio WhatsApp Integration

Run this script to verify Twilio is configured correctly
and can send messages.

Usage: python scripts/check_twilio.py
"""

import asyncio
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from dotenv import load_dotenv

# Load environment variables before settings are read
load_dotenv()

from app.core.config import settings
from app.core.exceptions import ProviderError
from app.services.twilio_service import TwilioService


async def check_twilio_config(twilio_service: TwilioService) -> bool:
    """Check if Twilio is properly configured"""
    print("=" * 60)
    print("  Twilio Configuration Check")
    print("=" * 60 + "\n")

    print(f"Account SID: {settings.TWILIO_ACCOUNT_SID[:10]}..." if settings.TWILIO_ACCOUNT_SID else "❌ Not set")
    print(f"Auth Token: {'✅ Set' if settings.TWILIO_AUTH_TOKEN else '❌ Not set'}")
    print(f"WhatsApp Number: {twilio_service.whatsapp_number}")
    print(f"\nConfiguration valid: {'✅ Yes' if twilio_service.is_configured() else '❌ No'}\n")

    if not twilio_service.is_configured():
        print("⚠️  Please set TWILIO_ACCOUNT_SID, TWILIO_AUTH_TOKEN and TWILIO_PHONE_NUMBER in .env")
        return False

    return True


async def send_test_message(twilio_service: TwilioService):
    """Send a WhatsApp message to a number typed at the prompt"""
    print("=" * 60)
    print("  Test Message Sending")
    print("=" * 60 + "\n")

    phone = input("Enter your WhatsApp number (with country code, e.g., +15551234567): ")

    if not phone.startswith("+"):
        print("❌ Phone number must start with + and country code")
        return

    print(f"\n📤 Sending test message to {phone}...")

    try:
        sent = await twilio_service.send_message(
            phone,
            "🧪 Test message from the WhatsApp verification relay. If you received this, Twilio is working! ✅"
        )
    except ProviderError as e:
        print(f"\n❌ Failed to send message")
        print(f"Error: {e.details}")
        return

    print(f"\n✅ Message sent successfully!")
    print(f"Message SID: {sent.sid}")
    print(f"Status: {sent.status}")
    print("\n📱 Check your WhatsApp!")


async def main():
    print("\n🧪 Twilio Integration Check\n")

    twilio_service = TwilioService.from_settings()
    try:
        if not await check_twilio_config(twilio_service):
            print("\n❌ Configuration check failed. Please fix .env file and try again.")
            return

        send = input("\nDo you want to send a test message? (y/n): ")
        if send.lower() == "y":
            await send_test_message(twilio_service)
        else:
            print("\n✅ Configuration check passed!")

        print("\nNext steps:")
        print(f"1. Start server: uvicorn app.main:app --port {settings.PORT}")
        print(f"2. POST /api/auth/send-code with your phone number")
        print(f"3. Mint a token for /api/whatsapp/send: python scripts/issue_token.py <subject>")
        print("\n" + "=" * 60 + "\n")
    finally:
        await twilio_service.close()


if __name__ == "__main__":
    asyncio.run(main())
