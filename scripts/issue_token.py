"""
Issue a bearer token for the authenticated send endpoint

Signs with JWT_SECRET from the environment / .env file.

Usage: python scripts/issue_token.py <subject> [expires_in_seconds]
"""

import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from dotenv import load_dotenv

load_dotenv()

from app.core.security import create_access_token


def main():
    if len(sys.argv) < 2:
        print("Usage: python scripts/issue_token.py <subject> [expires_in_seconds]")
        sys.exit(1)

    subject = sys.argv[1]
    expires_in = int(sys.argv[2]) if len(sys.argv) > 2 else 3600

    print(create_access_token(subject, expires_in=expires_in))


if __name__ == "__main__":
    main()
