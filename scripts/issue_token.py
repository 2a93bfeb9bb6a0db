#!/usr/bin/env python3
"""
Mint a custom sign-in token for a user id.

The token can be exported as IDENTITY__INITIAL_TOKEN so the next session
signs in as that user instead of a fresh anonymous one.

Example:
    python scripts/issue_token.py --user-id 3f2b... --days 30
"""

from __future__ import annotations

import argparse
import uuid
from datetime import timedelta

from labelsheet.core.config import get_settings
from labelsheet.modules.identity import create_custom_token


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Issue a custom sign-in token")
    parser.add_argument("--user-id", help="user id to embed; a new one is generated when omitted")
    parser.add_argument("--days", type=int, default=None, help="token lifetime in days")
    return parser.parse_args()


def main() -> None:
    args = parse_args()
    settings = get_settings()
    user_id = args.user_id or str(uuid.uuid4())
    expires = timedelta(days=args.days) if args.days else None
    token = create_custom_token(user_id, settings.identity, expires)
    print(f"user id: {user_id}")
    print(f"IDENTITY__INITIAL_TOKEN={token}")


if __name__ == "__main__":
    main()
