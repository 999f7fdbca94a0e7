#!/usr/bin/env python3
"""
Issue a bearer token for an existing user.

Useful for calling the API from scripts without going through
``POST /api/v1/users/login``.

Usage:
    python create_token.py alice --days 30
"""

import argparse
import asyncio
import sys

from fritter_api.app.core.db import init_db
from fritter_api.app.core.security import create_access_token
from fritter_api.app.services.user_service import UserService


def main():
    ap = argparse.ArgumentParser(description="Create an access token for a Fritter user.")
    ap.add_argument("username", help="Username to issue the token for")
    ap.add_argument("--days", type=int, default=365, help="Token lifetime in days (default: 365)")
    args = ap.parse_args()

    init_db()
    user = asyncio.run(UserService.get_by_username(args.username))
    if user is None:
        print(f"[!] No user found with username: {args.username}", file=sys.stderr)
        sys.exit(2)

    print(create_access_token({"sub": user.username}, expires_delta=args.days * 24 * 60 * 60))


if __name__ == "__main__":
    main()
