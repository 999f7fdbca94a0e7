#!/usr/bin/env python3
"""
Reset a user's password in the Fritter SQLite database.

This script does not read or reveal any existing password.  It stores a
new PBKDF2 hash for the given username.  The database is the one named
by ``DATABASE_URL`` unless ``--db`` is given.

Usage:
    python reset_password.py --username alice --password "NewStrongPass!234"

If --password is omitted, you will be prompted to enter it securely.
"""

import argparse
import asyncio
import getpass
import os
import sys

from fritter_api.app.core.config import settings
from fritter_api.app.services.user_service import UserService


def main():
    ap = argparse.ArgumentParser(description="Reset Fritter user password (SQLite).")
    ap.add_argument("--db", help="Path to SQLite DB file (defaults to DATABASE_URL)")
    ap.add_argument("--username", required=True, help="Username to update")
    ap.add_argument("--password", help="New password. If omitted, you'll be prompted securely.")
    args = ap.parse_args()

    if args.db:
        if not os.path.exists(args.db):
            print(f"[!] DB not found: {args.db}", file=sys.stderr)
            sys.exit(1)
        settings.database_url = os.path.abspath(args.db)

    new_password = args.password or getpass.getpass("Enter NEW password: ")
    if not new_password:
        print("[!] Empty password is not allowed.", file=sys.stderr)
        sys.exit(1)

    user = asyncio.run(UserService.get_by_username(args.username))
    if user is None:
        print(f"[!] No user found with username: {args.username}", file=sys.stderr)
        sys.exit(2)

    asyncio.run(UserService.set_password(user.id, new_password))
    print(f"[+] Password updated for user: {user.username}")


if __name__ == "__main__":
    main()
