#!/usr/bin/env python3
"""
Create Admin Script

Adds a dashboard account, creating the tables first if needed.
Usage: python scripts/create_admin.py admin@example.com
       (password is prompted for, or read from ADMIN_PASSWORD)
"""
import argparse
import getpass
import os
import sys
sys.path.insert(0, '.')

from recruit_portal.db.database import get_db_session, init_db
from recruit_portal.services.admin_service import create_admin, get_admin_by_email

MIN_PASSWORD_LENGTH = 6


def main():
    parser = argparse.ArgumentParser(description="Create a dashboard admin account")
    parser.add_argument("email")
    args = parser.parse_args()

    password = os.environ.get("ADMIN_PASSWORD") or getpass.getpass("Password: ")
    if len(password) < MIN_PASSWORD_LENGTH:
        print(f"❌ Password must be at least {MIN_PASSWORD_LENGTH} characters")
        sys.exit(1)

    init_db()
    with get_db_session() as db:
        if get_admin_by_email(db, args.email):
            print(f"⚠️  Admin {args.email} already exists")
            sys.exit(1)
        admin = create_admin(db, args.email, password)
        print(f"✅ Created admin {admin.email} (ID {admin.id})")


if __name__ == "__main__":
    main()
