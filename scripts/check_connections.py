#!/usr/bin/env python3
"""
Connection Check Script

Run this to verify the database and mail transport are reachable.
Usage: python scripts/check_connections.py
"""
import asyncio
import sys
sys.path.insert(0, '.')

import aiosmtplib

from recruit_portal.db.database import test_database_connection
from recruit_portal.core.config import get_settings


async def check_smtp(settings) -> bool:
    smtp = aiosmtplib.SMTP(
        hostname=settings.smtp_host,
        port=settings.smtp_port,
        use_tls=settings.smtp_secure,
        start_tls=not settings.smtp_secure and settings.smtp_port == 587,
    )
    try:
        await smtp.connect()
        if settings.smtp_user:
            await smtp.login(settings.smtp_user, settings.smtp_pass)
        await smtp.quit()
        return True
    except aiosmtplib.SMTPException as e:
        print(f"    SMTP error: {e}")
        return False
    except OSError as e:
        print(f"    Connection error: {e}")
        return False


def main():
    settings = get_settings()
    print("=" * 50)
    print("RECRUITMENT PORTAL - CONNECTION CHECK")
    print("=" * 50)

    # Database
    print("\n[1] Checking database...")
    print(f"    URL: {settings.database_url.split('@')[-1]}")
    if test_database_connection():
        print("    ✅ Database: CONNECTED")
    else:
        print("    ❌ Database: FAILED")

    # SMTP (only if a host is set)
    print("\n[2] Checking SMTP...")
    if settings.mail_configured:
        print(f"    Host: {settings.smtp_host}:{settings.smtp_port}")
        if asyncio.run(check_smtp(settings)):
            print("    ✅ SMTP: CONNECTED")
        else:
            print("    ❌ SMTP: FAILED")
    else:
        print("    ⚠️  SMTP: SMTP_HOST not configured, confirmation emails are skipped")

    print("\n" + "=" * 50)
    print("Connection check complete!")
    print("=" * 50)


if __name__ == "__main__":
    main()
