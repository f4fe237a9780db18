"""
Notification Service - confirmation email for new applications.

Sent once, after the response has been produced (FastAPI background
task). Delivery problems are logged and never reach the applicant.
"""

import hashlib
import html
import logging
from email.message import EmailMessage
from typing import Optional

import aiosmtplib

from recruit_portal.core.config import get_settings
from recruit_portal.core.options import department_full_name

settings = get_settings()
logger = logging.getLogger(__name__)

CONFIRMATION_SUBJECT = "We received your recruitment application"


def mask_email(email: str) -> str:
    """Stable short hash so addresses don't end up in logs."""
    return hashlib.sha256(email.lower().encode("utf-8")).hexdigest()[:12]


def recipient_for(recruit: dict) -> Optional[str]:
    """Personal email first, institutional email as fallback."""
    return recruit.get("personal_email") or recruit.get("gsuite_email") or None


def build_confirmation_message(recruit: dict) -> Optional[EmailMessage]:
    to_email = recipient_for(recruit)
    if not to_email:
        return None

    first_choice = html.escape(department_full_name(recruit.get("preferred_department", "")))
    second_choice = html.escape(department_full_name(recruit.get("preferred_department_2", "")))
    first_name = html.escape(recruit.get("first_name") or "")
    student_id = html.escape(recruit.get("student_id") or "")

    body = f"""
    <html>
        <body>
            <p>Hello {first_name},</p>
            <p>Thank you for applying. We've received your application and will review it soon.</p>
            <p><strong>Student ID:</strong> {student_id}<br>
               <strong>First choice:</strong> {first_choice}<br>
               <strong>Second choice:</strong> {second_choice}</p>
            <p>If you did not submit this application, please ignore this email.</p>
        </body>
    </html>
    """

    msg = EmailMessage()
    msg["From"] = settings.mail_from
    msg["To"] = to_email
    msg["Subject"] = CONFIRMATION_SUBJECT
    msg.set_content(body, subtype="html")
    return msg


async def send_recruit_confirmation(recruit: dict) -> bool:
    """
    Best-effort send of the confirmation email. Returns True if the
    transport accepted the message. Never raises.
    """
    if not settings.mail_configured:
        logger.warning("SMTP not configured, skipping confirmation for recruit %s", recruit.get("id"))
        return False

    try:
        msg = build_confirmation_message(recruit)
        if msg is None:
            logger.warning("Recruit %s has no email address, skipping confirmation", recruit.get("id"))
            return False

        # SMTP_SECURE means implicit TLS (port 465); otherwise upgrade with STARTTLS on 587
        use_tls = settings.smtp_secure
        start_tls = not settings.smtp_secure and settings.smtp_port == 587
        await aiosmtplib.send(
            msg,
            hostname=settings.smtp_host,
            port=settings.smtp_port,
            username=settings.smtp_user or None,
            password=settings.smtp_pass or None,
            use_tls=use_tls,
            start_tls=start_tls,
        )
        logger.info("Confirmation email sent to %s", mask_email(msg["To"]))
        return True
    except Exception as e:
        logger.error("Failed to send confirmation for recruit %s: %s", recruit.get("id"), e)
        return False
