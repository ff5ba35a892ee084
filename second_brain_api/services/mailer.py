# File: /second_brain_api/services/mailer.py | Version: 1.0 | Title: Logger-backed mailer (no email transport)
import logging

from second_brain_api.core.config import settings

logger = logging.getLogger(__name__)


def build_reset_link(token: str) -> str:
    return f"{settings.FRONTEND_URL.rstrip('/')}/reset-password?token={token}"


def send_password_reset(email: str, token: str) -> str:
    """Hand the reset link to the log for delivery; returns the link."""
    link = build_reset_link(token)
    logger.info("Password reset link issued", extra={"email": email, "operation": "password_reset"})
    logger.debug("Password reset link: %s", link)
    return link
