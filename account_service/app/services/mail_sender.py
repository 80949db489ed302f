"""
Mail Sender

Outbound email contract plus the password reset message.
"""

from abc import ABC, abstractmethod
from typing import Optional
from urllib.parse import urlencode


class MailSender(ABC):
    """Transactional email sender - application layer"""

    @abstractmethod
    async def send_email(
        self, to: str, subject: str, text: str, html: Optional[str] = None
    ) -> bool:
        """Send one message. Returns False when delivery could not be handed off."""
        pass


PASSWORD_RESET_SUBJECT = "Password Reset Request"

PASSWORD_RESET_TEXT = """Hello,

You requested to reset your password. Please click on the link below to reset your password:

{link}

If you did not request a password reset, please ignore this email and your password will remain unchanged.

This link will expire in 1 hour.
"""

PASSWORD_RESET_HTML = """<p>Hello,</p>
<p>You requested to reset your password. Please click on the link below to reset your password:</p>
<p><a href="{link}" target="_blank">Reset Password</a></p>
<p>If you did not request a password reset, please ignore this email and your password will remain unchanged.</p>
<p>This link will expire in 1 hour.</p>
"""


def build_reset_link(reset_url: str, token: str) -> str:
    return f"{reset_url}?{urlencode({'token': token})}"


async def send_password_reset_email(
    sender: MailSender, to: str, token: str, reset_url: str
) -> bool:
    """
    Send the reset link to a user.

    Args:
        sender: Mail sender to deliver through
        to: Recipient email address
        token: Plain text reset token
        reset_url: Reset page URL; the token is appended as a query parameter

    Returns:
        Whatever the sender reports
    """
    link = build_reset_link(reset_url, token)
    return await sender.send_email(
        to,
        PASSWORD_RESET_SUBJECT,
        PASSWORD_RESET_TEXT.format(link=link),
        PASSWORD_RESET_HTML.format(link=link),
    )
