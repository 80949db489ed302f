"""
Request Password Reset Use Case

Issues a reset token and emails the reset link.
"""

import logging

from account_service.app.services.mail_sender import MailSender, send_password_reset_email
from account_service.app.services.reset_token_manager import ResetTokenManager
from account_service.app.services.unit_of_work import UnitOfWork
from .dtos import RequestPasswordResetCommand, RequestPasswordResetResponse
from .validation import ensure_valid, validate_request_password_reset

logger = logging.getLogger(__name__)

RESET_REQUESTED_MESSAGE = (
    "If your email is registered, you will receive a password reset link shortly"
)


class RequestPasswordResetUseCase:
    """
    Use case for requesting password reset.

    Business Rules:
    - No email enumeration: the response is identical whether or not the
      email is registered, and whether or not the email was delivered
    - Token is persisted before the email goes out
    - A failed send is logged, not reported to the caller
    - Store failures propagate
    """

    def __init__(self, uow: UnitOfWork, mail_sender: MailSender, reset_url: str):
        self.uow = uow
        self.mail_sender = mail_sender
        self.reset_url = reset_url

    def _response(self) -> RequestPasswordResetResponse:
        return RequestPasswordResetResponse(message=RESET_REQUESTED_MESSAGE)

    async def execute(
        self, command: RequestPasswordResetCommand
    ) -> RequestPasswordResetResponse:
        """
        Execute request password reset use case.

        Raises:
            ValidationError: email is malformed
        """
        ensure_valid(validate_request_password_reset(command))

        async with self.uow:
            user = await self.uow.users.get_by_email(command.email)

            if user is None:
                logger.info("Password reset requested for unregistered email")
                return self._response()

            user_id, email = user.id, user.email
            token = await ResetTokenManager(self.uow).issue(user_id)
            await self.uow.commit()

        sent = await send_password_reset_email(self.mail_sender, email, token, self.reset_url)
        if not sent:
            logger.error(f"Failed to send password reset email for user {user_id}")

        return self._response()
