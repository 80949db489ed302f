"""
Reset Password Use Case

Sets a new password using a valid reset token.
"""

import logging
from typing import Optional

from account_service.app.services.password_hasher import PasswordHasher
from account_service.app.services.reset_token_manager import ResetTokenManager
from account_service.app.services.unit_of_work import UnitOfWork
from account_service.domain.errors import InvalidTokenError, NotFoundError, TokenRejection
from .dtos import ResetPasswordCommand, ResetPasswordResponse
from .validation import ensure_valid, validate_reset_password

logger = logging.getLogger(__name__)


class ResetPasswordUseCase:
    """
    Use case for completing a password reset.

    Business Rules:
    - New password follows the registration strength rules
    - password and confirmPassword must match
    - Token must exist, be unused and unexpired (checked in that order)
    - Token is consumed only after the password update succeeded
    - If a concurrent reset consumed the token first, the password update
      is rolled back and the token reported as already used
    - No automatic login
    """

    def __init__(self, uow: UnitOfWork, hasher: Optional[PasswordHasher] = None):
        self.uow = uow
        self.hasher = hasher or PasswordHasher()

    async def execute(self, command: ResetPasswordCommand) -> ResetPasswordResponse:
        """
        Execute reset password use case.

        Raises:
            ValidationError: password rules or confirmation failed
            InvalidTokenError: token unknown, used or expired
            NotFoundError: token owner no longer exists
        """
        ensure_valid(validate_reset_password(command))

        async with self.uow:
            tokens = ResetTokenManager(self.uow)
            reset_token = await tokens.validate(command.token)

            updated = await self.uow.users.update_password(
                reset_token.user_id, self.hasher.hash(command.password)
            )
            if not updated:
                raise NotFoundError(f"User {reset_token.user_id} not found")

            if not await tokens.consume(reset_token.id):
                await self.uow.rollback()
                raise InvalidTokenError(TokenRejection.used)

            await self.uow.commit()
            logger.info(f"Password reset completed for user {reset_token.user_id}")

        return ResetPasswordResponse(message="Password has been reset successfully")
