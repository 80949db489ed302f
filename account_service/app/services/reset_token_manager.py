"""
Reset Token Manager

Issues, validates and consumes password reset tokens.

Token lifecycle:
    ISSUED -> CONSUMED   (mark_as_used, terminal)
    ISSUED -> EXPIRED    (clock passes expires_at, terminal, never stored)
"""

import hashlib
import logging
import secrets
from datetime import datetime
from typing import Callable

from account_service.app.services.unit_of_work import UnitOfWork
from account_service.domain.entities import PasswordResetToken, RESET_TOKEN_TTL
from account_service.domain.errors import InvalidTokenError, NotFoundError, TokenRejection

logger = logging.getLogger(__name__)

TOKEN_BYTES = 32


def hash_token(token: str) -> str:
    return hashlib.sha256(token.encode()).hexdigest()


class ResetTokenManager:
    """
    Business Rules:
    - 32 bytes of cryptographically secure randomness per token (hex encoded)
    - Only the SHA-256 digest is persisted; plaintext is returned once
    - Token expires 1 hour after issue
    - Validation order: existence, then used, then expiry
    - Consumption is a conditional update so concurrent resets cannot both win

    The manager works inside the caller's unit of work; committing is the
    caller's job.
    """

    def __init__(self, uow: UnitOfWork, now: Callable[[], datetime] = datetime.utcnow):
        self.uow = uow
        self.now = now

    async def issue(self, user_id: int) -> str:
        user = await self.uow.users.get_by_id(user_id)
        if user is None:
            raise NotFoundError(f"User {user_id} not found")

        token = secrets.token_hex(TOKEN_BYTES)
        await self.uow.password_reset_tokens.create(
            PasswordResetToken(
                user_id=user.id,
                token_hash=hash_token(token),
                used=False,
                expires_at=self.now() + RESET_TOKEN_TTL,
            )
        )
        return token

    async def validate(self, token: str) -> PasswordResetToken:
        record = await self.uow.password_reset_tokens.get_by_token_hash(hash_token(token))

        if record is None:
            reason = TokenRejection.not_found
        elif record.used:
            reason = TokenRejection.used
        elif record.is_expired(self.now()):
            reason = TokenRejection.expired
        else:
            return record

        logger.info(f"Password reset token rejected: {reason.value}")
        raise InvalidTokenError(reason)

    async def consume(self, token_id: int) -> bool:
        """
        Mark the token used.

        Returns:
            True if this call consumed the token, False if it was already used
        """
        return await self.uow.password_reset_tokens.mark_as_used(token_id)
