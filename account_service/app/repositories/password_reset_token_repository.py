from abc import ABC, abstractmethod
from typing import Optional

from account_service.domain.entities import PasswordResetToken


class IPasswordResetTokenRepository(ABC):
    """PasswordResetToken repository interface - application layer"""

    @abstractmethod
    async def create(self, token: PasswordResetToken) -> PasswordResetToken:
        """Create a new password reset token"""
        pass

    @abstractmethod
    async def get_by_token_hash(self, token_hash: str) -> Optional[PasswordResetToken]:
        """Get password reset token by token hash"""
        pass

    @abstractmethod
    async def mark_as_used(self, token_id: int) -> bool:
        """
        Set used=True only if the token is currently unused.

        Returns True when this call made the transition.
        """
        pass
