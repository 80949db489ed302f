from abc import ABC, abstractmethod
from typing import Optional

from account_service.domain.entities import AuthSession


class ISessionRepository(ABC):
    """AuthSession repository interface - application layer"""

    @abstractmethod
    async def create(self, auth_session: AuthSession) -> AuthSession:
        """Create a new session"""
        pass

    @abstractmethod
    async def get_by_session_hash(self, session_hash: str) -> Optional[AuthSession]:
        """Get session by the digest of its key"""
        pass

    @abstractmethod
    async def delete(self, session_id: int) -> bool:
        """Delete a session. Returns True if it existed."""
        pass
