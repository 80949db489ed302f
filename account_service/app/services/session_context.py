from abc import ABC, abstractmethod
from typing import Optional

from account_service.domain.entities import User


class SessionContext(ABC):
    """
    Request-scoped authenticated identity, passed explicitly into use cases.

    Operations run inside the caller's unit of work; committing is the
    caller's job.
    """

    @abstractmethod
    async def current_user_id(self) -> Optional[int]:
        """Id of the logged-in user, or None"""
        pass

    @abstractmethod
    async def login(self, user: User) -> None:
        """Start a new session for the given user, replacing any current one"""
        pass

    @abstractmethod
    async def logout(self) -> None:
        """Destroy the session; safe to call when nobody is logged in"""
        pass
