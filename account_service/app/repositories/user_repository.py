from abc import ABC, abstractmethod
from typing import Optional

from account_service.domain.entities import User


class IUserRepository(ABC):
    """User repository interface - application layer"""

    @abstractmethod
    async def get_by_id(self, user_id: int) -> Optional[User]:
        """Get user by ID"""
        pass

    @abstractmethod
    async def get_by_username(self, username: str) -> Optional[User]:
        """Get user by username"""
        pass

    @abstractmethod
    async def get_by_email(self, email: str) -> Optional[User]:
        """Get user by email address"""
        pass

    @abstractmethod
    async def create(self, user: User) -> User:
        """
        Create a new user.

        Raises ConflictError when the store rejects a duplicate username or email.
        """
        pass

    @abstractmethod
    async def update_password(self, user_id: int, password_hash: str) -> bool:
        """Replace the stored password hash. False if the user does not exist."""
        pass
