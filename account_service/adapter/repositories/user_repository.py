from typing import Optional

from sqlalchemy import update
from sqlalchemy.exc import IntegrityError
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from account_service.app.repositories.user_repository import IUserRepository
from account_service.domain.entities import User
from account_service.domain.errors import ConflictError


class UserRepository(IUserRepository):
    """User repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_id(self, user_id: int) -> Optional[User]:
        """Get user by ID"""
        stmt = select(User).where(User.id == user_id)
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def get_by_username(self, username: str) -> Optional[User]:
        """Get user by username"""
        stmt = select(User).where(User.username == username)
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def get_by_email(self, email: str) -> Optional[User]:
        """Get user by email address"""
        stmt = select(User).where(User.email == email)
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def create(self, user: User) -> User:
        """Create a new user; unique violations become ConflictError"""
        self.session.add(user)
        try:
            await self.session.flush()
        except IntegrityError as exc:
            await self.session.rollback()
            field = "email" if "email" in str(exc.orig).lower() else "username"
            raise ConflictError(field) from exc
        await self.session.refresh(user)
        return user

    async def update_password(self, user_id: int, password_hash: str) -> bool:
        """Replace the stored password hash"""
        stmt = update(User).where(User.id == user_id).values(password=password_hash)
        result = await self.session.execute(stmt)
        return result.rowcount > 0
