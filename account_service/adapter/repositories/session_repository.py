from typing import Optional

from sqlalchemy import delete
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from account_service.app.repositories.session_repository import ISessionRepository
from account_service.domain.entities import AuthSession


class SessionRepository(ISessionRepository):
    """AuthSession repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def create(self, auth_session: AuthSession) -> AuthSession:
        self.session.add(auth_session)
        await self.session.flush()
        await self.session.refresh(auth_session)
        return auth_session

    async def get_by_session_hash(self, session_hash: str) -> Optional[AuthSession]:
        stmt = select(AuthSession).where(AuthSession.session_hash == session_hash)
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def delete(self, session_id: int) -> bool:
        stmt = delete(AuthSession).where(AuthSession.id == session_id)
        result = await self.session.execute(stmt)
        return result.rowcount > 0
