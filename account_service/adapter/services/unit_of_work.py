from typing import Callable, List

from sqlmodel.ext.asyncio.session import AsyncSession

from account_service.adapter.repositories.memory import (
    InMemoryPasswordResetTokenRepository,
    InMemorySessionRepository,
    InMemoryStore,
    InMemoryUserRepository,
)
from account_service.adapter.repositories.password_reset_token_repository import PasswordResetTokenRepository
from account_service.adapter.repositories.session_repository import SessionRepository
from account_service.adapter.repositories.user_repository import UserRepository
from account_service.app.services.unit_of_work import UnitOfWork


class SqlAlchemyUnitOfWork(UnitOfWork):
    """SQLAlchemy implementation of UnitOfWork pattern"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def __aenter__(self):
        # Initialize all repositories with the session
        self.users = UserRepository(self.session)
        self.password_reset_tokens = PasswordResetTokenRepository(self.session)
        self.sessions = SessionRepository(self.session)
        return self

    async def __aexit__(self, *args):
        await self.rollback()

    async def commit(self):
        await self.session.commit()

    async def rollback(self):
        await self.session.rollback()


class InMemoryUnitOfWork(UnitOfWork):
    """
    UnitOfWork over a shared InMemoryStore.

    Writes apply to the store immediately and record an undo step;
    rollback replays the undo steps newest first, commit forgets them.
    """

    def __init__(self, store: InMemoryStore):
        self.store = store
        self._undo_log: List[Callable[[], None]] = []

    async def __aenter__(self):
        self.users = InMemoryUserRepository(self.store, self._undo_log)
        self.password_reset_tokens = InMemoryPasswordResetTokenRepository(
            self.store, self._undo_log
        )
        self.sessions = InMemorySessionRepository(self.store, self._undo_log)
        return self

    async def __aexit__(self, *args):
        await self.rollback()

    async def commit(self):
        self._undo_log.clear()

    async def rollback(self):
        while self._undo_log:
            self._undo_log.pop()()
