"""
Cookie Session Identity

SessionContext backed by server-side AuthSession records. The browser only
holds a random session key inside Starlette's signed cookie
(SessionMiddleware, signed with itsdangerous); the store keeps its digest.
"""

import secrets
from datetime import datetime, timedelta
from typing import Callable, Optional

from starlette.requests import Request

from account_service.app.services.reset_token_manager import hash_token
from account_service.app.services.session_context import SessionContext
from account_service.app.services.unit_of_work import UnitOfWork
from account_service.domain.entities import AuthSession, User

SESSION_KEY = "sid"
SESSION_KEY_BYTES = 32


class StoredSessionContext(SessionContext):
    """
    The user row is reloaded on every request so a changed password or
    removed account takes effect, and the session row is checked so a
    logged-out cookie is dead everywhere.
    """

    def __init__(
        self,
        request: Request,
        uow: UnitOfWork,
        max_age: int,
        now: Callable[[], datetime] = datetime.utcnow,
    ):
        self.request = request
        self.uow = uow
        self.max_age = max_age
        self.now = now

    async def _load(self) -> Optional[AuthSession]:
        key = self.request.session.get(SESSION_KEY)
        if not isinstance(key, str) or not key:
            return None
        return await self.uow.sessions.get_by_session_hash(hash_token(key))

    async def current_user_id(self) -> Optional[int]:
        auth_session = await self._load()
        if auth_session is None or auth_session.is_expired(self.now()):
            return None
        return auth_session.user_id

    async def login(self, user: User) -> None:
        # Drop anything left from a previous identity
        await self.logout()

        key = secrets.token_urlsafe(SESSION_KEY_BYTES)
        now = self.now()
        await self.uow.sessions.create(
            AuthSession(
                user_id=user.id,
                session_hash=hash_token(key),
                created_at=now,
                expires_at=now + timedelta(seconds=self.max_age),
            )
        )
        self.request.session[SESSION_KEY] = key

    async def logout(self) -> None:
        auth_session = await self._load()
        if auth_session is not None:
            await self.uow.sessions.delete(auth_session.id)
        self.request.session.clear()
