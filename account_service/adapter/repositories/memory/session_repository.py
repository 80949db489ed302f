from typing import Callable, List, Optional

from account_service.app.repositories.session_repository import ISessionRepository
from account_service.domain.entities import AuthSession
from .store import InMemoryStore


class InMemorySessionRepository(ISessionRepository):
    """AuthSession repository backed by InMemoryStore"""

    def __init__(self, store: InMemoryStore, undo_log: List[Callable[[], None]]):
        self.store = store
        self.undo_log = undo_log

    async def create(self, auth_session: AuthSession) -> AuthSession:
        auth_session.id = next(self.store.session_ids)
        self.store.sessions[auth_session.id] = auth_session
        self.undo_log.append(lambda: self.store.sessions.pop(auth_session.id, None))
        return auth_session

    async def get_by_session_hash(self, session_hash: str) -> Optional[AuthSession]:
        for auth_session in self.store.sessions.values():
            if auth_session.session_hash == session_hash:
                return auth_session
        return None

    async def delete(self, session_id: int) -> bool:
        auth_session = self.store.sessions.pop(session_id, None)
        if auth_session is None:
            return False

        self.undo_log.append(
            lambda: self.store.sessions.__setitem__(session_id, auth_session)
        )
        return True
