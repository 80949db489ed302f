from typing import Callable, List, Optional

from account_service.app.repositories.user_repository import IUserRepository
from account_service.domain.entities import User
from account_service.domain.errors import ConflictError
from .store import InMemoryStore


class InMemoryUserRepository(IUserRepository):
    """User repository backed by InMemoryStore"""

    def __init__(self, store: InMemoryStore, undo_log: List[Callable[[], None]]):
        self.store = store
        self.undo_log = undo_log

    def _find(self, **criteria) -> Optional[User]:
        for user in self.store.users.values():
            if all(getattr(user, k) == v for k, v in criteria.items()):
                return user
        return None

    async def get_by_id(self, user_id: int) -> Optional[User]:
        return self.store.users.get(user_id)

    async def get_by_username(self, username: str) -> Optional[User]:
        return self._find(username=username)

    async def get_by_email(self, email: str) -> Optional[User]:
        return self._find(email=email)

    async def create(self, user: User) -> User:
        # Same uniqueness rules as the users table constraints
        if self._find(username=user.username):
            raise ConflictError("username")
        if self._find(email=user.email):
            raise ConflictError("email")

        user.id = next(self.store.user_ids)
        self.store.users[user.id] = user
        self.undo_log.append(lambda: self.store.users.pop(user.id, None))
        return user

    async def update_password(self, user_id: int, password_hash: str) -> bool:
        user = self.store.users.get(user_id)
        if user is None:
            return False

        previous = user.password
        user.password = password_hash
        self.undo_log.append(lambda: setattr(user, "password", previous))
        return True
