from typing import Callable, List, Optional

from account_service.app.repositories.password_reset_token_repository import IPasswordResetTokenRepository
from account_service.domain.entities import PasswordResetToken
from .store import InMemoryStore


class InMemoryPasswordResetTokenRepository(IPasswordResetTokenRepository):
    """PasswordResetToken repository backed by InMemoryStore"""

    def __init__(self, store: InMemoryStore, undo_log: List[Callable[[], None]]):
        self.store = store
        self.undo_log = undo_log

    async def create(self, token: PasswordResetToken) -> PasswordResetToken:
        token.id = next(self.store.token_ids)
        self.store.password_reset_tokens[token.id] = token
        self.undo_log.append(lambda: self.store.password_reset_tokens.pop(token.id, None))
        return token

    async def get_by_token_hash(self, token_hash: str) -> Optional[PasswordResetToken]:
        for token in self.store.password_reset_tokens.values():
            if token.token_hash == token_hash:
                return token
        return None

    async def mark_as_used(self, token_id: int) -> bool:
        token = self.store.password_reset_tokens.get(token_id)
        if token is None or token.used:
            return False

        token.used = True
        self.undo_log.append(lambda: setattr(token, "used", False))
        return True
