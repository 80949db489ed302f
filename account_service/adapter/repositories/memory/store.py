"""
In-memory record store.

Records live in dicts keyed by integer ids drawn from per-table monotonic
counters. One store is shared by every InMemoryUnitOfWork of a process.
"""

from itertools import count
from typing import Dict

from account_service.domain.entities import AuthSession, PasswordResetToken, User


class InMemoryStore:
    def __init__(self):
        self.users: Dict[int, User] = {}
        self.password_reset_tokens: Dict[int, PasswordResetToken] = {}
        self.sessions: Dict[int, AuthSession] = {}
        self.user_ids = count(1)
        self.token_ids = count(1)
        self.session_ids = count(1)

    def clear(self):
        self.users.clear()
        self.password_reset_tokens.clear()
        self.sessions.clear()
        self.user_ids = count(1)
        self.token_ids = count(1)
        self.session_ids = count(1)
