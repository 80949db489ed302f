from .store import InMemoryStore
from .user_repository import InMemoryUserRepository
from .password_reset_token_repository import InMemoryPasswordResetTokenRepository
from .session_repository import InMemorySessionRepository

__all__ = [
    "InMemoryStore",
    "InMemoryUserRepository",
    "InMemoryPasswordResetTokenRepository",
    "InMemorySessionRepository",
]
