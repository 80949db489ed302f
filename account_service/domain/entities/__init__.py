"""
Account Service Domain Entities

Each entity in its own file.
"""

from .user import User
from .password_reset_token import PasswordResetToken, RESET_TOKEN_TTL
from .auth_session import AuthSession

__all__ = [
    "User",
    "PasswordResetToken",
    "RESET_TOKEN_TTL",
    "AuthSession",
]
