"""
Use Cases

Organized into domain folders:
- auth/: Registration, login, logout and password reset
- users/: Current user lookup
"""

from .auth import (
    RegisterUseCase,
    LoginUseCase,
    LogoutUseCase,
    RequestPasswordResetUseCase,
    ResetPasswordUseCase,
)
from .users import (
    GetCurrentUserUseCase,
)

__all__ = [
    # Auth
    "RegisterUseCase",
    "LoginUseCase",
    "LogoutUseCase",
    "RequestPasswordResetUseCase",
    "ResetPasswordUseCase",
    # Users
    "GetCurrentUserUseCase",
]
