"""
Authentication Use Cases

All authentication-related business logic.
"""

from .register_use_case import RegisterUseCase
from .login_use_case import LoginUseCase
from .logout_use_case import LogoutUseCase
from .request_password_reset_use_case import RequestPasswordResetUseCase
from .reset_password_use_case import ResetPasswordUseCase
from .dtos import (
    RegisterCommand,
    LoginCommand,
    RequestPasswordResetCommand,
    ResetPasswordCommand,
    UserInfo,
    LogoutResponse,
    RequestPasswordResetResponse,
    ResetPasswordResponse,
)

__all__ = [
    # Use Cases
    "RegisterUseCase",
    "LoginUseCase",
    "LogoutUseCase",
    "RequestPasswordResetUseCase",
    "ResetPasswordUseCase",
    # DTOs - Commands
    "RegisterCommand",
    "LoginCommand",
    "RequestPasswordResetCommand",
    "ResetPasswordCommand",
    # DTOs - Responses
    "UserInfo",
    "LogoutResponse",
    "RequestPasswordResetResponse",
    "ResetPasswordResponse",
]
