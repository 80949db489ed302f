"""
Authentication Use Case DTOs (Data Transfer Objects)

Command and Response classes for the auth domain.
Commands carry raw input; rules are checked by validation.py, not here.
"""

from pydantic import BaseModel

from account_service.domain.entities import User


# ============================================================================
# Command DTOs
# ============================================================================


class RegisterCommand(BaseModel):
    """Registration intent"""

    username: str
    email: str
    password: str


class LoginCommand(BaseModel):
    """Login intent"""

    username: str
    password: str


class RequestPasswordResetCommand(BaseModel):
    """Password reset request intent"""

    email: str


class ResetPasswordCommand(BaseModel):
    """Password reset completion intent"""

    token: str
    password: str
    confirm_password: str


# ============================================================================
# Response DTOs
# ============================================================================


class UserInfo(BaseModel):
    """Public view of a user. Never carries the password hash."""

    id: int
    username: str
    email: str

    @classmethod
    def from_entity(cls, user: User) -> "UserInfo":
        return cls(id=user.id, username=user.username, email=user.email)


class LogoutResponse(BaseModel):
    """Response for logout use case"""

    status: str


class RequestPasswordResetResponse(BaseModel):
    """Response for request password reset use case"""

    message: str


class ResetPasswordResponse(BaseModel):
    """Response for reset password use case"""

    message: str
