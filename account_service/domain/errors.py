"""
Domain Errors

Every failure a flow can report. Each error carries a stable ``code`` and a
user-facing ``message``; the API layer decides the HTTP status.
"""

from dataclasses import dataclass
from enum import Enum
from typing import List, Optional


@dataclass(frozen=True)
class FieldError:
    """A single user-correctable problem with one input field"""

    field: str
    message: str


class DomainError(Exception):
    code = "DOMAIN_ERROR"

    def __init__(self, message: str, code: Optional[str] = None):
        self.message = message
        if code is not None:
            self.code = code
        super().__init__(message)


class ValidationError(DomainError):
    """One or more input fields failed validation"""

    code = "VALIDATION_ERROR"

    def __init__(self, errors: List[FieldError]):
        self.errors = list(errors)
        super().__init__("; ".join(e.message for e in self.errors) or "Invalid input")

    @classmethod
    def single(cls, field: str, message: str) -> "ValidationError":
        return cls([FieldError(field, message)])


class ConflictError(DomainError):
    """A unique field (username or email) is already taken"""

    MESSAGES = {
        "username": "Username already exists",
        "email": "Email already in use",
    }

    def __init__(self, field: str):
        self.field = field
        super().__init__(
            self.MESSAGES.get(field, f"{field} already exists"),
            code=f"{field.upper()}_TAKEN",
        )


class AuthenticationError(DomainError):
    """Bad credentials. Same message whether the user exists or not."""

    code = "INVALID_CREDENTIALS"

    def __init__(self, message: str = "Invalid username or password"):
        super().__init__(message)


class UnauthenticatedError(DomainError):
    code = "UNAUTHENTICATED"

    def __init__(self, message: str = "Not authenticated"):
        super().__init__(message)


class TokenRejection(str, Enum):
    """Why a password reset token was refused"""

    not_found = "not_found"
    used = "used"
    expired = "expired"


class InvalidTokenError(DomainError):
    """Password reset token is absent, already used, or expired"""

    _DETAILS = {
        TokenRejection.not_found: ("INVALID_TOKEN", "Invalid or expired reset token"),
        TokenRejection.used: (
            "TOKEN_ALREADY_USED",
            "This reset token has already been used",
        ),
        TokenRejection.expired: ("TOKEN_EXPIRED", "Reset token has expired"),
    }

    def __init__(self, reason: TokenRejection):
        self.reason = reason
        code, message = self._DETAILS[reason]
        super().__init__(message, code=code)


class NotFoundError(DomainError):
    """Internal precondition violation, e.g. a token for a missing user"""

    code = "NOT_FOUND"
