"""
Input validation for auth commands.

Pure functions: each returns the list of field problems found, empty when
the input is acceptable. ``ensure_valid`` turns a non-empty list into a
ValidationError.
"""

import re
from typing import List

from email_validator import EmailNotValidError, validate_email

from account_service.domain.errors import FieldError, ValidationError
from .dtos import LoginCommand, RegisterCommand, RequestPasswordResetCommand, ResetPasswordCommand

MIN_USERNAME_LENGTH = 3
MIN_PASSWORD_LENGTH = 8
MIN_TOKEN_LENGTH = 10

_DIGIT = re.compile(r"[0-9]")
_SYMBOL = re.compile(r"[^a-zA-Z0-9]")


def check_text(value: str, field: str, label: str) -> List[FieldError]:
    """Reject strings that cannot be stored or hashed (e.g. lone surrogates)"""
    try:
        value.encode("utf-8")
    except UnicodeEncodeError:
        return [FieldError(field, f"{label} contains invalid characters")]
    return []


def check_username(username: str) -> List[FieldError]:
    errors = check_text(username, "username", "Username")
    if errors:
        return errors
    if len(username) < MIN_USERNAME_LENGTH:
        return [FieldError("username", "Username must be at least 3 characters")]
    return []


def check_email(email: str) -> List[FieldError]:
    errors = check_text(email, "email", "Email")
    if errors:
        return errors
    try:
        validate_email(email, check_deliverability=False)
    except EmailNotValidError:
        return [FieldError("email", "Please enter a valid email address")]
    return []


def check_password_length(password: str, field: str = "password") -> List[FieldError]:
    errors = check_text(password, field, "Password")
    if errors:
        return errors
    if len(password) < MIN_PASSWORD_LENGTH:
        return [FieldError(field, "Password must be at least 8 characters")]
    return []


def check_password_strength(password: str, field: str = "password") -> List[FieldError]:
    errors = check_text(password, field, "Password")
    if errors:
        return errors
    errors = check_password_length(password, field)
    if not _DIGIT.search(password):
        errors.append(FieldError(field, "Password must contain at least one number"))
    if not _SYMBOL.search(password):
        errors.append(
            FieldError(field, "Password must contain at least one special character")
        )
    return errors


def validate_register(command: RegisterCommand) -> List[FieldError]:
    return (
        check_username(command.username)
        + check_email(command.email)
        + check_password_strength(command.password)
    )


def validate_login(command: LoginCommand) -> List[FieldError]:
    # Looser than registration: existing accounts may predate the strength rules
    return check_username(command.username) + check_password_length(command.password)


def validate_request_password_reset(command: RequestPasswordResetCommand) -> List[FieldError]:
    return check_email(command.email)


def validate_reset_password(command: ResetPasswordCommand) -> List[FieldError]:
    errors = check_text(command.token, "token", "Reset token")
    if not errors and len(command.token) < MIN_TOKEN_LENGTH:
        errors.append(FieldError("token", "Invalid reset token"))
    errors += check_password_strength(command.password)
    if command.password != command.confirm_password:
        errors.append(FieldError("confirmPassword", "Passwords don't match"))
    return errors


def ensure_valid(errors: List[FieldError]) -> None:
    if errors:
        raise ValidationError(errors)
