from fastapi import APIRouter, Depends, status
from pydantic import BaseModel, ConfigDict, Field

from account_service.api.error import ClientError, ServerError
from account_service.app.services.mail_sender import MailSender
from account_service.app.services.password_hasher import PasswordHasher
from account_service.app.services.session_context import SessionContext
from account_service.app.services.unit_of_work import UnitOfWork
from account_service.app.use_cases.auth import (
    RegisterCommand,
    RegisterUseCase,
    LoginCommand,
    LoginUseCase,
    LogoutUseCase,
    RequestPasswordResetCommand,
    RequestPasswordResetUseCase,
    ResetPasswordCommand,
    ResetPasswordUseCase,
    UserInfo,
    LogoutResponse,
    RequestPasswordResetResponse,
    ResetPasswordResponse,
)
from account_service.depends import (
    get_mail_sender,
    get_password_hasher,
    get_reset_url,
    get_session_context,
    get_unit_of_work,
)
from account_service.domain.errors import (
    AuthenticationError,
    ConflictError,
    InvalidTokenError,
    NotFoundError,
    ValidationError,
)

router = APIRouter(tags=["Authentication"])


class RegisterRequest(BaseModel):
    """
    Register HTTP request payload

    Only shapes the body; the username/email/password rules are applied by
    the use case so failures come back as field-level 400 errors.
    """

    username: str = Field("", description="Unique username (min 3 chars)")
    email: str = Field("", description="Unique email address")
    password: str = Field(
        "", description="Password (min 8 chars, one digit, one symbol)"
    )


@router.post("/register", status_code=status.HTTP_201_CREATED, response_model=UserInfo)
async def register(
    request: RegisterRequest,
    uow: UnitOfWork = Depends(get_unit_of_work),
    session: SessionContext = Depends(get_session_context),
    hasher: PasswordHasher = Depends(get_password_hasher),
):
    """
    Register a new account and log it in.

    Raises:
        - 400 Bad Request: Invalid input, username or email already taken
        - 500 Internal Server Error: Server error
    """
    command = RegisterCommand(
        username=request.username, email=request.email, password=request.password
    )
    use_case = RegisterUseCase(uow, session, hasher)

    try:
        return await use_case.execute(command)
    except (ValidationError, ConflictError) as error:
        raise ClientError(error, status_code=status.HTTP_400_BAD_REQUEST)


class LoginRequest(BaseModel):
    """Login HTTP request payload"""

    username: str = Field("", description="Username")
    password: str = Field("", description="Password")


@router.post("/login", status_code=status.HTTP_200_OK, response_model=UserInfo)
async def login(
    request: LoginRequest,
    uow: UnitOfWork = Depends(get_unit_of_work),
    session: SessionContext = Depends(get_session_context),
    hasher: PasswordHasher = Depends(get_password_hasher),
):
    """
    Log in with username and password.

    Raises:
        - 400 Bad Request: Invalid input
        - 401 Unauthorized: Invalid username or password
    """
    command = LoginCommand(username=request.username, password=request.password)
    use_case = LoginUseCase(uow, session, hasher)

    try:
        return await use_case.execute(command)
    except ValidationError as error:
        raise ClientError(error, status_code=status.HTTP_400_BAD_REQUEST)
    except AuthenticationError as error:
        raise ClientError(error, status_code=status.HTTP_401_UNAUTHORIZED)


@router.post("/logout", status_code=status.HTTP_200_OK, response_model=LogoutResponse)
async def logout(
    uow: UnitOfWork = Depends(get_unit_of_work),
    session: SessionContext = Depends(get_session_context),
):
    """Log out. Always succeeds, even without a session."""
    return await LogoutUseCase(uow, session).execute()


class RequestPasswordResetRequest(BaseModel):
    """Request password reset HTTP request payload"""

    email: str = Field("", description="Account email address")


@router.post(
    "/request-password-reset",
    status_code=status.HTTP_200_OK,
    response_model=RequestPasswordResetResponse,
)
async def request_password_reset(
    request: RequestPasswordResetRequest,
    uow: UnitOfWork = Depends(get_unit_of_work),
    mail_sender: MailSender = Depends(get_mail_sender),
    reset_url: str = Depends(get_reset_url),
):
    """
    Request Password Reset

    Emails a reset link valid for 1 hour.

    Security:
        - No email enumeration: same response for registered and unknown
          emails, and whether or not the email could be delivered

    Raises:
        - 400 Bad Request: Malformed email
    """
    use_case = RequestPasswordResetUseCase(uow, mail_sender, reset_url)

    try:
        return await use_case.execute(RequestPasswordResetCommand(email=request.email))
    except ValidationError as error:
        raise ClientError(error, status_code=status.HTTP_400_BAD_REQUEST)


class ResetPasswordRequest(BaseModel):
    """Reset password HTTP request payload"""

    model_config = ConfigDict(populate_by_name=True)

    token: str = Field("", description="Password reset token from email")
    password: str = Field("", description="New password")
    confirm_password: str = Field(
        "", alias="confirmPassword", description="New password, repeated"
    )


@router.post(
    "/reset-password",
    status_code=status.HTTP_200_OK,
    response_model=ResetPasswordResponse,
)
async def reset_password(
    request: ResetPasswordRequest,
    uow: UnitOfWork = Depends(get_unit_of_work),
    hasher: PasswordHasher = Depends(get_password_hasher),
):
    """
    Reset Password

    Sets a new password with a reset token. Does not log the user in.

    Raises:
        - 400 Bad Request: Invalid input, or token invalid, used or expired
        - 500 Internal Server Error: Token owner missing
    """
    command = ResetPasswordCommand(
        token=request.token,
        password=request.password,
        confirm_password=request.confirm_password,
    )
    use_case = ResetPasswordUseCase(uow, hasher)

    try:
        return await use_case.execute(command)
    except (ValidationError, InvalidTokenError) as error:
        raise ClientError(error, status_code=status.HTTP_400_BAD_REQUEST)
    except NotFoundError as error:
        raise ServerError(error)
