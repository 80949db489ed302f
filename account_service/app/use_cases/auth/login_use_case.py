"""
Login Use Case

Checks username and password and binds the session to the user.
"""

import logging
from typing import Optional

from account_service.app.services.password_hasher import PasswordHasher
from account_service.app.services.session_context import SessionContext
from account_service.app.services.unit_of_work import UnitOfWork
from account_service.domain.errors import AuthenticationError
from .dtos import LoginCommand, UserInfo
from .validation import ensure_valid, validate_login

logger = logging.getLogger(__name__)


class LoginUseCase:
    """
    Use case for username/password login.

    Business Rules:
    - Unknown username and wrong password produce the same error
    - A key derivation runs even for unknown usernames, so both paths
      take about as long
    - Successful login replaces whatever identity the session held
    """

    def __init__(
        self,
        uow: UnitOfWork,
        session: SessionContext,
        hasher: Optional[PasswordHasher] = None,
    ):
        self.uow = uow
        self.session = session
        self.hasher = hasher or PasswordHasher()

    async def execute(self, command: LoginCommand) -> UserInfo:
        """
        Execute login use case.

        Raises:
            ValidationError: username or password too short
            AuthenticationError: unknown user or wrong password
        """
        ensure_valid(validate_login(command))

        async with self.uow:
            user = await self.uow.users.get_by_username(command.username)

            if user is None:
                self.hasher.verify_dummy(command.password)
                logger.info(f"Login failed for {command.username!r}")
                raise AuthenticationError()

            if not self.hasher.verify(command.password, user.password):
                logger.info(f"Login failed for {command.username!r}")
                raise AuthenticationError()

            await self.session.login(user)
            await self.uow.commit()
            logger.info(f"Login successful for user {user.id}")

            return UserInfo.from_entity(user)
