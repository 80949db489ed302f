"""
Register Use Case

Creates an account and logs the new user in.
"""

import logging
from typing import Optional

from account_service.app.services.password_hasher import PasswordHasher
from account_service.app.services.session_context import SessionContext
from account_service.app.services.unit_of_work import UnitOfWork
from account_service.domain.entities import User
from account_service.domain.errors import ConflictError
from .dtos import RegisterCommand, UserInfo
from .validation import ensure_valid, validate_register

logger = logging.getLogger(__name__)


class RegisterUseCase:
    """
    Register Use Case

    Business Logic (each step gates the next):
    1. Validate username, email and password rules
    2. Reject a taken username
    3. Reject a taken email
    4. Hash password, persist user (store uniqueness violations also
       surface as ConflictError)
    5. Log the new user in (session row written in the same transaction)
    6. Return the user without the password hash
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

    async def execute(self, command: RegisterCommand) -> UserInfo:
        """
        Execute register use case

        Raises:
            ValidationError: input rules failed
            ConflictError: username or email already registered
        """
        ensure_valid(validate_register(command))

        async with self.uow:
            if await self.uow.users.get_by_username(command.username):
                raise ConflictError("username")

            if await self.uow.users.get_by_email(command.email):
                raise ConflictError("email")

            user = await self.uow.users.create(
                User(
                    username=command.username,
                    email=command.email,
                    password=self.hasher.hash(command.password),
                )
            )
            await self.session.login(user)
            await self.uow.commit()

            logger.info(f"Registered user {user.id} ({user.username})")

            return UserInfo.from_entity(user)
