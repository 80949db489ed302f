"""
Get Current User Use Case

Resolves the logged-in user from the session.
"""

from account_service.app.services.session_context import SessionContext
from account_service.app.services.unit_of_work import UnitOfWork
from account_service.app.use_cases.auth.dtos import UserInfo
from account_service.domain.errors import UnauthenticatedError


class GetCurrentUserUseCase:
    """
    Use case for loading the current user.

    Business Rules:
    - No live session means unauthenticated
    - A session whose user no longer exists is destroyed and treated
      as unauthenticated
    - Password hash never leaves this use case
    """

    def __init__(self, uow: UnitOfWork, session: SessionContext):
        self.uow = uow
        self.session = session

    async def execute(self) -> UserInfo:
        """
        Raises:
            UnauthenticatedError: nobody is logged in
        """
        async with self.uow:
            user_id = await self.session.current_user_id()
            if user_id is None:
                raise UnauthenticatedError()

            user = await self.uow.users.get_by_id(user_id)

            if user is None:
                await self.session.logout()
                await self.uow.commit()
                raise UnauthenticatedError()

            return UserInfo.from_entity(user)
