from account_service.app.services.session_context import SessionContext
from account_service.app.services.unit_of_work import UnitOfWork
from .dtos import LogoutResponse


class LogoutUseCase:
    """
    Destroys the server-side session. Succeeds whether or not anyone was
    logged in.
    """

    def __init__(self, uow: UnitOfWork, session: SessionContext):
        self.uow = uow
        self.session = session

    async def execute(self) -> LogoutResponse:
        async with self.uow:
            await self.session.logout()
            await self.uow.commit()

        return LogoutResponse(status="success")
