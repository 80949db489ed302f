from fastapi import APIRouter, Depends, status

from account_service.api.error import ClientError
from account_service.app.services.session_context import SessionContext
from account_service.app.services.unit_of_work import UnitOfWork
from account_service.app.use_cases.auth import UserInfo
from account_service.app.use_cases.users import GetCurrentUserUseCase
from account_service.depends import get_session_context, get_unit_of_work
from account_service.domain.errors import UnauthenticatedError

router = APIRouter(tags=["User"])


@router.get("/user", status_code=status.HTTP_200_OK, response_model=UserInfo)
async def get_user(
    uow: UnitOfWork = Depends(get_unit_of_work),
    session: SessionContext = Depends(get_session_context),
):
    """
    Current User

    Returns the logged-in user.

    Raises:
        - 401 Unauthorized: No session
    """
    use_case = GetCurrentUserUseCase(uow, session)

    try:
        return await use_case.execute()
    except UnauthenticatedError as error:
        raise ClientError(error, status_code=status.HTTP_401_UNAUTHORIZED)
