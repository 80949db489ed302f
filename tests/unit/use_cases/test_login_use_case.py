"""
Unit tests for LoginUseCase
"""
import pytest

from account_service.app.use_cases.auth import LoginCommand, LoginUseCase
from account_service.domain.entities import User
from account_service.domain.errors import AuthenticationError, ValidationError


@pytest.fixture
def existing_user(mock_uow, hasher):
    user = User(id=7, username="alice123", email="a@x.com", password=hasher.hash("Passw0rd!"))
    mock_uow.users.get_by_username.return_value = user
    return user


@pytest.mark.asyncio
async def test_successful_login(mock_uow, session, hasher, existing_user):
    use_case = LoginUseCase(mock_uow, session, hasher)

    result = await use_case.execute(LoginCommand(username="alice123", password="Passw0rd!"))

    assert result.id == 7
    assert result.username == "alice123"
    assert "password" not in result.model_dump()
    mock_uow.users.get_by_username.assert_called_once_with("alice123")
    assert session.user_id == 7
    mock_uow.commit.assert_called_once()


@pytest.mark.asyncio
async def test_wrong_password(mock_uow, session, hasher, existing_user):
    use_case = LoginUseCase(mock_uow, session, hasher)

    with pytest.raises(AuthenticationError) as exc_info:
        await use_case.execute(LoginCommand(username="alice123", password="WrongPass1!"))

    assert exc_info.value.message == "Invalid username or password"
    assert session.user_id is None


@pytest.mark.asyncio
async def test_unknown_user_same_error_as_wrong_password(mock_uow, session, hasher, existing_user):
    use_case = LoginUseCase(mock_uow, session, hasher)

    with pytest.raises(AuthenticationError) as wrong_password:
        await use_case.execute(LoginCommand(username="alice123", password="WrongPass1!"))

    mock_uow.users.get_by_username.return_value = None
    with pytest.raises(AuthenticationError) as unknown_user:
        await use_case.execute(LoginCommand(username="nobody", password="WrongPass1!"))

    assert wrong_password.value.code == unknown_user.value.code
    assert wrong_password.value.message == unknown_user.value.message


@pytest.mark.asyncio
async def test_login_rules_are_looser_than_registration(mock_uow, session, hasher):
    """Login only checks lengths; no digit or symbol required"""
    mock_uow.users.get_by_username.return_value = User(
        id=1, username="bob", email="b@x.com", password=hasher.hash("plainpassword")
    )
    use_case = LoginUseCase(mock_uow, session, hasher)

    result = await use_case.execute(LoginCommand(username="bob", password="plainpassword"))

    assert result.username == "bob"


@pytest.mark.asyncio
async def test_short_input_rejected_before_lookup(mock_uow, session, hasher):
    use_case = LoginUseCase(mock_uow, session, hasher)

    with pytest.raises(ValidationError) as exc_info:
        await use_case.execute(LoginCommand(username="al", password="short"))

    assert {e.field for e in exc_info.value.errors} == {"username", "password"}
    mock_uow.users.get_by_username.assert_not_called()
