import pytest
from unittest.mock import AsyncMock, MagicMock

from account_service.adapter.repositories.memory import InMemoryStore
from account_service.adapter.services.unit_of_work import InMemoryUnitOfWork
from tests.fixtures.doubles import FakeSessionContext, RecordingMailSender, fast_hasher


@pytest.fixture
def mock_uow():
    uow = MagicMock()
    uow.__aenter__ = AsyncMock(return_value=uow)
    uow.__aexit__ = AsyncMock(return_value=False)  # Must return False to not suppress exceptions
    uow.commit = AsyncMock()
    uow.rollback = AsyncMock()

    # Mock repositories
    uow.users = MagicMock()
    uow.users.get_by_id = AsyncMock(return_value=None)
    uow.users.get_by_username = AsyncMock(return_value=None)
    uow.users.get_by_email = AsyncMock(return_value=None)
    uow.users.create = AsyncMock()
    uow.users.update_password = AsyncMock(return_value=True)

    uow.password_reset_tokens = MagicMock()
    uow.password_reset_tokens.create = AsyncMock()
    uow.password_reset_tokens.get_by_token_hash = AsyncMock(return_value=None)
    uow.password_reset_tokens.mark_as_used = AsyncMock(return_value=True)

    uow.sessions = MagicMock()
    uow.sessions.create = AsyncMock()
    uow.sessions.get_by_session_hash = AsyncMock(return_value=None)
    uow.sessions.delete = AsyncMock(return_value=True)
    return uow


@pytest.fixture
def memory_store():
    return InMemoryStore()


@pytest.fixture
def memory_uow(memory_store):
    return InMemoryUnitOfWork(memory_store)


@pytest.fixture
def hasher():
    return fast_hasher()


@pytest.fixture
def session():
    return FakeSessionContext()


@pytest.fixture
def mail_sender():
    return RecordingMailSender()
