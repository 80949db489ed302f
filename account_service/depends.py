from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel import SQLModel
from sqlmodel.ext.asyncio.session import AsyncSession
from config import ApplicationConfig
from account_service.adapter.repositories.memory import InMemoryStore
from account_service.adapter.services.mailgun_mail_sender import MailgunMailSender
from account_service.adapter.services.unit_of_work import InMemoryUnitOfWork, SqlAlchemyUnitOfWork
from account_service.api.utils.session import StoredSessionContext
from account_service.app.services.mail_sender import MailSender
from account_service.app.services.password_hasher import PasswordHasher
from account_service.app.services.session_context import SessionContext
from account_service.app.services.unit_of_work import UnitOfWork

engine = create_async_engine(ApplicationConfig.DB_URI, echo=False, future=True)

AsyncSessionLocal = sessionmaker(
    engine, class_=AsyncSession, expire_on_commit=False, autoflush=False
)

memory_store = InMemoryStore()

password_hasher = PasswordHasher()

mail_sender = MailgunMailSender(
    api_key=ApplicationConfig.MAILGUN_API_KEY,
    domain=ApplicationConfig.MAILGUN_DOMAIN,
    from_email=ApplicationConfig.MAILGUN_FROM_EMAIL,
    api_base=ApplicationConfig.MAILGUN_API_BASE,
    timeout=ApplicationConfig.MAIL_TIMEOUT,
)


async def init_db():
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)


async def get_unit_of_work():
    if ApplicationConfig.STORAGE_BACKEND == "memory":
        yield InMemoryUnitOfWork(memory_store)
        return

    async with AsyncSessionLocal() as session:
        yield SqlAlchemyUnitOfWork(session)


def get_session_context(
    request: Request, uow: UnitOfWork = Depends(get_unit_of_work)
) -> SessionContext:
    # Shares the route's per-request unit of work (cached by FastAPI)
    return StoredSessionContext(request, uow, ApplicationConfig.SESSION_MAX_AGE)


def get_mail_sender() -> MailSender:
    return mail_sender


def get_password_hasher() -> PasswordHasher:
    return password_hasher


def get_reset_url() -> str:
    return f"{ApplicationConfig.APP_URL.rstrip('/')}/reset-password"
