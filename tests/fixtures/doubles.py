"""Test doubles shared by unit and integration tests."""

from typing import List, Optional

from account_service.app.services.mail_sender import MailSender
from account_service.app.services.password_hasher import PasswordHasher
from account_service.app.services.session_context import SessionContext


def fast_hasher() -> PasswordHasher:
    # Minimum Argon2 cost keeps the suite quick; the format and checks are unchanged
    return PasswordHasher(time_cost=1, memory_cost=8, parallelism=1)


class FakeSessionContext(SessionContext):
    def __init__(self, user_id: Optional[int] = None):
        self.user_id = user_id
        self.logins = 0
        self.logouts = 0

    async def current_user_id(self) -> Optional[int]:
        return self.user_id

    async def login(self, user) -> None:
        self.user_id = user.id
        self.logins += 1

    async def logout(self) -> None:
        self.user_id = None
        self.logouts += 1


class RecordingMailSender(MailSender):
    def __init__(self, succeed: bool = True):
        self.succeed = succeed
        self.sent: List[dict] = []

    async def send_email(self, to, subject, text, html=None) -> bool:
        self.sent.append({"to": to, "subject": subject, "text": text, "html": html})
        return self.succeed

    def last_token(self) -> str:
        text = self.sent[-1]["text"]
        return text.split("token=", 1)[1].split()[0]
