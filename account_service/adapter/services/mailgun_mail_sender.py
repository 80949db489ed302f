import logging
from typing import Optional

import httpx

from account_service.app.services.mail_sender import MailSender

logger = logging.getLogger(__name__)


class MailgunMailSender(MailSender):
    """
    MailSender implementation over the Mailgun HTTP API.

    Missing configuration, transport errors and non-2xx responses are logged
    and reported as a failed send.
    """

    def __init__(
        self,
        api_key: str,
        domain: str,
        from_email: str,
        api_base: str = "https://api.mailgun.net/v3",
        timeout: float = 10.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.api_key = api_key
        self.domain = domain
        self.from_email = from_email
        self.api_base = api_base.rstrip("/")
        self.timeout = timeout
        self.transport = transport

    @property
    def configured(self) -> bool:
        return bool(self.api_key and self.domain and self.from_email)

    async def send_email(
        self, to: str, subject: str, text: str, html: Optional[str] = None
    ) -> bool:
        if not self.configured:
            logger.error("Email configuration is incomplete")
            return False

        data = {
            "from": self.from_email,
            "to": [to],
            "subject": subject,
            "text": text,
            "html": html or text,
        }

        try:
            async with httpx.AsyncClient(
                timeout=self.timeout, transport=self.transport
            ) as client:
                response = await client.post(
                    f"{self.api_base}/{self.domain}/messages",
                    auth=("api", self.api_key),
                    data=data,
                )
                response.raise_for_status()
        except httpx.HTTPError as exc:
            logger.error(f"Error sending email: {exc.__class__.__name__}: {exc}")
            return False

        logger.info(f"Email accepted by Mailgun ({response.status_code})")
        return True
