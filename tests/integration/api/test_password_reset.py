"""
Integration tests for the password reset flow:
POST /api/request-password-reset and POST /api/reset-password
"""
from datetime import datetime, timedelta

import pytest
from httpx import AsyncClient
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from account_service.app.services.reset_token_manager import hash_token
from account_service.domain.entities import PasswordResetToken, User

ALICE = {"username": "alice123", "email": "a@x.com", "password": "Passw0rd!"}
GENERIC_MESSAGE = "If your email is registered, you will receive a password reset link shortly"


async def register(client: AsyncClient) -> dict:
    response = await client.post("/api/register", json=ALICE)
    assert response.status_code == 201
    await client.post("/api/logout")
    return response.json()


async def request_token(client: AsyncClient, mail_sender) -> str:
    response = await client.post("/api/request-password-reset", json={"email": "a@x.com"})
    assert response.status_code == 200
    return mail_sender.last_token()


def reset_body(token: str, password: str = "NewPassw0rd!", confirm: str = None) -> dict:
    return {
        "token": token,
        "password": password,
        "confirmPassword": password if confirm is None else confirm,
    }


@pytest.mark.asyncio
async def test_successful_password_reset_request(
    client: AsyncClient, db_session: AsyncSession, mail_sender
):
    user = await register(client)

    response = await client.post("/api/request-password-reset", json={"email": "a@x.com"})

    assert response.status_code == 200
    assert response.json() == {"message": GENERIC_MESSAGE}

    # Token stored as a digest, valid for ~1 hour
    result = await db_session.exec(
        select(PasswordResetToken).where(PasswordResetToken.user_id == user["id"])
    )
    reset_token = result.one()
    assert reset_token.used is False
    time_until_expiry = reset_token.expires_at - datetime.utcnow()
    assert time_until_expiry.total_seconds() > 55 * 60
    assert time_until_expiry.total_seconds() <= 60 * 60

    # Email sent with the reset link
    assert len(mail_sender.sent) == 1
    assert mail_sender.sent[0]["to"] == "a@x.com"
    token = mail_sender.last_token()
    assert "/reset-password?token=" + token in mail_sender.sent[0]["text"]
    assert reset_token.token_hash == hash_token(token)


@pytest.mark.asyncio
async def test_password_reset_non_existent_email(
    client: AsyncClient, db_session: AsyncSession, mail_sender
):
    """Unknown email gets the same response and nothing is created or sent"""
    await register(client)

    known = await client.post("/api/request-password-reset", json={"email": "a@x.com"})
    unknown = await client.post(
        "/api/request-password-reset", json={"email": "nonexistent@example.com"}
    )

    assert unknown.status_code == known.status_code == 200
    assert unknown.json() == known.json()
    assert len(mail_sender.sent) == 1

    result = await db_session.exec(select(PasswordResetToken))
    assert len(result.all()) == 1


@pytest.mark.asyncio
async def test_failed_email_delivery_still_returns_success(client: AsyncClient, mail_sender):
    await register(client)
    mail_sender.succeed = False

    response = await client.post("/api/request-password-reset", json={"email": "a@x.com"})

    assert response.status_code == 200
    assert response.json() == {"message": GENERIC_MESSAGE}


@pytest.mark.asyncio
async def test_request_reset_invalid_email(client: AsyncClient):
    response = await client.post("/api/request-password-reset", json={"email": "not-an-email"})

    assert response.status_code == 400
    assert response.json()["error"]["fields"] == [
        {"field": "email", "message": "Please enter a valid email address"}
    ]


@pytest.mark.asyncio
async def test_full_reset_round_trip(client: AsyncClient, mail_sender):
    await register(client)
    token = await request_token(client, mail_sender)

    response = await client.post("/api/reset-password", json=reset_body(token))

    assert response.status_code == 200
    assert response.json() == {"message": "Password has been reset successfully"}

    # No automatic login
    assert (await client.get("/api/user")).status_code == 401

    # Old password rejected, new one accepted
    old = await client.post("/api/login", json={"username": "alice123", "password": "Passw0rd!"})
    assert old.status_code == 401
    new = await client.post(
        "/api/login", json={"username": "alice123", "password": "NewPassw0rd!"}
    )
    assert new.status_code == 200

    # Token cannot be reused
    reuse = await client.post("/api/reset-password", json=reset_body(token, "Another1!pw"))
    assert reuse.status_code == 400
    assert reuse.json()["error"]["code"] == "TOKEN_ALREADY_USED"
    assert reuse.json()["error"]["message"] == "This reset token has already been used"


@pytest.mark.asyncio
async def test_reset_with_unknown_token(client: AsyncClient):
    response = await client.post("/api/reset-password", json=reset_body("0" * 64))

    assert response.status_code == 400
    assert response.json()["error"]["code"] == "INVALID_TOKEN"
    assert response.json()["error"]["message"] == "Invalid or expired reset token"


@pytest.mark.asyncio
async def test_reset_with_expired_token(client: AsyncClient, db_session: AsyncSession, hasher):
    user = await register(client)
    plain_token = "e" * 64
    db_session.add(
        PasswordResetToken(
            user_id=user["id"],
            token_hash=hash_token(plain_token),
            used=False,
            expires_at=datetime.utcnow() - timedelta(minutes=1),
        )
    )
    await db_session.commit()

    response = await client.post("/api/reset-password", json=reset_body(plain_token))

    assert response.status_code == 400
    assert response.json()["error"]["code"] == "TOKEN_EXPIRED"

    # Password unchanged, token still unused
    result = await db_session.exec(select(User).where(User.id == user["id"]))
    assert hasher.verify("Passw0rd!", result.one().password)
    result = await db_session.exec(select(PasswordResetToken))
    assert result.one().used is False


@pytest.mark.asyncio
async def test_mismatched_passwords_do_not_burn_token(client: AsyncClient, mail_sender):
    await register(client)
    token = await request_token(client, mail_sender)

    mismatch = await client.post(
        "/api/reset-password", json=reset_body(token, "NewPassw0rd!", "Different1!")
    )
    assert mismatch.status_code == 400
    assert mismatch.json()["error"]["fields"] == [
        {"field": "confirmPassword", "message": "Passwords don't match"}
    ]

    response = await client.post("/api/reset-password", json=reset_body(token))
    assert response.status_code == 200


@pytest.mark.asyncio
async def test_weak_new_password_rejected(client: AsyncClient, mail_sender):
    await register(client)
    token = await request_token(client, mail_sender)

    response = await client.post("/api/reset-password", json=reset_body(token, "password"))

    assert response.status_code == 400
    assert response.json()["error"]["code"] == "VALIDATION_ERROR"
