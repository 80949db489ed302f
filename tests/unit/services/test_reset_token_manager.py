"""
Unit tests for ResetTokenManager

Runs against the in-memory unit of work.
"""
from datetime import datetime, timedelta

import pytest

from account_service.app.services.reset_token_manager import ResetTokenManager, hash_token
from account_service.domain.entities import User
from account_service.domain.errors import InvalidTokenError, NotFoundError, TokenRejection


async def create_user(uow, username="alice123", email="a@x.com") -> User:
    return await uow.users.create(User(username=username, email=email, password="hash"))


@pytest.mark.asyncio
async def test_issue_then_validate(memory_uow):
    async with memory_uow:
        user = await create_user(memory_uow)
        manager = ResetTokenManager(memory_uow)

        token = await manager.issue(user.id)
        record = await manager.validate(token)

    assert record.user_id == user.id
    assert record.used is False
    remaining = record.expires_at - datetime.utcnow()
    assert timedelta(minutes=59) < remaining <= timedelta(hours=1)


@pytest.mark.asyncio
async def test_issued_token_is_random_hex(memory_uow):
    async with memory_uow:
        user = await create_user(memory_uow)
        manager = ResetTokenManager(memory_uow)

        first = await manager.issue(user.id)
        second = await manager.issue(user.id)

    assert first != second
    assert len(first) == 64
    int(first, 16)


@pytest.mark.asyncio
async def test_only_digest_is_stored(memory_uow, memory_store):
    async with memory_uow:
        user = await create_user(memory_uow)
        token = await ResetTokenManager(memory_uow).issue(user.id)
        await memory_uow.commit()

    stored = list(memory_store.password_reset_tokens.values())
    assert len(stored) == 1
    assert stored[0].token_hash == hash_token(token)
    assert stored[0].token_hash != token


@pytest.mark.asyncio
async def test_issue_for_unknown_user(memory_uow):
    async with memory_uow:
        with pytest.raises(NotFoundError):
            await ResetTokenManager(memory_uow).issue(999)


@pytest.mark.asyncio
async def test_unknown_token(memory_uow):
    async with memory_uow:
        with pytest.raises(InvalidTokenError) as exc_info:
            await ResetTokenManager(memory_uow).validate("f" * 64)

    assert exc_info.value.reason == TokenRejection.not_found
    assert exc_info.value.code == "INVALID_TOKEN"


@pytest.mark.asyncio
async def test_consume_is_idempotent(memory_uow):
    async with memory_uow:
        user = await create_user(memory_uow)
        manager = ResetTokenManager(memory_uow)
        token = await manager.issue(user.id)
        record = await manager.validate(token)

        assert await manager.consume(record.id) is True
        assert await manager.consume(record.id) is False
        assert record.used is True

        with pytest.raises(InvalidTokenError) as exc_info:
            await manager.validate(token)

    assert exc_info.value.reason == TokenRejection.used
    assert exc_info.value.message == "This reset token has already been used"


@pytest.mark.asyncio
async def test_expired_token_rejected(memory_uow):
    issued_at = datetime.utcnow()

    async with memory_uow:
        user = await create_user(memory_uow)
        token = await ResetTokenManager(memory_uow, now=lambda: issued_at).issue(user.id)

        later = ResetTokenManager(memory_uow, now=lambda: issued_at + timedelta(hours=1, seconds=1))
        with pytest.raises(InvalidTokenError) as exc_info:
            await later.validate(token)

    assert exc_info.value.reason == TokenRejection.expired


@pytest.mark.asyncio
async def test_token_valid_until_expiry_instant(memory_uow):
    issued_at = datetime.utcnow()

    async with memory_uow:
        user = await create_user(memory_uow)
        token = await ResetTokenManager(memory_uow, now=lambda: issued_at).issue(user.id)

        at_expiry = ResetTokenManager(memory_uow, now=lambda: issued_at + timedelta(hours=1))
        record = await at_expiry.validate(token)

    assert record.used is False


@pytest.mark.asyncio
async def test_used_reported_before_expired(memory_uow):
    issued_at = datetime.utcnow()

    async with memory_uow:
        user = await create_user(memory_uow)
        manager = ResetTokenManager(memory_uow, now=lambda: issued_at)
        token = await manager.issue(user.id)
        record = await manager.validate(token)
        await manager.consume(record.id)

        later = ResetTokenManager(memory_uow, now=lambda: issued_at + timedelta(days=1))
        with pytest.raises(InvalidTokenError) as exc_info:
            await later.validate(token)

    assert exc_info.value.reason == TokenRejection.used
