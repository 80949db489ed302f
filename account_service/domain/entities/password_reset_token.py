"""
PasswordResetToken Entity

Single-use, time-limited password reset tokens.
"""

from datetime import datetime, timedelta
from typing import Optional

from sqlalchemy import ForeignKey, Integer
from sqlmodel import Column, DateTime, Field, Index, SQLModel

RESET_TOKEN_TTL = timedelta(hours=1)


class PasswordResetToken(SQLModel, table=True):
    """
    PasswordResetToken entity - single-use password reset tokens.

    Business Rules:
    - Expires one hour after issue
    - Only the SHA-256 digest of the token is stored
    - Single-use: used flips to True once and never back
    - Removed together with the owning user
    """

    __tablename__ = "password_reset_tokens"

    id: Optional[int] = Field(default=None, primary_key=True)

    user_id: int = Field(
        sa_column=Column(
            Integer,
            ForeignKey("users.id", ondelete="CASCADE"),
            nullable=False,
            index=True,
        )
    )
    token_hash: str = Field(unique=True, max_length=64)  # SHA-256 output

    used: bool = Field(default=False)

    # Timestamps (naive UTC)
    expires_at: datetime = Field(sa_column=Column(DateTime, nullable=False))
    created_at: datetime = Field(
        default_factory=datetime.utcnow, sa_column=Column(DateTime, nullable=False)
    )

    __table_args__ = (
        Index("idx_password_reset_expires_at", "expires_at"),
    )

    def is_expired(self, now: datetime) -> bool:
        return now > self.expires_at
