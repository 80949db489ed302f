"""
AuthSession Entity

Server-side login sessions.
"""

from datetime import datetime
from typing import Optional

from sqlalchemy import ForeignKey, Integer
from sqlmodel import Column, DateTime, Field, Index, SQLModel


class AuthSession(SQLModel, table=True):
    """
    AuthSession entity - one logged-in browser.

    Business Rules:
    - The cookie holds a random session key; only its SHA-256 digest is stored
    - Logout deletes the row, so a copied cookie stops working
    - Expires SESSION_MAX_AGE after login
    - Removed together with the owning user
    """

    __tablename__ = "sessions"

    id: Optional[int] = Field(default=None, primary_key=True)

    user_id: int = Field(
        sa_column=Column(
            Integer,
            ForeignKey("users.id", ondelete="CASCADE"),
            nullable=False,
            index=True,
        )
    )
    session_hash: str = Field(unique=True, max_length=64)  # SHA-256 output

    # Timestamps (naive UTC)
    created_at: datetime = Field(
        default_factory=datetime.utcnow, sa_column=Column(DateTime, nullable=False)
    )
    expires_at: datetime = Field(sa_column=Column(DateTime, nullable=False))

    __table_args__ = (
        Index("idx_session_expires_at", "expires_at"),
    )

    def is_expired(self, now: datetime) -> bool:
        return now > self.expires_at
