"""
User Entity

Represents a registered account holder.
"""

from typing import Optional

from sqlmodel import Field, SQLModel


class User(SQLModel, table=True):
    """
    User entity - a person who can log in with username and password.

    Business Rules:
    - Username must be unique across all users
    - Email must be unique across all users
    - Password stored as an Argon2id PHC string, never in plain text
    - Never deleted; password replaced on reset
    """

    __tablename__ = "users"

    id: Optional[int] = Field(default=None, primary_key=True)
    username: str = Field(unique=True, index=True, max_length=255)
    email: str = Field(unique=True, index=True, max_length=255)
    password: str = Field(max_length=255)
