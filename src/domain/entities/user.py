"""
User Entity

Represents a registered reviewer.
"""

from datetime import datetime
from typing import List, Optional
from uuid import UUID, uuid4

from sqlmodel import JSON, Column, DateTime, Field, Index, SQLModel

from src.domain.base import utcnow


class User(SQLModel, table=True):
    """
    User entity - a person who comments on and rates movies.

    Business Rules:
    - Username and email are unique, both stored lower-cased
    - Password stored as bcrypt hash (cost factor 12)
    - favorite_genres behaves as a set (no duplicates)
    - At most one live password reset token (SHA-256 hash) per user
    - Profile fields are mutable by the owning user only
    """

    __tablename__ = "users"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    username: str = Field(unique=True, index=True, max_length=50)
    email: str = Field(unique=True, index=True, max_length=255)
    password_hash: str = Field(max_length=60)  # Bcrypt output is 60 chars

    first_name: str = Field(max_length=100)
    last_name: str = Field(max_length=100)
    favorite_genres: List[str] = Field(default_factory=list, sa_column=Column(JSON))

    # Email verification
    is_email_verified: bool = Field(default=False)
    email_verification_token: Optional[str] = Field(
        default=None, unique=True, index=True, max_length=64
    )

    # Password reset
    reset_password_token: Optional[str] = Field(default=None, index=True, max_length=64)
    reset_password_expires: Optional[datetime] = Field(
        default=None, sa_column=Column(DateTime)
    )

    # Timestamps
    created_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))
    updated_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))

    __table_args__ = (Index("idx_user_email_verified", "is_email_verified"),)
