"""
Rating Entity

A user's 1-5 star rating of a movie.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlmodel import (
    CheckConstraint,
    Column,
    DateTime,
    Field,
    Index,
    SQLModel,
    UniqueConstraint,
)

from src.domain.base import utcnow

MIN_RATING = 1
MAX_RATING = 5


class Rating(SQLModel, table=True):
    """
    Rating entity - at most one per (user, movie).

    Business Rules:
    - (user_id, movie_id) must be unique
    - A second submission overwrites the stored value (upsert)
    - rating is an integer in [1, 5]
    """

    __tablename__ = "ratings"

    id: UUID = Field(default_factory=uuid4, primary_key=True)

    user_id: UUID = Field(foreign_key="users.id", nullable=False, index=True)
    movie_id: str = Field(nullable=False, index=True, max_length=64)

    rating: int = Field(nullable=False)
    movie_title: Optional[str] = Field(default=None, max_length=255)

    # Timestamps
    created_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))
    updated_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))

    __table_args__ = (
        UniqueConstraint("user_id", "movie_id", name="uq_rating_user_movie"),
        CheckConstraint("rating >= 1 AND rating <= 5", name="ck_rating_range"),
        Index("idx_rating_user_updated", "user_id", "updated_at"),
    )
