"""
Comment Entity

A user's comment on a movie from the external catalog.
"""

from datetime import datetime
from uuid import UUID, uuid4

from sqlmodel import CheckConstraint, Column, DateTime, Field, Index, SQLModel

from src.domain.base import utcnow

COMMENT_MAX_LENGTH = 1000


class Comment(SQLModel, table=True):
    """
    Comment entity - free text attached to a movie.

    Business Rules:
    - movie_id is an external catalog id, not a foreign key
    - Content is 1-1000 characters after trimming
    - Content is mutable and the comment deletable by its owner only
    - likes is changed by atomic increments only, never read-modify-write
    """

    __tablename__ = "comments"

    id: UUID = Field(default_factory=uuid4, primary_key=True)

    user_id: UUID = Field(foreign_key="users.id", nullable=False, index=True)
    movie_id: str = Field(nullable=False, index=True, max_length=64)

    content: str = Field(max_length=COMMENT_MAX_LENGTH)
    likes: int = Field(default=0)

    # Timestamps
    created_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))
    updated_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))

    __table_args__ = (
        Index("idx_comment_movie_created", "movie_id", "created_at"),
        CheckConstraint("likes >= 0", name="ck_comment_likes_non_negative"),
    )
