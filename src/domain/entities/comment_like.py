"""
CommentLike Entity

Records which users liked which comment.
"""

from datetime import datetime
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, SQLModel, UniqueConstraint

from src.domain.base import utcnow


class CommentLike(SQLModel, table=True):
    """
    CommentLike entity - one row per (comment, user) like.

    Business Rules:
    - (comment_id, user_id) must be unique: a user likes a comment at most once
    - The comment's likes counter is incremented only when a row is inserted
    """

    __tablename__ = "comment_likes"

    id: UUID = Field(default_factory=uuid4, primary_key=True)

    comment_id: UUID = Field(foreign_key="comments.id", nullable=False, index=True)
    user_id: UUID = Field(foreign_key="users.id", nullable=False, index=True)

    created_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))

    __table_args__ = (
        UniqueConstraint("comment_id", "user_id", name="uq_comment_like_comment_user"),
    )
