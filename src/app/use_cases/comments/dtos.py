"""
Comment Use Case DTOs
"""

from datetime import datetime
from typing import List, Optional

from src.app.use_cases.dto_base import CamelModel
from src.app.use_cases.pagination import Pagination
from src.domain.entities import Comment, User


class CommentAuthor(CamelModel):
    """Display identity of a comment's owner"""

    id: str
    username: str
    first_name: str
    last_name: str


class CommentInfo(CamelModel):
    """Comment with its owner resolved for display"""

    id: str
    movie_id: str
    content: str
    likes: int
    user_id: str
    user: Optional[CommentAuthor]
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_entities(cls, comment: Comment, author: Optional[User]) -> "CommentInfo":
        return cls(
            id=str(comment.id),
            movie_id=comment.movie_id,
            content=comment.content,
            likes=comment.likes,
            user_id=str(comment.user_id),
            user=(
                CommentAuthor(
                    id=str(author.id),
                    username=author.username,
                    first_name=author.first_name,
                    last_name=author.last_name,
                )
                if author is not None
                else None
            ),
            created_at=comment.created_at,
            updated_at=comment.updated_at,
        )


class CommentPage(CamelModel):
    """One page of comments"""

    comments: List[CommentInfo]
    pagination: Pagination


class LikeResult(CamelModel):
    """Outcome of a like: liked is False when the actor had already liked it"""

    liked: bool
    likes: int
    comment: CommentInfo
