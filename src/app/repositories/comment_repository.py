from abc import ABC, abstractmethod
from typing import List, Optional, Tuple
from uuid import UUID

from src.domain.entities import Comment, CommentSort, User

CommentWithAuthor = Tuple[Comment, Optional[User]]


class ICommentRepository(ABC):
    """Comment repository interface - application layer"""

    @abstractmethod
    async def create(self, comment: Comment) -> Comment:
        """Create a new comment"""
        pass

    @abstractmethod
    async def get_by_id(self, comment_id: UUID) -> Optional[Comment]:
        """Get comment by ID"""
        pass

    @abstractmethod
    async def get_with_author(self, comment_id: UUID) -> Optional[CommentWithAuthor]:
        """Get comment by ID together with its author, bypassing cached state"""
        pass

    @abstractmethod
    async def list_by_movie(
        self, movie_id: str, offset: int, limit: int, sort: CommentSort
    ) -> List[CommentWithAuthor]:
        """Get a page of comments for a movie"""
        pass

    @abstractmethod
    async def count_by_movie(self, movie_id: str) -> int:
        """Count comments for a movie"""
        pass

    @abstractmethod
    async def list_by_user(
        self, user_id: UUID, offset: int, limit: int
    ) -> List[CommentWithAuthor]:
        """Get a page of a user's comments, newest first"""
        pass

    @abstractmethod
    async def count_by_user(self, user_id: UUID) -> int:
        """Count a user's comments"""
        pass

    @abstractmethod
    async def update_content_if_owner(
        self, comment_id: UUID, owner_id: UUID, content: str
    ) -> bool:
        """Update content in one statement scoped by id and owner; False on miss"""
        pass

    @abstractmethod
    async def delete_if_owner(self, comment_id: UUID, owner_id: UUID) -> bool:
        """Delete comment and its likes scoped by id and owner; False on miss"""
        pass

    @abstractmethod
    async def add_like(self, comment_id: UUID, user_id: UUID) -> bool:
        """
        Record a like and increment the counter atomically.

        Returns False (and leaves the counter untouched) if the user
        already liked the comment.
        """
        pass

    @abstractmethod
    async def delete_all_by_user(self, user_id: UUID) -> int:
        """
        Remove everything a user contributed to comments: their likes on
        other comments (decrementing those counters), their comments and
        the likes on them. Returns the number of comments deleted.
        """
        pass
