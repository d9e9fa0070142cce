from typing import List, Optional
from uuid import UUID, uuid4

from sqlalchemy import delete, func, update
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from src.adapter.repositories.dialect import conflict_insert
from src.app.repositories.comment_repository import CommentWithAuthor, ICommentRepository
from src.domain.base import utcnow
from src.domain.entities import Comment, CommentLike, CommentSort, User

_ORDERINGS = {
    CommentSort.newest: (Comment.created_at.desc(), Comment.id.desc()),
    CommentSort.oldest: (Comment.created_at.asc(), Comment.id.asc()),
    CommentSort.likes: (Comment.likes.desc(), Comment.created_at.desc()),
}


class CommentRepository(ICommentRepository):
    """Comment repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    def _with_author(self):
        return (
            select(Comment, User)
            .join(User, User.id == Comment.user_id, isouter=True)
            .execution_options(populate_existing=True)
        )

    async def create(self, comment: Comment) -> Comment:
        """Create a new comment"""
        self.session.add(comment)
        await self.session.flush()
        await self.session.refresh(comment)
        return comment

    async def get_by_id(self, comment_id: UUID) -> Optional[Comment]:
        """Get comment by ID"""
        stmt = select(Comment).where(Comment.id == comment_id)
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def get_with_author(self, comment_id: UUID) -> Optional[CommentWithAuthor]:
        """Get comment by ID together with its author"""
        stmt = self._with_author().where(Comment.id == comment_id)
        result = await self.session.execute(stmt)
        row = result.one_or_none()
        if row is None:
            return None
        return row[0], row[1]

    async def list_by_movie(
        self, movie_id: str, offset: int, limit: int, sort: CommentSort
    ) -> List[CommentWithAuthor]:
        """Get a page of comments for a movie"""
        stmt = (
            self._with_author()
            .where(Comment.movie_id == movie_id)
            .order_by(*_ORDERINGS[sort])
            .offset(offset)
            .limit(limit)
        )
        result = await self.session.execute(stmt)
        return [(comment, author) for comment, author in result.all()]

    async def count_by_movie(self, movie_id: str) -> int:
        """Count comments for a movie"""
        stmt = select(func.count()).select_from(Comment).where(Comment.movie_id == movie_id)
        result = await self.session.execute(stmt)
        return result.scalar_one()

    async def list_by_user(
        self, user_id: UUID, offset: int, limit: int
    ) -> List[CommentWithAuthor]:
        """Get a page of a user's comments, newest first"""
        stmt = (
            self._with_author()
            .where(Comment.user_id == user_id)
            .order_by(*_ORDERINGS[CommentSort.newest])
            .offset(offset)
            .limit(limit)
        )
        result = await self.session.execute(stmt)
        return [(comment, author) for comment, author in result.all()]

    async def count_by_user(self, user_id: UUID) -> int:
        """Count a user's comments"""
        stmt = select(func.count()).select_from(Comment).where(Comment.user_id == user_id)
        result = await self.session.execute(stmt)
        return result.scalar_one()

    async def update_content_if_owner(
        self, comment_id: UUID, owner_id: UUID, content: str
    ) -> bool:
        """Update content scoped by id and owner"""
        stmt = (
            update(Comment)
            .where(Comment.id == comment_id, Comment.user_id == owner_id)
            .values(content=content, updated_at=utcnow())
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount > 0

    async def delete_if_owner(self, comment_id: UUID, owner_id: UUID) -> bool:
        """Delete comment and its likes scoped by id and owner"""
        owned = select(Comment.id).where(
            Comment.id == comment_id, Comment.user_id == owner_id
        )
        await self.session.execute(
            delete(CommentLike).where(CommentLike.comment_id.in_(owned))
        )
        result = await self.session.execute(
            delete(Comment).where(Comment.id == comment_id, Comment.user_id == owner_id)
        )
        await self.session.flush()
        return result.rowcount > 0

    async def add_like(self, comment_id: UUID, user_id: UUID) -> bool:
        """Insert the like row if absent, then increment the counter in the same transaction"""
        stmt = (
            conflict_insert(self.session, CommentLike.__table__)
            .values(id=uuid4(), comment_id=comment_id, user_id=user_id, created_at=utcnow())
            .on_conflict_do_nothing(index_elements=["comment_id", "user_id"])
        )
        result = await self.session.execute(stmt)
        if result.rowcount == 0:
            return False

        await self.session.execute(
            update(Comment)
            .where(Comment.id == comment_id)
            .values(likes=Comment.likes + 1)
        )
        await self.session.flush()
        return True

    async def delete_all_by_user(self, user_id: UUID) -> int:
        """Remove a user's likes, comments and the likes on those comments"""
        liked = select(CommentLike.comment_id).where(CommentLike.user_id == user_id)
        await self.session.execute(
            update(Comment)
            .where(Comment.id.in_(liked), Comment.user_id != user_id)
            .values(likes=Comment.likes - 1)
            .execution_options(synchronize_session=False)
        )
        await self.session.execute(
            delete(CommentLike).where(CommentLike.user_id == user_id)
        )

        own = select(Comment.id).where(Comment.user_id == user_id)
        await self.session.execute(
            delete(CommentLike).where(CommentLike.comment_id.in_(own))
        )
        result = await self.session.execute(
            delete(Comment).where(Comment.user_id == user_id)
        )
        await self.session.flush()
        return result.rowcount
