from uuid import UUID

from libs.result import Error, Result, Return
from src.app.services.unit_of_work import UnitOfWork
from .dtos import CommentInfo, LikeResult


class LikeCommentUseCase:
    """
    Use case for liking a comment.

    Business Rules:
    - Any authenticated user with a live account may like any comment,
      including their own
    - A user likes a comment at most once; repeating it is a no-op
    - The counter is incremented in the database, never read-modify-write,
      so concurrent likes from different users are all counted
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, comment_id: UUID, actor_id: UUID) -> Result[LikeResult]:
        async with self.uow:
            if await self.uow.users.get_by_id(actor_id) is None:
                return Return.err(Error("USER_NOT_FOUND", "User not found"))

            comment = await self.uow.comments.get_by_id(comment_id)
            if comment is None:
                return Return.err(Error("COMMENT_NOT_FOUND", "Comment not found"))

            liked = await self.uow.comments.add_like(comment_id, actor_id)
            row = await self.uow.comments.get_with_author(comment_id)
            if row is None:
                return Return.err(Error("COMMENT_NOT_FOUND", "Comment not found"))
            await self.uow.commit()

            comment, author = row
            return Return.ok(
                LikeResult(
                    liked=liked,
                    likes=comment.likes,
                    comment=CommentInfo.from_entities(comment, author),
                )
            )
