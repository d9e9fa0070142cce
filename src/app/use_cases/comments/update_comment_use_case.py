from uuid import UUID

from libs.result import Error, Result, Return
from src.app.services.ownership_guard import OwnershipGuard
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import OwnershipAction
from .dtos import CommentInfo
from .validation import validate_content


class UpdateCommentUseCase:
    """
    Use case for editing a comment.

    Business Rules:
    - Only the owner may edit (the path owner must be the caller)
    - Content is re-validated like on creation
    - A missing comment and someone else's comment both give COMMENT_NOT_FOUND
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, comment_id: UUID, owner_id: UUID, actor_id: UUID, content: str
    ) -> Result[CommentInfo]:
        if not OwnershipGuard.authorize(actor_id, owner_id, OwnershipAction.update):
            return Return.err(Error("FORBIDDEN", "Not authorized to update this comment"))

        content_validation = validate_content(content)
        if content_validation.is_err():
            return Return.err(content_validation.error)

        async with self.uow:
            updated = await self.uow.comments.update_content_if_owner(
                comment_id, actor_id, content_validation.value
            )
            if not updated:
                return Return.err(
                    Error("COMMENT_NOT_FOUND", "Comment not found or unauthorized")
                )

            row = await self.uow.comments.get_with_author(comment_id)
            if row is None:
                return Return.err(Error("COMMENT_NOT_FOUND", "Comment not found"))
            await self.uow.commit()

            comment, author = row
            return Return.ok(CommentInfo.from_entities(comment, author))
