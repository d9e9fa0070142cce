import logging
from uuid import UUID

from libs.result import Error, Result, Return
from src.app.services.ownership_guard import OwnershipGuard
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import OwnershipAction

logger = logging.getLogger(__name__)


class DeleteCommentUseCase:
    """Deletes a comment and its likes when the caller owns it"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, comment_id: UUID, owner_id: UUID, actor_id: UUID) -> Result[None]:
        if not OwnershipGuard.authorize(actor_id, owner_id, OwnershipAction.delete):
            return Return.err(Error("FORBIDDEN", "Not authorized to delete this comment"))

        async with self.uow:
            deleted = await self.uow.comments.delete_if_owner(comment_id, actor_id)
            if not deleted:
                return Return.err(
                    Error("COMMENT_NOT_FOUND", "Comment not found or unauthorized")
                )

            await self.uow.commit()

            logger.info(f"Comment {comment_id} deleted by {actor_id}")
            return Return.ok(None)
