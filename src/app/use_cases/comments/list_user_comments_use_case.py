from uuid import UUID

from libs.result import Result, Return
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.pagination import Pagination, page_offset
from .dtos import CommentInfo, CommentPage


class ListUserCommentsUseCase:
    """Reads a user's comments across all movies, newest first"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, user_id: UUID, page: int = 1, limit: int = 10) -> Result[CommentPage]:
        async with self.uow:
            rows = await self.uow.comments.list_by_user(
                user_id, offset=page_offset(page, limit), limit=limit
            )
            total = await self.uow.comments.count_by_user(user_id)

            return Return.ok(
                CommentPage(
                    comments=[CommentInfo.from_entities(c, a) for c, a in rows],
                    pagination=Pagination.build(page, limit, total),
                )
            )
