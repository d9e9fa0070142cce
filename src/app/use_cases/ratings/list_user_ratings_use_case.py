from uuid import UUID

from libs.result import Result, Return
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.pagination import Pagination, page_offset
from .dtos import RatingInfo, RatingPage


class ListUserRatingsUseCase:
    """Reads a user's ratings, most recently updated first"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, user_id: UUID, page: int = 1, limit: int = 10) -> Result[RatingPage]:
        async with self.uow:
            ratings = await self.uow.ratings.list_by_user(
                user_id, offset=page_offset(page, limit), limit=limit
            )
            total = await self.uow.ratings.count_by_user(user_id)

            return Return.ok(
                RatingPage(
                    ratings=[RatingInfo.from_entity(r) for r in ratings],
                    pagination=Pagination.build(page, limit, total),
                )
            )
