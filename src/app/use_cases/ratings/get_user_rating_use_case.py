from typing import Optional
from uuid import UUID

from libs.result import Result, Return
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.movies import normalize_movie_id
from .dtos import RatingInfo


class GetUserRatingUseCase:
    """The caller's own rating of one movie, or None when they have not rated it"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, user_id: UUID, movie_id: str) -> Result[Optional[RatingInfo]]:
        movie_validation = normalize_movie_id(movie_id)
        if movie_validation.is_err():
            return Return.err(movie_validation.error)

        async with self.uow:
            rating = await self.uow.ratings.get_by_user_and_movie(
                user_id, movie_validation.value
            )
            return Return.ok(RatingInfo.from_entity(rating) if rating else None)
