from typing import List

from libs.result import Result, Return
from src.app.services.unit_of_work import UnitOfWork
from .dtos import TopRatedMovie
from .validation import round_half_up

DEFAULT_MIN_RATINGS = 5


class GetTopRatedMoviesUseCase:
    """
    Use case for the top-rated leaderboard.

    Business Rules:
    - Only movies with at least min_ratings ratings qualify
    - Ordered by average desc, then number of ratings desc
    - Aggregation happens in the database
    """

    def __init__(self, uow: UnitOfWork, min_ratings: int = DEFAULT_MIN_RATINGS):
        self.uow = uow
        self.min_ratings = min_ratings

    async def execute(self, limit: int = 10) -> Result[List[TopRatedMovie]]:
        async with self.uow:
            stats = await self.uow.ratings.get_top_rated(self.min_ratings, limit)

            return Return.ok(
                [
                    TopRatedMovie(
                        movie_id=s.movie_id,
                        movie_title=s.movie_title,
                        average_rating=round_half_up(s.average_rating),
                        total_ratings=s.total_ratings,
                    )
                    for s in stats
                ]
            )
