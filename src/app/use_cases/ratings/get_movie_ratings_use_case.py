from libs.result import Result, Return
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.movies import normalize_movie_id
from .dtos import MovieRatings, RatingInfo
from .validation import round_half_up


class GetMovieRatingsUseCase:
    """
    Use case for reading every rating of a movie.

    averageRating is the mean rounded half-up to one decimal, 0 when
    nobody rated the movie yet.
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, movie_id: str) -> Result[MovieRatings]:
        movie_validation = normalize_movie_id(movie_id)
        if movie_validation.is_err():
            return Return.err(movie_validation.error)
        movie_id = movie_validation.value

        async with self.uow:
            rows = await self.uow.ratings.list_by_movie(movie_id)

            total = len(rows)
            average = (
                round_half_up(sum(rating.rating for rating, _ in rows) / total)
                if total
                else 0
            )

            return Return.ok(
                MovieRatings(
                    movie_id=movie_id,
                    ratings=[RatingInfo.from_entity(r, u) for r, u in rows],
                    average_rating=average,
                    total_ratings=total,
                )
            )
