from libs.result import Result, Return
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.movies import normalize_movie_id
from src.app.use_cases.pagination import Pagination, page_offset
from src.domain.entities import CommentSort
from .dtos import CommentInfo, CommentPage


class ListMovieCommentsUseCase:
    """
    Use case for reading a movie's comments.

    Business Rules:
    - newest (default): creation time descending
    - oldest: creation time ascending
    - likes: like count descending, newest first among ties
    - hasNextPage = page * limit < total
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self,
        movie_id: str,
        page: int = 1,
        limit: int = 10,
        sort_by: CommentSort = CommentSort.newest,
    ) -> Result[CommentPage]:
        movie_validation = normalize_movie_id(movie_id)
        if movie_validation.is_err():
            return Return.err(movie_validation.error)
        movie_id = movie_validation.value

        async with self.uow:
            rows = await self.uow.comments.list_by_movie(
                movie_id, offset=page_offset(page, limit), limit=limit, sort=sort_by
            )
            total = await self.uow.comments.count_by_movie(movie_id)

            return Return.ok(
                CommentPage(
                    comments=[CommentInfo.from_entities(c, a) for c, a in rows],
                    pagination=Pagination.build(page, limit, total),
                )
            )
