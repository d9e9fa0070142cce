from uuid import UUID

from libs.result import Error, Result, Return
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.movies import normalize_movie_id
from src.domain.entities import Comment
from .dtos import CommentInfo
from .validation import validate_content


class CreateCommentUseCase:
    """
    Use case for posting a comment on a movie.

    Business Rules:
    - Content is trimmed and must be 1-1000 characters
    - New comments start with likes=0
    - Response includes the author's display identity
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, user_id: UUID, movie_id: str, content: str) -> Result[CommentInfo]:
        content_validation = validate_content(content)
        if content_validation.is_err():
            return Return.err(content_validation.error)

        movie_validation = normalize_movie_id(movie_id)
        if movie_validation.is_err():
            return Return.err(movie_validation.error)
        movie_id = movie_validation.value

        async with self.uow:
            author = await self.uow.users.get_by_id(user_id)
            if author is None:
                return Return.err(Error("USER_NOT_FOUND", "User not found"))

            comment = Comment(
                user_id=user_id,
                movie_id=movie_id,
                content=content_validation.value,
                likes=0,
            )
            comment = await self.uow.comments.create(comment)

            await self.uow.commit()

            return Return.ok(CommentInfo.from_entities(comment, author))
