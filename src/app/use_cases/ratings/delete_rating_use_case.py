from uuid import UUID

from libs.result import Error, Result, Return
from src.app.services.ownership_guard import OwnershipGuard
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.movies import normalize_movie_id
from src.domain.entities import OwnershipAction


class DeleteRatingUseCase:
    """Removes the caller's rating of a movie"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, owner_id: UUID, actor_id: UUID, movie_id: str) -> Result[None]:
        if not OwnershipGuard.authorize(actor_id, owner_id, OwnershipAction.delete):
            return Return.err(Error("FORBIDDEN", "Not authorized to delete this rating"))

        movie_validation = normalize_movie_id(movie_id)
        if movie_validation.is_err():
            return Return.err(movie_validation.error)
        movie_id = movie_validation.value

        async with self.uow:
            deleted = await self.uow.ratings.delete(actor_id, movie_id)
            if not deleted:
                return Return.err(Error("RATING_NOT_FOUND", "Rating not found"))

            await self.uow.commit()
            return Return.ok(None)
