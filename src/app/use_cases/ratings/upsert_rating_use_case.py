import logging
from typing import Optional
from uuid import UUID

from libs.result import Error, Result, Return
from src.app.services.ownership_guard import OwnershipGuard
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.movies import normalize_movie_id
from src.domain.entities import OwnershipAction
from .dtos import RatingInfo
from .validation import validate_rating

logger = logging.getLogger(__name__)


class UpsertRatingUseCase:
    """
    Use case for rating a movie.

    Business Rules:
    - Users rate only on their own behalf, and only while their account exists
    - Rating is an integer in [1, 5]
    - One rating per (user, movie): resubmitting overwrites the value.
      The storage statement is a single insert-or-update, so two concurrent
      first submissions end as one row instead of a duplicate-key error.
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self,
        owner_id: UUID,
        actor_id: UUID,
        movie_id: str,
        rating,
        movie_title: Optional[str] = None,
    ) -> Result[RatingInfo]:
        if not OwnershipGuard.authorize(actor_id, owner_id, OwnershipAction.update):
            return Return.err(Error("FORBIDDEN", "Not authorized to rate for this user"))

        movie_validation = normalize_movie_id(movie_id)
        if movie_validation.is_err():
            return Return.err(movie_validation.error)
        movie_id = movie_validation.value

        rating_validation = validate_rating(rating)
        if rating_validation.is_err():
            return Return.err(rating_validation.error)

        async with self.uow:
            if await self.uow.users.get_by_id(actor_id) is None:
                return Return.err(Error("USER_NOT_FOUND", "User not found"))

            stored = await self.uow.ratings.upsert(
                actor_id, movie_id, rating_validation.value, movie_title
            )
            await self.uow.commit()

            logger.info(f"User {actor_id} rated movie {movie_id}: {stored.rating}")
            return Return.ok(RatingInfo.from_entity(stored))
