from uuid import UUID

from libs.result import Error, Result, Return
from src.app.services.unit_of_work import UnitOfWork
from .dtos import PublicProfile


class GetPublicProfileUseCase:
    """Loads another user's public profile with activity counts"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, user_id: UUID) -> Result[PublicProfile]:
        async with self.uow:
            user = await self.uow.users.get_by_id(user_id)
            if user is None:
                return Return.err(Error("USER_NOT_FOUND", "User not found"))

            comment_count = await self.uow.comments.count_by_user(user_id)
            rating_count = await self.uow.ratings.count_by_user(user_id)

            return Return.ok(
                PublicProfile(
                    id=str(user.id),
                    username=user.username,
                    first_name=user.first_name,
                    last_name=user.last_name,
                    favorite_genres=list(user.favorite_genres or []),
                    is_email_verified=user.is_email_verified,
                    created_at=user.created_at,
                    comment_count=comment_count,
                    rating_count=rating_count,
                )
            )
