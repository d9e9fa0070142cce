"""
Delete Account Use Case

Removes a user together with everything they contributed.
"""

import logging
from uuid import UUID

from libs.result import Error, Result, Return
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.auth.dtos import StatusResponse
from src.app.use_cases.auth.validation import password_matches

logger = logging.getLogger(__name__)


class DeleteAccountUseCase:
    """
    Use case for deleting an account.

    Business Rules:
    - Password must be confirmed
    - Cascade in one transaction: likes given (counters decremented),
      own comments with their likes, ratings, then the user row
    - No comment, like or rating may reference a deleted user
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, user_id: UUID, password: str) -> Result[StatusResponse]:
        async with self.uow:
            user = await self.uow.users.get_by_id(user_id)
            if user is None:
                return Return.err(Error("USER_NOT_FOUND", "User not found"))

            if not password_matches(password, user.password_hash.encode()):
                return Return.err(Error("INVALID_PASSWORD", "Password is incorrect"))

            comments_deleted = await self.uow.comments.delete_all_by_user(user_id)
            ratings_deleted = await self.uow.ratings.delete_all_by_user(user_id)
            await self.uow.users.delete(user_id)

            await self.uow.commit()

            logger.info(
                f"Account {user_id} deleted "
                f"({comments_deleted} comments, {ratings_deleted} ratings)"
            )

            return Return.ok(
                StatusResponse(status="deleted", message="Account deleted successfully")
            )
