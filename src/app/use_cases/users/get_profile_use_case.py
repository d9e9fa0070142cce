from uuid import UUID

from libs.result import Error, Result, Return
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.auth.dtos import UserInfo


class GetProfileUseCase:
    """Loads the authenticated user's own profile"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, user_id: UUID) -> Result[UserInfo]:
        async with self.uow:
            user = await self.uow.users.get_by_id(user_id)
            if user is None:
                return Return.err(Error("USER_NOT_FOUND", "User not found"))
            return Return.ok(UserInfo.from_entity(user))
