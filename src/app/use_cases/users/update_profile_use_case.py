from uuid import UUID

from libs.result import Error, Result, Return
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.auth.dtos import UserInfo
from src.app.use_cases.auth.validation import normalize_genres
from src.domain.base import utcnow
from .dtos import UpdateProfileCommand


class UpdateProfileUseCase:
    """
    Updates the authenticated user's profile fields.

    Business Rules:
    - Only first_name, last_name and favorite_genres are mutable here
    - Blank names are ignored rather than stored
    - favorite_genres keeps set semantics
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, user_id: UUID, command: UpdateProfileCommand) -> Result[UserInfo]:
        async with self.uow:
            user = await self.uow.users.get_by_id(user_id)
            if user is None:
                return Return.err(Error("USER_NOT_FOUND", "User not found"))

            if command.first_name and command.first_name.strip():
                user.first_name = command.first_name.strip()
            if command.last_name and command.last_name.strip():
                user.last_name = command.last_name.strip()
            if command.favorite_genres is not None:
                user.favorite_genres = normalize_genres(command.favorite_genres)

            user.updated_at = utcnow()
            user = await self.uow.users.update(user)

            await self.uow.commit()

            return Return.ok(UserInfo.from_entity(user))
