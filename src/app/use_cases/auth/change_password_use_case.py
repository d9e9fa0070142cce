"""
Change Password Use Case

Lets an authenticated user replace their password.
"""

from uuid import UUID

import bcrypt

from libs.result import Error, Result, Return
from src.app.services.unit_of_work import UnitOfWork
from src.domain.base import utcnow
from .dtos import StatusResponse
from .validation import password_matches, validate_password


class ChangePasswordUseCase:
    """
    Business Rules:
    - Current password must be verified first
    - New password must be at least 6 characters
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, user_id: UUID, current_password: str, new_password: str
    ) -> Result[StatusResponse]:
        password_validation = validate_password(new_password)
        if password_validation.is_err():
            return Return.err(password_validation.error)

        async with self.uow:
            user = await self.uow.users.get_by_id(user_id)
            if user is None:
                return Return.err(Error("USER_NOT_FOUND", "User not found"))

            if not password_matches(current_password, user.password_hash.encode()):
                return Return.err(
                    Error("INVALID_PASSWORD", "Current password is incorrect")
                )

            user.password_hash = bcrypt.hashpw(
                new_password.encode(), bcrypt.gensalt(12)
            ).decode()
            user.updated_at = utcnow()
            await self.uow.users.update(user)

            await self.uow.commit()

            return Return.ok(
                StatusResponse(status="success", message="Password changed successfully")
            )
