"""
Reset Password Use Case

Sets a new password using the token from the reset email.
"""

import hashlib

import bcrypt

from libs.result import Error, Result, Return
from src.app.services.unit_of_work import UnitOfWork
from src.domain.base import utcnow
from .dtos import StatusResponse
from .validation import validate_password


class ResetPasswordUseCase:
    """
    Use case for confirming a password reset.

    Business Rules:
    - Token is validated by hashing and comparing with stored hash
    - Token must not be expired
    - New password must be at least 6 characters
    - Token is cleared after a successful reset (single use)
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, token: str, new_password: str) -> Result[StatusResponse]:
        """
        Execute reset password use case.

        Errors:
            - INVALID_PASSWORD: Password does not meet requirements
            - INVALID_TOKEN: Token unknown or expired
        """
        password_validation = validate_password(new_password)
        if password_validation.is_err():
            return Return.err(password_validation.error)

        async with self.uow:
            token_hash = hashlib.sha256(token.encode()).hexdigest()
            user = await self.uow.users.get_by_reset_token_hash(token_hash)

            if (
                user is None
                or user.reset_password_expires is None
                or user.reset_password_expires <= utcnow()
            ):
                return Return.err(Error("INVALID_TOKEN", "Invalid or expired reset token"))

            password_hash = bcrypt.hashpw(new_password.encode(), bcrypt.gensalt(12))

            user.password_hash = password_hash.decode()
            user.reset_password_token = None
            user.reset_password_expires = None
            user.updated_at = utcnow()
            await self.uow.users.update(user)

            await self.uow.commit()

            return Return.ok(
                StatusResponse(status="success", message="Password reset successfully")
            )
