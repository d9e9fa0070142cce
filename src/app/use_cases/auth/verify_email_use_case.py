"""
Verify Email Use Case

Consumes the verification token sent with the welcome email.
"""

from libs.result import Error, Result, Return
from src.app.services.notification_service import NotificationDispatcher
from src.app.services.unit_of_work import UnitOfWork
from src.domain.base import utcnow
from .dtos import StatusResponse


class VerifyEmailUseCase:
    """
    Use case for verifying a user's email address.

    Business Rules:
    - Token must match a user's stored verification token
    - Token is single-use: cleared once consumed
    - Success email is best-effort and never fails the request
    """

    def __init__(self, uow: UnitOfWork, dispatcher: NotificationDispatcher):
        self.uow = uow
        self.dispatcher = dispatcher

    async def execute(self, token: str) -> Result[StatusResponse]:
        async with self.uow:
            user = await self.uow.users.get_by_verification_token(token)
            if user is None:
                return Return.err(
                    Error("INVALID_TOKEN", "Invalid or expired verification token")
                )

            user.is_email_verified = True
            user.email_verification_token = None
            user.updated_at = utcnow()
            await self.uow.users.update(user)

            await self.uow.commit()

            self.dispatcher.notify_verification_success(user.email, user.first_name)

            return Return.ok(
                StatusResponse(status="verified", message="Email verified successfully")
            )
