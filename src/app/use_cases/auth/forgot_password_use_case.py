"""
Forgot Password Use Case

Generates a password reset token and emails it.
"""

import hashlib
import secrets
from datetime import timedelta

from libs.result import Result, Return
from src.app.services.notification_service import NotificationDispatcher
from src.app.services.unit_of_work import UnitOfWork
from src.domain.base import utcnow
from .dtos import StatusResponse

RESET_REQUESTED_MESSAGE = "If the email exists, a password reset link has been sent"


class ForgotPasswordUseCase:
    """
    Use case for requesting a password reset.

    Business Rules:
    - Generate cryptographically secure token, store only its SHA-256 hash
    - A new request replaces any previous token (one live token per user)
    - Token expires after the configured TTL
    - No email enumeration (same response for valid/invalid emails)
    - Email delivery is best-effort: failure never fails the request
    """

    def __init__(
        self,
        uow: UnitOfWork,
        dispatcher: NotificationDispatcher,
        token_ttl: timedelta = timedelta(hours=1),
    ):
        self.uow = uow
        self.dispatcher = dispatcher
        self.token_ttl = token_ttl

    async def execute(self, email: str) -> Result[StatusResponse]:
        """
        Execute forgot password use case.

        Args:
            email: User's email address

        Returns:
            Result with the same StatusResponse whether or not the user exists
        """
        response = StatusResponse(status="sent", message=RESET_REQUESTED_MESSAGE)

        async with self.uow:
            user = await self.uow.users.get_by_email(email)
            if user is None:
                return Return.ok(response)

            reset_token = secrets.token_urlsafe(32)

            user.reset_password_token = hashlib.sha256(reset_token.encode()).hexdigest()
            user.reset_password_expires = utcnow() + self.token_ttl
            await self.uow.users.update(user)

            await self.uow.commit()

            # The plain token only ever leaves through the email
            self.dispatcher.notify_password_reset(user.email, user.first_name, reset_token)

            return Return.ok(response)
