"""
Notification Service

Email notifications for registration, verification and password reset.
Sending is best-effort: the dispatcher schedules it in the background and
a failed send is logged, never raised to the request that triggered it.
"""

import asyncio
import logging
from abc import ABC, abstractmethod
from typing import Awaitable, Set

logger = logging.getLogger(__name__)


class INotificationService(ABC):
    """Outbound email port - application layer"""

    @abstractmethod
    async def send_welcome_email(
        self, email: str, first_name: str, verification_token: str
    ) -> None:
        """Send the welcome email containing the verification link"""
        pass

    @abstractmethod
    async def send_verification_success_email(self, email: str, first_name: str) -> None:
        """Confirm that the email address was verified"""
        pass

    @abstractmethod
    async def send_password_reset_email(
        self, email: str, first_name: str, reset_token: str
    ) -> None:
        """Send the password reset link"""
        pass


class NotificationDispatcher:
    """Fire-and-forget wrapper around an INotificationService"""

    def __init__(self, notifier: INotificationService):
        self.notifier = notifier
        self._pending: Set[asyncio.Future] = set()

    def notify_welcome(self, email: str, first_name: str, verification_token: str) -> None:
        self._dispatch(
            self.notifier.send_welcome_email(email, first_name, verification_token),
            "welcome_email",
        )

    def notify_verification_success(self, email: str, first_name: str) -> None:
        self._dispatch(
            self.notifier.send_verification_success_email(email, first_name),
            "verification_success_email",
        )

    def notify_password_reset(self, email: str, first_name: str, reset_token: str) -> None:
        self._dispatch(
            self.notifier.send_password_reset_email(email, first_name, reset_token),
            "password_reset_email",
        )

    async def drain(self) -> None:
        """Wait for every scheduled notification to finish"""
        while self._pending:
            await asyncio.gather(*list(self._pending))

    def _dispatch(self, send: Awaitable[None], label: str) -> None:
        task = asyncio.ensure_future(self._run(send, label))
        self._pending.add(task)
        task.add_done_callback(self._pending.discard)

    async def _run(self, send: Awaitable[None], label: str) -> None:
        try:
            await send
        except Exception:
            logger.exception(f"Notification {label} failed")
