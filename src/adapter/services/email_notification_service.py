"""
Email Notification Services

SMTP delivery for production and a logging stand-in for development/tests.
"""

import asyncio
import logging
import smtplib
from email.message import EmailMessage
from email.utils import formataddr

from src.app.services.notification_service import INotificationService

logger = logging.getLogger(__name__)


def _layout(title: str, body: str, app_name: str) -> str:
    return f"""<!DOCTYPE html>
<html>
  <body style="font-family: Arial, sans-serif; line-height: 1.6; color: #333;">
    <div style="max-width: 600px; margin: 0 auto; padding: 20px;">
      <h1>{title}</h1>
      {body}
      <p style="color: #666; font-size: 12px;">This email was sent by {app_name}.</p>
    </div>
  </body>
</html>"""


class SmtpNotificationService(INotificationService):
    """
    Sends HTML emails through an SMTP relay.

    smtplib is blocking, so each send runs in a worker thread.
    """

    def __init__(
        self,
        host: str,
        port: int,
        username: str,
        password: str,
        client_url: str,
        from_name: str = "Movie Reviewer App",
        use_tls: bool = True,
    ):
        self.host = host
        self.port = port
        self.username = username
        self.password = password
        self.client_url = client_url.rstrip("/")
        self.from_name = from_name
        self.use_tls = use_tls

    @classmethod
    def from_config(cls, config) -> "SmtpNotificationService":
        return cls(
            host=config.SMTP_HOST,
            port=config.SMTP_PORT,
            username=config.EMAIL_USER,
            password=config.EMAIL_PASS,
            client_url=config.CLIENT_URL,
            from_name=config.MAIL_FROM_NAME,
            use_tls=config.SMTP_USE_TLS,
        )

    async def send_welcome_email(
        self, email: str, first_name: str, verification_token: str
    ) -> None:
        verification_url = f"{self.client_url}/verify-email/{verification_token}"
        html = _layout(
            f"Welcome to {self.from_name}!",
            f"<p>Hi {first_name}!</p>"
            "<p>Please verify your email address to get started:</p>"
            f'<p><a href="{verification_url}">Verify Email Address</a></p>'
            f"<p>Or open this link: {verification_url}</p>"
            "<p>If you didn't create this account, please ignore this email.</p>",
            self.from_name,
        )
        await self._send(
            email, f"Welcome to {self.from_name} - Please Verify Your Email", html
        )

    async def send_verification_success_email(self, email: str, first_name: str) -> None:
        html = _layout(
            "Email verified",
            f"<p>Hi {first_name}!</p>"
            "<p>Your email address has been verified. Happy reviewing!</p>",
            self.from_name,
        )
        await self._send(email, "Your email has been verified", html)

    async def send_password_reset_email(
        self, email: str, first_name: str, reset_token: str
    ) -> None:
        reset_url = f"{self.client_url}/reset-password/{reset_token}"
        html = _layout(
            "Password reset",
            f"<p>Hi {first_name}!</p>"
            "<p>We received a request to reset your password:</p>"
            f'<p><a href="{reset_url}">Reset Password</a></p>'
            "<p>If you didn't ask for this, you can ignore this email.</p>",
            self.from_name,
        )
        await self._send(email, "Password reset request", html)

    async def _send(self, to: str, subject: str, html: str) -> None:
        message = EmailMessage()
        message["From"] = formataddr((self.from_name, self.username))
        message["To"] = to
        message["Subject"] = subject
        message.set_content("Please view this email in an HTML-capable client.")
        message.add_alternative(html, subtype="html")

        await asyncio.to_thread(self._deliver, message)
        logger.info(f"Email '{subject}' sent to {to}")

    def _deliver(self, message: EmailMessage) -> None:
        with smtplib.SMTP(self.host, self.port, timeout=30) as smtp:
            if self.use_tls:
                smtp.starttls()
            if self.username:
                smtp.login(self.username, self.password)
            smtp.send_message(message)


class ConsoleNotificationService(INotificationService):
    """Logs notifications instead of sending them"""

    async def send_welcome_email(
        self, email: str, first_name: str, verification_token: str
    ) -> None:
        logger.info(f"[mail] welcome email to {email} (verification token issued)")

    async def send_verification_success_email(self, email: str, first_name: str) -> None:
        logger.info(f"[mail] verification success email to {email}")

    async def send_password_reset_email(
        self, email: str, first_name: str, reset_token: str
    ) -> None:
        logger.info(f"[mail] password reset email to {email}")
