import logging
import secrets

import bcrypt
from libs.result import Error, Result, Return

from src.api.utils.jwt import TokenIssuer
from src.app.repositories.errors import UniqueViolationError
from src.app.services.notification_service import NotificationDispatcher
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import User
from .dtos import AuthResponse, RegisterCommand, UserInfo
from .validation import normalize_genres, validate_password, validate_username

logger = logging.getLogger(__name__)


class RegisterUseCase:
    """
    Register Use Case

    Command/Response Pattern:
    - Input: RegisterCommand (validated business intent)
    - Output: Result[AuthResponse] (user profile + bearer token)

    Business Logic:
    1. Normalize email/username (trim, lower-case); username is 3-50 chars after trimming
    2. Reject duplicates: email first, then username
    3. Hash password with bcrypt cost factor 12
    4. Create User with is_email_verified=False and a verification token
    5. Commit, then dispatch the welcome email without waiting for it
    6. Issue a bearer token
    """

    def __init__(
        self,
        uow: UnitOfWork,
        token_issuer: TokenIssuer,
        dispatcher: NotificationDispatcher,
    ):
        self.uow = uow
        self.token_issuer = token_issuer
        self.dispatcher = dispatcher

    async def execute(self, command: RegisterCommand) -> Result[AuthResponse]:
        """
        Execute register use case

        Args:
            command: RegisterCommand with validated account fields

        Returns:
            Result[AuthResponse], or Error(EMAIL_ALREADY_EXISTS / USERNAME_TAKEN)
        """
        email = command.email.strip().lower()
        username_validation = validate_username(command.username)
        if username_validation.is_err():
            return Return.err(username_validation.error)
        username = username_validation.value

        password_validation = validate_password(command.password)
        if password_validation.is_err():
            return Return.err(password_validation.error)

        async with self.uow:
            if await self.uow.users.get_by_email(email):
                return Return.err(Error("EMAIL_ALREADY_EXISTS", "Email already registered"))

            if await self.uow.users.get_by_username(username):
                return Return.err(Error("USERNAME_TAKEN", "Username already taken"))

            password_hash = bcrypt.hashpw(
                command.password.encode("utf-8"), bcrypt.gensalt(12)
            )
            verification_token = secrets.token_urlsafe(32)

            user = User(
                username=username,
                email=email,
                password_hash=password_hash.decode("utf-8"),
                first_name=command.first_name.strip(),
                last_name=command.last_name.strip(),
                favorite_genres=normalize_genres(command.favorite_genres),
                is_email_verified=False,
                email_verification_token=verification_token,
            )

            try:
                user = await self.uow.users.create(user)
            except UniqueViolationError:
                # Lost a race with a concurrent registration
                return Return.err(
                    Error("EMAIL_ALREADY_EXISTS", "Email or username already registered")
                )

            await self.uow.commit()

            logger.info(f"User registered: {user.id}")
            self.dispatcher.notify_welcome(user.email, user.first_name, verification_token)

            return Return.ok(
                AuthResponse(
                    user=UserInfo.from_entity(user),
                    token=self.token_issuer.issue(user),
                )
            )
