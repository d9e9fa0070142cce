from uuid import UUID

from fastapi import Depends, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel.ext.asyncio.session import AsyncSession

from config import ApplicationConfig
from libs.result import Error
from src.adapter.services.email_notification_service import (
    ConsoleNotificationService,
    SmtpNotificationService,
)
from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from src.api.error import ClientError
from src.api.utils.jwt import TokenIssuer
from src.app.services.notification_service import (
    INotificationService,
    NotificationDispatcher,
)
from src.app.services.unit_of_work import UnitOfWork

engine = create_async_engine(ApplicationConfig.DB_URI, echo=False, future=True)

AsyncSessionLocal = sessionmaker(
    engine, class_=AsyncSession, expire_on_commit=False, autoflush=False
)

security = HTTPBearer(auto_error=False)


def build_notification_service(config) -> INotificationService:
    if config.MAIL_BACKEND == "smtp":
        return SmtpNotificationService.from_config(config)
    return ConsoleNotificationService()


token_issuer = TokenIssuer.from_config(ApplicationConfig)
notification_dispatcher = NotificationDispatcher(
    build_notification_service(ApplicationConfig)
)


async def get_session() -> AsyncSession:
    async with AsyncSessionLocal() as session:
        yield session


async def get_unit_of_work():
    async with AsyncSessionLocal() as session:
        yield SqlAlchemyUnitOfWork(session)


def get_token_issuer() -> TokenIssuer:
    return token_issuer


def get_notification_dispatcher() -> NotificationDispatcher:
    return notification_dispatcher


async def get_current_user(
    credentials: HTTPAuthorizationCredentials = Depends(security),
    issuer: TokenIssuer = Depends(get_token_issuer),
) -> dict:
    """
    Dependency to extract and verify the bearer token from Authorization header.

    Args:
        credentials: Bearer token from Authorization header (None when absent)
        issuer: Token issuer holding the signing secret

    Returns:
        Decoded JWT payload containing id, email, username

    Raises:
        ClientError: 401 if the token is missing or expired, 403 if invalid
    """
    if credentials is None:
        raise ClientError(
            Error("AUTH_REQUIRED", "Access token required"),
            status_code=status.HTTP_401_UNAUTHORIZED,
        )

    result = issuer.verify(credentials.credentials)
    if result.is_err():
        if result.error.code == "TOKEN_EXPIRED":
            raise ClientError(result.error, status_code=status.HTTP_401_UNAUTHORIZED)
        raise ClientError(result.error, status_code=status.HTTP_403_FORBIDDEN)

    payload = result.value
    try:
        UUID(str(payload["id"]))
    except ValueError:
        raise ClientError(
            Error("INVALID_TOKEN", "Invalid token. Please log in again."),
            status_code=status.HTTP_403_FORBIDDEN,
        )

    return payload


async def require_verified_email(
    current_user: dict = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
) -> dict:
    """Dependency that additionally requires a verified email address"""
    async with uow:
        user = await uow.users.get_by_id(UUID(current_user["id"]))

    if user is None:
        raise ClientError(
            Error("USER_NOT_FOUND", "User not found"),
            status_code=status.HTTP_404_NOT_FOUND,
        )
    if not user.is_email_verified:
        raise ClientError(
            Error(
                "EMAIL_NOT_VERIFIED",
                "Please verify your email address to access this feature",
            ),
            status_code=status.HTTP_403_FORBIDDEN,
        )

    return current_user
