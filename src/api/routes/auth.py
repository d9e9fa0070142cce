from datetime import timedelta
from typing import List
from uuid import UUID

from fastapi import APIRouter, Depends, status
from pydantic import EmailStr, Field, field_validator

from config import ApplicationConfig
from src.api.error import ClientError, ServerError
from src.api.schemas import ApiResponse, ok
from src.api.utils.jwt import TokenIssuer
from src.api.utils.rate_limit import LOGIN, PASSWORD_RESET, REGISTER, rate_limit
from src.app.services.notification_service import NotificationDispatcher
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.auth import (
    AuthResponse,
    ChangePasswordUseCase,
    ForgotPasswordUseCase,
    LoginUseCase,
    RegisterCommand,
    RegisterUseCase,
    ResetPasswordUseCase,
    StatusResponse,
    UserInfo,
    VerifyEmailUseCase,
)
from src.app.use_cases.dto_base import CamelModel
from src.app.use_cases.users import (
    DeleteAccountUseCase,
    GetProfileUseCase,
    UpdateProfileCommand,
    UpdateProfileUseCase,
)
from src.depends import (
    get_current_user,
    get_notification_dispatcher,
    get_token_issuer,
    get_unit_of_work,
    require_verified_email,
)

router = APIRouter(prefix="/auth", tags=["Authentication"])


class RegisterRequest(CamelModel):
    """
    Register HTTP request payload

    Validates incoming HTTP request before converting to RegisterCommand.
    Password length is a business rule and checked by the use case.
    """

    username: str = Field(..., description="Unique username (3-50 chars after trimming)")
    email: EmailStr = Field(..., description="User email address")
    password: str = Field(..., description="User password (min 6 chars)")
    first_name: str = Field(..., min_length=1, max_length=100)
    last_name: str = Field(..., min_length=1, max_length=100)
    favorite_genres: List[str] = Field(default_factory=list)

    @field_validator("username")
    @classmethod
    def username_length(cls, value: str) -> str:
        if not 3 <= len(value.strip()) <= 50:
            raise ValueError("must be 3-50 characters long")
        return value


class LoginRequest(CamelModel):
    email: EmailStr = Field(..., description="User email address")
    password: str = Field(..., description="User password")


class ChangePasswordRequest(CamelModel):
    current_password: str
    new_password: str


class DeleteAccountRequest(CamelModel):
    password: str


class ForgotPasswordRequest(CamelModel):
    email: EmailStr


class ResetPasswordRequest(CamelModel):
    password: str


def _raise_profile_error(error):
    if error.code == "USER_NOT_FOUND":
        raise ClientError(error, status_code=status.HTTP_404_NOT_FOUND)
    raise ServerError(error)


@router.post(
    "/register",
    status_code=status.HTTP_201_CREATED,
    response_model=ApiResponse[AuthResponse],
)
async def register(
    request: RegisterRequest,
    _rl=Depends(rate_limit(REGISTER)),
    uow: UnitOfWork = Depends(get_unit_of_work),
    token_issuer: TokenIssuer = Depends(get_token_issuer),
    dispatcher: NotificationDispatcher = Depends(get_notification_dispatcher),
):
    """
    Register a new account.

    Raises:
        - 400 Bad Request: Invalid input or password too short
        - 409 Conflict: Email or username already taken
    """
    command = RegisterCommand(**request.model_dump())

    use_case = RegisterUseCase(uow, token_issuer, dispatcher)
    result = await use_case.execute(command)

    if result.is_err():
        error = result.error
        if error.code in ("EMAIL_ALREADY_EXISTS", "USERNAME_TAKEN"):
            raise ClientError(error, status_code=status.HTTP_409_CONFLICT)
        if error.code in ("INVALID_PASSWORD", "INVALID_USERNAME"):
            raise ClientError(error, status_code=status.HTTP_400_BAD_REQUEST)
        raise ServerError(error)

    return ok(
        result.value,
        "User registered successfully. Please check your email to verify your account.",
    )


@router.post("/login", response_model=ApiResponse[AuthResponse])
async def login(
    request: LoginRequest,
    _rl=Depends(rate_limit(LOGIN)),
    uow: UnitOfWork = Depends(get_unit_of_work),
    token_issuer: TokenIssuer = Depends(get_token_issuer),
):
    """
    Authenticate with email and password.

    Raises:
        - 401 Unauthorized: Unknown email or wrong password
    """
    use_case = LoginUseCase(uow, token_issuer)
    result = await use_case.execute(request.email, request.password)

    if result.is_err():
        error = result.error
        if error.code == "INVALID_CREDENTIALS":
            raise ClientError(error, status_code=status.HTTP_401_UNAUTHORIZED)
        raise ServerError(error)

    return ok(result.value, "Login successful")


@router.get("/me", response_model=ApiResponse[UserInfo])
async def get_me(
    current_user: dict = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await GetProfileUseCase(uow).execute(UUID(current_user["id"]))
    if result.is_err():
        _raise_profile_error(result.error)
    return ok(result.value)


@router.get("/profile", response_model=ApiResponse[UserInfo])
async def get_profile(
    current_user: dict = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await GetProfileUseCase(uow).execute(UUID(current_user["id"]))
    if result.is_err():
        _raise_profile_error(result.error)
    return ok(result.value)


@router.put("/profile", response_model=ApiResponse[UserInfo])
async def update_profile(
    request: UpdateProfileCommand,
    current_user: dict = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """Update first/last name and favourite genres of the current user"""
    result = await UpdateProfileUseCase(uow).execute(UUID(current_user["id"]), request)
    if result.is_err():
        _raise_profile_error(result.error)
    return ok(result.value, "Profile updated successfully")


@router.post("/change-password", response_model=ApiResponse[StatusResponse])
async def change_password(
    request: ChangePasswordRequest,
    current_user: dict = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Change the current user's password.

    Raises:
        - 400 Bad Request: Current password wrong or new password too short
        - 404 Not Found: Account no longer exists
    """
    use_case = ChangePasswordUseCase(uow)
    result = await use_case.execute(
        UUID(current_user["id"]), request.current_password, request.new_password
    )

    if result.is_err():
        error = result.error
        if error.code == "INVALID_PASSWORD":
            raise ClientError(error, status_code=status.HTTP_400_BAD_REQUEST)
        _raise_profile_error(error)

    return ok(result.value, result.value.message)


@router.delete("/me", response_model=ApiResponse[StatusResponse])
async def delete_account(
    request: DeleteAccountRequest,
    current_user: dict = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Delete the current account with everything it contributed.

    Raises:
        - 400 Bad Request: Password confirmation failed
        - 404 Not Found: Account no longer exists
    """
    result = await DeleteAccountUseCase(uow).execute(
        UUID(current_user["id"]), request.password
    )

    if result.is_err():
        error = result.error
        if error.code == "INVALID_PASSWORD":
            raise ClientError(error, status_code=status.HTTP_400_BAD_REQUEST)
        _raise_profile_error(error)

    return ok(result.value, result.value.message)


@router.get("/verify-email/{token}", response_model=ApiResponse[StatusResponse])
async def verify_email(
    token: str,
    uow: UnitOfWork = Depends(get_unit_of_work),
    dispatcher: NotificationDispatcher = Depends(get_notification_dispatcher),
):
    """
    Verify an email address with the token from the welcome email.

    Raises:
        - 400 Bad Request: Unknown or already used token
    """
    result = await VerifyEmailUseCase(uow, dispatcher).execute(token)

    if result.is_err():
        error = result.error
        if error.code == "INVALID_TOKEN":
            raise ClientError(error, status_code=status.HTTP_400_BAD_REQUEST)
        raise ServerError(error)

    return ok(result.value, result.value.message)


@router.post("/forgot-password", response_model=ApiResponse[StatusResponse])
async def forgot_password(
    request: ForgotPasswordRequest,
    _rl=Depends(rate_limit(PASSWORD_RESET)),
    uow: UnitOfWork = Depends(get_unit_of_work),
    dispatcher: NotificationDispatcher = Depends(get_notification_dispatcher),
):
    """
    Request a password reset email.

    Responds identically whether or not the email is registered.
    """
    use_case = ForgotPasswordUseCase(
        uow,
        dispatcher,
        token_ttl=timedelta(minutes=ApplicationConfig.RESET_TOKEN_TTL_MINUTES),
    )
    result = await use_case.execute(request.email)

    if result.is_err():
        raise ServerError(result.error)

    return ok(result.value, result.value.message)


@router.post("/reset-password/{token}", response_model=ApiResponse[StatusResponse])
async def reset_password(
    token: str,
    request: ResetPasswordRequest,
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Set a new password using the emailed reset token.

    Raises:
        - 400 Bad Request: Invalid/expired token or password too short
    """
    result = await ResetPasswordUseCase(uow).execute(token, request.password)

    if result.is_err():
        error = result.error
        if error.code in ("INVALID_TOKEN", "INVALID_PASSWORD"):
            raise ClientError(error, status_code=status.HTTP_400_BAD_REQUEST)
        raise ServerError(error)

    return ok(result.value, result.value.message)


@router.get("/verified-profile", response_model=ApiResponse[UserInfo])
async def get_verified_profile(
    current_user: dict = Depends(require_verified_email),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """Current user, reachable only with a verified email address"""
    result = await GetProfileUseCase(uow).execute(UUID(current_user["id"]))
    if result.is_err():
        _raise_profile_error(result.error)
    return ok(result.value)
