"""
Authentication Use Cases

All authentication-related business logic.
"""

from .register_use_case import RegisterUseCase
from .login_use_case import LoginUseCase
from .verify_email_use_case import VerifyEmailUseCase
from .forgot_password_use_case import ForgotPasswordUseCase
from .reset_password_use_case import ResetPasswordUseCase
from .change_password_use_case import ChangePasswordUseCase
from .dtos import AuthResponse, RegisterCommand, StatusResponse, UserInfo

__all__ = [
    # Use Cases
    "RegisterUseCase",
    "LoginUseCase",
    "VerifyEmailUseCase",
    "ForgotPasswordUseCase",
    "ResetPasswordUseCase",
    "ChangePasswordUseCase",
    # DTOs - Commands
    "RegisterCommand",
    # DTOs - Responses
    "AuthResponse",
    "StatusResponse",
    "UserInfo",
]
