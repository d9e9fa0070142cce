"""
Authentication Use Case DTOs (Data Transfer Objects)

All Command and Response classes for the auth domain.
Provides type safety and clear contracts between layers.
"""

from datetime import datetime
from typing import List

from src.app.use_cases.dto_base import CamelModel
from src.domain.entities import User


# ============================================================================
# Command DTOs
# ============================================================================


class RegisterCommand(CamelModel):
    """
    Register command - represents validated registration intent

    Created by API layer after request validation passes.
    """

    username: str
    email: str
    password: str
    first_name: str
    last_name: str
    favorite_genres: List[str] = []


# ============================================================================
# Response DTOs
# ============================================================================


class UserInfo(CamelModel):
    """Private user profile (owner's view)"""

    id: str
    username: str
    email: str
    first_name: str
    last_name: str
    favorite_genres: List[str]
    is_email_verified: bool
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_entity(cls, user: User) -> "UserInfo":
        return cls(
            id=str(user.id),
            username=user.username,
            email=user.email,
            first_name=user.first_name,
            last_name=user.last_name,
            favorite_genres=list(user.favorite_genres or []),
            is_email_verified=user.is_email_verified,
            created_at=user.created_at,
            updated_at=user.updated_at,
        )


class AuthResponse(CamelModel):
    """Response for register and login use cases"""

    user: UserInfo
    token: str


class StatusResponse(CamelModel):
    """Response for flows that only report an outcome"""

    status: str
    message: str
