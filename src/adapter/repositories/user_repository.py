from typing import Optional
from uuid import UUID

from sqlalchemy import delete, func
from sqlalchemy.exc import IntegrityError
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from src.app.repositories.errors import UniqueViolationError
from src.app.repositories.user_repository import IUserRepository
from src.domain.entities import User


class UserRepository(IUserRepository):
    """User repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_email(self, email: str) -> Optional[User]:
        """Get user by email address (case-insensitive)"""
        stmt = select(User).where(func.lower(User.email) == email.strip().lower())
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def get_by_username(self, username: str) -> Optional[User]:
        """Get user by username (case-insensitive)"""
        stmt = select(User).where(func.lower(User.username) == username.strip().lower())
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def get_by_id(self, user_id: UUID) -> Optional[User]:
        """Get user by ID"""
        stmt = select(User).where(User.id == user_id)
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def create(self, user: User) -> User:
        """Create a new user"""
        self.session.add(user)
        try:
            await self.session.flush()
        except IntegrityError as exc:
            raise UniqueViolationError(str(exc.orig)) from exc
        await self.session.refresh(user)
        return user

    async def update(self, user: User) -> User:
        """Update existing user"""
        self.session.add(user)
        await self.session.flush()
        await self.session.refresh(user)
        return user

    async def get_by_verification_token(self, token: str) -> Optional[User]:
        """Get user by email verification token"""
        stmt = select(User).where(User.email_verification_token == token)
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def get_by_reset_token_hash(self, token_hash: str) -> Optional[User]:
        """Get user by password reset token hash"""
        stmt = select(User).where(User.reset_password_token == token_hash)
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def delete(self, user_id: UUID) -> bool:
        """Delete a user row"""
        stmt = delete(User).where(User.id == user_id)
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount > 0
