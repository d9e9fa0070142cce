import logging

from sqlmodel.ext.asyncio.session import AsyncSession

from src.adapter.repositories.comment_repository import CommentRepository
from src.adapter.repositories.rating_repository import RatingRepository
from src.adapter.repositories.user_repository import UserRepository
from src.app.services.unit_of_work import UnitOfWork

logger = logging.getLogger(__name__)


class SqlAlchemyUnitOfWork(UnitOfWork):
    """Binds the user, comment and rating repositories to one AsyncSession"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def __aenter__(self) -> "SqlAlchemyUnitOfWork":
        self.users = UserRepository(self.session)
        self.comments = CommentRepository(self.session)
        self.ratings = RatingRepository(self.session)
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        if exc_type is not None:
            logger.warning(f"Rolling back transaction after {exc_type.__name__}")
        # no-op when commit() already ran
        await self.rollback()

    async def commit(self) -> None:
        await self.session.commit()

    async def rollback(self) -> None:
        await self.session.rollback()
