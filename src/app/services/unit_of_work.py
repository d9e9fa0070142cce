from abc import ABC, abstractmethod

from src.app.repositories.comment_repository import ICommentRepository
from src.app.repositories.rating_repository import IRatingRepository
from src.app.repositories.user_repository import IUserRepository


class UnitOfWork(ABC):
    """
    Transaction boundary for one request.

    Use cases open it with ``async with`` and call ``commit()`` once their
    writes are staged. Leaving the block without committing discards them,
    so an early ``Return.err`` never persists half of an account deletion.
    """

    users: IUserRepository
    comments: ICommentRepository
    ratings: IRatingRepository

    @abstractmethod
    async def __aenter__(self) -> "UnitOfWork":
        ...

    @abstractmethod
    async def __aexit__(self, exc_type, exc, tb) -> None:
        ...

    @abstractmethod
    async def commit(self) -> None:
        ...

    @abstractmethod
    async def rollback(self) -> None:
        ...
