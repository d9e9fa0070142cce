from abc import ABC, abstractmethod
from typing import List, NamedTuple, Optional, Tuple
from uuid import UUID

from src.domain.entities import Rating, User

RatingWithUser = Tuple[Rating, Optional[User]]


class MovieRatingStats(NamedTuple):
    movie_id: str
    average_rating: float
    total_ratings: int
    movie_title: Optional[str]


class IRatingRepository(ABC):
    """Rating repository interface - application layer"""

    @abstractmethod
    async def upsert(
        self, user_id: UUID, movie_id: str, rating: int, movie_title: Optional[str] = None
    ) -> Rating:
        """Insert or overwrite the rating for (user_id, movie_id) in one atomic statement"""
        pass

    @abstractmethod
    async def get_by_user_and_movie(self, user_id: UUID, movie_id: str) -> Optional[Rating]:
        """Get the rating a user gave a movie"""
        pass

    @abstractmethod
    async def list_by_user(self, user_id: UUID, offset: int, limit: int) -> List[Rating]:
        """Get a page of a user's ratings, most recently updated first"""
        pass

    @abstractmethod
    async def count_by_user(self, user_id: UUID) -> int:
        """Count a user's ratings"""
        pass

    @abstractmethod
    async def list_by_movie(self, movie_id: str) -> List[RatingWithUser]:
        """Get all ratings of a movie with the rating users"""
        pass

    @abstractmethod
    async def get_top_rated(self, min_ratings: int, limit: int) -> List[MovieRatingStats]:
        """Aggregate per movie, keep movies with >= min_ratings, best average first"""
        pass

    @abstractmethod
    async def delete(self, user_id: UUID, movie_id: str) -> bool:
        """Delete a user's rating for a movie; False on miss"""
        pass

    @abstractmethod
    async def delete_all_by_user(self, user_id: UUID) -> int:
        """Delete every rating of a user"""
        pass
