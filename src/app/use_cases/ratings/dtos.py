"""
Rating Use Case DTOs
"""

from datetime import datetime
from typing import List, Optional

from src.app.use_cases.dto_base import CamelModel
from src.app.use_cases.pagination import Pagination
from src.domain.entities import Rating, User


class RatingInfo(CamelModel):
    """A single stored rating"""

    id: str
    user_id: str
    movie_id: str
    rating: int
    movie_title: Optional[str] = None
    username: Optional[str] = None
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_entity(cls, rating: Rating, user: Optional[User] = None) -> "RatingInfo":
        return cls(
            id=str(rating.id),
            user_id=str(rating.user_id),
            movie_id=rating.movie_id,
            rating=rating.rating,
            movie_title=rating.movie_title,
            username=user.username if user is not None else None,
            created_at=rating.created_at,
            updated_at=rating.updated_at,
        )


class RatingPage(CamelModel):
    ratings: List[RatingInfo]
    pagination: Pagination


class MovieRatings(CamelModel):
    """All ratings of one movie plus the aggregate"""

    movie_id: str
    ratings: List[RatingInfo]
    average_rating: float
    total_ratings: int


class TopRatedMovie(CamelModel):
    movie_id: str
    movie_title: Optional[str] = None
    average_rating: float
    total_ratings: int
