"""
Rating Use Cases
"""

from .delete_rating_use_case import DeleteRatingUseCase
from .dtos import MovieRatings, RatingInfo, RatingPage, TopRatedMovie
from .get_movie_ratings_use_case import GetMovieRatingsUseCase
from .get_top_rated_movies_use_case import GetTopRatedMoviesUseCase
from .get_user_rating_use_case import GetUserRatingUseCase
from .list_user_ratings_use_case import ListUserRatingsUseCase
from .upsert_rating_use_case import UpsertRatingUseCase

__all__ = [
    "UpsertRatingUseCase",
    "ListUserRatingsUseCase",
    "GetMovieRatingsUseCase",
    "GetTopRatedMoviesUseCase",
    "DeleteRatingUseCase",
    "GetUserRatingUseCase",
    "RatingInfo",
    "RatingPage",
    "MovieRatings",
    "TopRatedMovie",
]
