from typing import Any, List, Optional
from uuid import UUID

from fastapi import APIRouter, Depends, Query, status
from pydantic import Field

from config import ApplicationConfig
from src.api.error import ClientError, ServerError
from src.api.schemas import ApiResponse, ok
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.dto_base import CamelModel
from src.app.use_cases.pagination import DEFAULT_PAGE_SIZE, MAX_PAGE_SIZE
from src.app.use_cases.ratings import (
    DeleteRatingUseCase,
    GetMovieRatingsUseCase,
    GetTopRatedMoviesUseCase,
    GetUserRatingUseCase,
    ListUserRatingsUseCase,
    MovieRatings,
    RatingInfo,
    RatingPage,
    TopRatedMovie,
    UpsertRatingUseCase,
)
from src.depends import get_current_user, get_unit_of_work

router = APIRouter(tags=["Ratings"])


class RatingRequest(CamelModel):
    """
    Rating HTTP request payload

    rating is left untyped so "4" and 4.0 reach the use case, which owns
    the integer-in-range rule.
    """

    movie_id: str = Field(..., min_length=1, max_length=64)
    rating: Any = Field(...)
    movie_title: Optional[str] = Field(None, max_length=255)


def _raise_rating_error(error):
    if error.code in ("INVALID_RATING", "INVALID_MOVIE_ID"):
        raise ClientError(error, status_code=status.HTTP_400_BAD_REQUEST)
    if error.code == "FORBIDDEN":
        raise ClientError(error, status_code=status.HTTP_403_FORBIDDEN)
    if error.code in ("RATING_NOT_FOUND", "USER_NOT_FOUND"):
        raise ClientError(error, status_code=status.HTTP_404_NOT_FOUND)
    raise ServerError(error)


@router.post("/user/{user_id}/ratings", response_model=ApiResponse[RatingInfo])
async def upsert_rating(
    user_id: UUID,
    request: RatingRequest,
    current_user: dict = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Rate a movie on the caller's behalf; a second rating overwrites the first.

    Raises:
        - 400 Bad Request: Rating not an integer in [1, 5]
        - 403 Forbidden: Path user is not the caller
    """
    use_case = UpsertRatingUseCase(uow)
    result = await use_case.execute(
        user_id,
        UUID(current_user["id"]),
        request.movie_id,
        request.rating,
        request.movie_title,
    )

    if result.is_err():
        _raise_rating_error(result.error)

    return ok(result.value, "Rating saved successfully")


@router.get("/user/{user_id}/ratings", response_model=ApiResponse[RatingPage])
async def list_user_ratings(
    user_id: UUID,
    page: int = Query(1, ge=1),
    limit: int = Query(DEFAULT_PAGE_SIZE, ge=1, le=MAX_PAGE_SIZE),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await ListUserRatingsUseCase(uow).execute(user_id, page, limit)
    if result.is_err():
        raise ServerError(result.error)
    return ok(result.value)


@router.delete("/user/{user_id}/ratings/{movie_id}", response_model=ApiResponse[None])
async def delete_rating(
    user_id: UUID,
    movie_id: str,
    current_user: dict = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Remove the caller's rating of a movie.

    Raises:
        - 403 Forbidden: Path user is not the caller
        - 404 Not Found: No such rating
    """
    use_case = DeleteRatingUseCase(uow)
    result = await use_case.execute(user_id, UUID(current_user["id"]), movie_id)

    if result.is_err():
        _raise_rating_error(result.error)

    return ok(message="Rating deleted successfully")


@router.get("/movie/{movie_id}/ratings", response_model=ApiResponse[MovieRatings])
async def get_movie_ratings(movie_id: str, uow: UnitOfWork = Depends(get_unit_of_work)):
    """All ratings of a movie with the rounded average"""
    result = await GetMovieRatingsUseCase(uow).execute(movie_id)
    if result.is_err():
        _raise_rating_error(result.error)
    return ok(result.value)


@router.get("/ratings/top", response_model=ApiResponse[List[TopRatedMovie]])
async def get_top_rated_movies(
    limit: int = Query(10, ge=1, le=MAX_PAGE_SIZE),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """Movies with enough ratings, best average first"""
    use_case = GetTopRatedMoviesUseCase(uow, min_ratings=ApplicationConfig.TOP_RATED_MIN_RATINGS)
    result = await use_case.execute(limit)
    if result.is_err():
        raise ServerError(result.error)
    return ok(result.value)


@router.get("/ratings/{movie_id}", response_model=ApiResponse[Optional[RatingInfo]])
async def get_my_rating(
    movie_id: str,
    current_user: dict = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """The caller's rating of a movie; data is null when they have not rated it"""
    result = await GetUserRatingUseCase(uow).execute(UUID(current_user["id"]), movie_id)
    if result.is_err():
        _raise_rating_error(result.error)
    return ok(result.value)
