from uuid import uuid4

import pytest

from src.app.repositories.rating_repository import MovieRatingStats
from src.app.use_cases.ratings import (
    DeleteRatingUseCase,
    GetMovieRatingsUseCase,
    GetTopRatedMoviesUseCase,
    GetUserRatingUseCase,
    UpsertRatingUseCase,
)
from src.app.use_cases.ratings.validation import round_half_up, validate_rating
from src.domain.entities import Rating


@pytest.mark.parametrize("value,expected", [(1, 1), (5, 5), ("4", 4), (3.0, 3), (" 2 ", 2)])
def test_validate_rating_accepts_integral_values(value, expected):
    assert validate_rating(value).value == expected


@pytest.mark.parametrize("value", [0, 6, 4.5, "4.5", "abc", True, None, [], "  "])
def test_validate_rating_rejects(value):
    result = validate_rating(value)
    assert result.is_err()
    assert result.error.code == "INVALID_RATING"


def test_round_half_up():
    assert round_half_up(4.25) == 4.3
    assert round_half_up(4.0) == 4.0
    assert round_half_up(11 / 3) == 3.7


@pytest.mark.asyncio
async def test_upsert_rating_for_someone_else_is_forbidden(mock_uow):
    result = await UpsertRatingUseCase(mock_uow).execute(uuid4(), uuid4(), "27205", 4)

    assert result.error.code == "FORBIDDEN"
    mock_uow.ratings.upsert.assert_not_awaited()


@pytest.mark.asyncio
async def test_upsert_rating_stores_single_statement(mock_uow):
    actor = uuid4()
    mock_uow.ratings.upsert.return_value = Rating(
        id=uuid4(), user_id=actor, movie_id="27205", rating=3, movie_title="Inception"
    )

    result = await UpsertRatingUseCase(mock_uow).execute(actor, actor, "27205", "3", "Inception")

    assert result.is_ok()
    mock_uow.ratings.upsert.assert_awaited_once_with(actor, "27205", 3, "Inception")
    assert result.value.rating == 3
    mock_uow.commit.assert_awaited_once()


@pytest.mark.asyncio
async def test_movie_ratings_average_rounds_half_up(mock_uow):
    ratings = [
        (Rating(id=uuid4(), user_id=uuid4(), movie_id="603", rating=value), None)
        for value in (5, 4, 4, 4)
    ]
    mock_uow.ratings.list_by_movie.return_value = ratings

    result = await GetMovieRatingsUseCase(mock_uow).execute("603")

    assert result.value.average_rating == 4.3
    assert result.value.total_ratings == 4


@pytest.mark.asyncio
async def test_movie_ratings_empty(mock_uow):
    mock_uow.ratings.list_by_movie.return_value = []

    result = await GetMovieRatingsUseCase(mock_uow).execute("603")

    assert result.value.average_rating == 0
    assert result.value.total_ratings == 0
    assert result.value.ratings == []


@pytest.mark.asyncio
async def test_top_rated_passes_threshold_and_limit(mock_uow):
    mock_uow.ratings.get_top_rated.return_value = [
        MovieRatingStats("603", 4.666, 6, "The Matrix"),
        MovieRatingStats("27205", 4.5, 8, "Inception"),
    ]

    result = await GetTopRatedMoviesUseCase(mock_uow, min_ratings=5).execute(limit=2)

    mock_uow.ratings.get_top_rated.assert_awaited_once_with(5, 2)
    assert [m.movie_id for m in result.value] == ["603", "27205"]
    assert result.value[0].average_rating == 4.7


@pytest.mark.asyncio
async def test_delete_missing_rating(mock_uow):
    actor = uuid4()
    mock_uow.ratings.delete.return_value = False

    result = await DeleteRatingUseCase(mock_uow).execute(actor, actor, "603")

    assert result.error.code == "RATING_NOT_FOUND"


@pytest.mark.asyncio
async def test_upsert_rating_after_account_deletion_is_rejected(mock_uow):
    """A token that outlived its account must not leave a rating behind"""
    actor = uuid4()
    mock_uow.users.get_by_id.return_value = None

    result = await UpsertRatingUseCase(mock_uow).execute(actor, actor, "27205", 4)

    assert result.error.code == "USER_NOT_FOUND"
    mock_uow.ratings.upsert.assert_not_awaited()
    mock_uow.commit.assert_not_awaited()


@pytest.mark.asyncio
async def test_padded_movie_id_is_normalized_on_every_path(mock_uow):
    actor = uuid4()
    mock_uow.ratings.upsert.return_value = Rating(
        id=uuid4(), user_id=actor, movie_id="27205", rating=4
    )
    mock_uow.ratings.list_by_movie.return_value = []
    mock_uow.ratings.delete.return_value = True
    mock_uow.ratings.get_by_user_and_movie.return_value = None

    await UpsertRatingUseCase(mock_uow).execute(actor, actor, " 27205 ", 4)
    await GetMovieRatingsUseCase(mock_uow).execute(" 27205 ")
    await GetUserRatingUseCase(mock_uow).execute(actor, " 27205\t")
    await DeleteRatingUseCase(mock_uow).execute(actor, actor, "27205 ")

    mock_uow.ratings.upsert.assert_awaited_once_with(actor, "27205", 4, None)
    mock_uow.ratings.list_by_movie.assert_awaited_once_with("27205")
    mock_uow.ratings.get_by_user_and_movie.assert_awaited_once_with(actor, "27205")
    mock_uow.ratings.delete.assert_awaited_once_with(actor, "27205")


@pytest.mark.asyncio
async def test_blank_movie_id_is_invalid(mock_uow):
    result = await GetMovieRatingsUseCase(mock_uow).execute("   ")

    assert result.error.code == "INVALID_MOVIE_ID"
    mock_uow.ratings.list_by_movie.assert_not_awaited()


@pytest.mark.asyncio
async def test_get_user_rating_returns_own_rating(mock_uow):
    user = uuid4()
    mock_uow.ratings.get_by_user_and_movie.return_value = Rating(
        id=uuid4(), user_id=user, movie_id="603", rating=5, movie_title="The Matrix"
    )

    result = await GetUserRatingUseCase(mock_uow).execute(user, "603")

    assert result.value.rating == 5
    assert result.value.movie_title == "The Matrix"


@pytest.mark.asyncio
async def test_get_user_rating_is_none_when_not_rated(mock_uow):
    mock_uow.ratings.get_by_user_and_movie.return_value = None

    result = await GetUserRatingUseCase(mock_uow).execute(uuid4(), "603")

    assert result.is_ok()
    assert result.value is None
