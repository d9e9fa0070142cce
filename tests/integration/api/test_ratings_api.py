from uuid import uuid4

import pytest
from httpx import AsyncClient

from tests.utils.helpers import auth_header, movie, register

INCEPTION = movie("inception")
MATRIX = movie("matrix")


async def _rate(client, user, token, movie_info, rating):
    return await client.post(
        f"/api/user/{user['id']}/ratings",
        headers=auth_header(token),
        json={**movie_info, "rating": rating},
    )


@pytest.mark.asyncio
async def test_second_rating_overwrites_first(client: AsyncClient):
    """
    Given I rated a movie 5
    When I rate it 3
    Then exactly one rating exists and its value is 3
    """
    user, token = await register(client, "alice")

    first = await _rate(client, user, token, INCEPTION, 5)
    second = await _rate(client, user, token, INCEPTION, 3)

    assert first.status_code == 200
    assert second.status_code == 200
    assert second.json()["data"]["rating"] == 3
    assert second.json()["data"]["id"] == first.json()["data"]["id"]

    mine = await client.get(f"/api/user/{user['id']}/ratings")
    data = mine.json()["data"]
    assert data["pagination"]["total"] == 1
    assert data["ratings"][0]["rating"] == 3
    assert data["ratings"][0]["movieTitle"] == "Inception"


@pytest.mark.parametrize("rating", [0, 6, 2.5, "abc", None])
@pytest.mark.asyncio
async def test_invalid_rating(client: AsyncClient, rating):
    user, token = await register(client, "alice")

    response = await _rate(client, user, token, INCEPTION, rating)

    assert response.status_code == 400
    assert response.json()["code"] == "INVALID_RATING"


@pytest.mark.asyncio
async def test_numeric_string_rating_is_accepted(client: AsyncClient):
    user, token = await register(client, "alice")

    response = await _rate(client, user, token, INCEPTION, "4")

    assert response.status_code == 200
    assert response.json()["data"]["rating"] == 4


@pytest.mark.asyncio
async def test_rating_for_someone_else_is_forbidden(client: AsyncClient):
    alice_user, _ = await register(client, "alice")
    _, bob = await register(client, "bob")

    response = await _rate(client, alice_user, bob, INCEPTION, 1)

    assert response.status_code == 403
    assert response.json()["code"] == "FORBIDDEN"


@pytest.mark.asyncio
async def test_movie_ratings_with_average(client: AsyncClient):
    alice_user, alice = await register(client, "alice")
    bob_user, bob = await register(client, "bob")
    await _rate(client, alice_user, alice, MATRIX, 5)
    await _rate(client, bob_user, bob, MATRIX, 4)

    response = await client.get(f"/api/movie/{MATRIX['movieId']}/ratings")

    data = response.json()["data"]
    assert data["averageRating"] == 4.5
    assert data["totalRatings"] == 2
    assert {r["username"] for r in data["ratings"]} == {"alice", "bob"}


@pytest.mark.asyncio
async def test_movie_without_ratings(client: AsyncClient):
    response = await client.get("/api/movie/999999/ratings")

    data = response.json()["data"]
    assert data["averageRating"] == 0
    assert data["totalRatings"] == 0
    assert data["ratings"] == []


@pytest.mark.asyncio
async def test_top_rated_requires_enough_ratings(client: AsyncClient):
    """Only movies with at least five ratings reach the leaderboard"""
    raters = []
    for index in range(5):
        raters.append(
            await register(
                client,
                "alice",
                username=f"rater{index}",
                email=f"rater{index}@example.com",
            )
        )

    for index, (user, token) in enumerate(raters):
        await _rate(client, user, token, MATRIX, 5 if index else 4)
        if index < 4:
            await _rate(client, user, token, INCEPTION, 5)

    response = await client.get("/api/ratings/top", params={"limit": 10})

    assert response.status_code == 200
    data = response.json()["data"]
    assert [m["movieId"] for m in data] == [MATRIX["movieId"]]
    assert data[0]["averageRating"] == 4.8
    assert data[0]["totalRatings"] == 5
    assert data[0]["movieTitle"] == "The Matrix"


@pytest.mark.asyncio
async def test_delete_rating(client: AsyncClient):
    user, token = await register(client, "alice")
    await _rate(client, user, token, INCEPTION, 4)

    deleted = await client.delete(
        f"/api/user/{user['id']}/ratings/{INCEPTION['movieId']}", headers=auth_header(token)
    )
    missing = await client.delete(
        f"/api/user/{user['id']}/ratings/{INCEPTION['movieId']}", headers=auth_header(token)
    )

    assert deleted.status_code == 200
    assert missing.status_code == 404
    assert missing.json()["code"] == "RATING_NOT_FOUND"


@pytest.mark.asyncio
async def test_delete_rating_of_other_user_is_forbidden(client: AsyncClient):
    _, token = await register(client, "alice")

    response = await client.delete(
        f"/api/user/{uuid4()}/ratings/{INCEPTION['movieId']}", headers=auth_header(token)
    )

    assert response.status_code == 403


@pytest.mark.asyncio
async def test_get_my_rating_for_movie(client: AsyncClient):
    """
    Given I rated Inception but not The Matrix
    When I ask for my rating of each
    Then I get my Inception rating and null for The Matrix
    """
    user, token = await register(client, "alice")
    await _rate(client, user, token, INCEPTION, 4)

    rated = await client.get(f"/api/ratings/{INCEPTION['movieId']}", headers=auth_header(token))
    unrated = await client.get(f"/api/ratings/{MATRIX['movieId']}", headers=auth_header(token))

    assert rated.status_code == 200
    assert rated.json()["data"]["rating"] == 4
    assert rated.json()["data"]["userId"] == user["id"]
    assert unrated.status_code == 200
    assert unrated.json().get("data") is None


@pytest.mark.asyncio
async def test_get_my_rating_requires_token(client: AsyncClient):
    response = await client.get(f"/api/ratings/{INCEPTION['movieId']}")

    assert response.status_code == 401


@pytest.mark.asyncio
async def test_top_rated_route_is_not_shadowed_by_movie_lookup(client: AsyncClient):
    response = await client.get("/api/ratings/top")

    assert response.status_code == 200
    assert response.json()["data"] == []


@pytest.mark.asyncio
async def test_padded_movie_id_refers_to_the_same_movie(client: AsyncClient):
    user, token = await register(client, "alice")
    await _rate(client, user, token, {**INCEPTION, "movieId": f"  {INCEPTION['movieId']} "}, 5)

    ratings = await client.get(f"/api/movie/{INCEPTION['movieId']}/ratings")
    deleted = await client.delete(
        f"/api/user/{user['id']}/ratings/%20{INCEPTION['movieId']}",
        headers=auth_header(token),
    )

    assert ratings.json()["data"]["totalRatings"] == 1
    assert ratings.json()["data"]["movieId"] == INCEPTION["movieId"]
    assert deleted.status_code == 200
