import pytest
from httpx import AsyncClient
from sqlmodel import select

from src.domain.entities import Comment, CommentLike, Rating, User
from tests.utils.helpers import auth_header, movie, register

INCEPTION = movie("inception")


@pytest.mark.asyncio
async def test_delete_account_removes_everything_it_contributed(client: AsyncClient, db_session):
    """
    Given alice commented, rated and liked bob's comment
    When alice deletes her account
    Then no comment, like or rating of hers remains
    And bob's comment is back to zero likes
    """
    alice_user, alice = await register(client, "alice")
    bob_user, bob = await register(client, "bob")

    alice_comment = (
        await client.post(
            f"/api/movie/{INCEPTION['movieId']}/comments",
            headers=auth_header(alice),
            json={"content": "alice was here"},
        )
    ).json()["data"]
    bob_comment = (
        await client.post(
            f"/api/movie/{INCEPTION['movieId']}/comments",
            headers=auth_header(bob),
            json={"content": "bob was here"},
        )
    ).json()["data"]
    await client.put(
        f"/api/user/{bob_user['id']}/comments/{bob_comment['id']}/like",
        headers=auth_header(alice),
    )
    await client.put(
        f"/api/user/{alice_user['id']}/comments/{alice_comment['id']}/like",
        headers=auth_header(bob),
    )
    await client.post(
        f"/api/user/{alice_user['id']}/ratings",
        headers=auth_header(alice),
        json={**INCEPTION, "rating": 5},
    )

    response = await client.request(
        "DELETE", "/api/auth/me", headers=auth_header(alice), json={"password": "secret123"}
    )
    assert response.status_code == 200

    assert (await db_session.exec(select(User).where(User.username == "alice"))).first() is None
    comments = (await db_session.exec(select(Comment))).all()
    assert [c.content for c in comments] == ["bob was here"]
    assert (await db_session.exec(select(CommentLike))).all() == []
    assert (await db_session.exec(select(Rating))).all() == []

    listing = await client.get(f"/api/movie/{INCEPTION['movieId']}/comments")
    remaining = listing.json()["data"]["comments"]
    assert len(remaining) == 1
    assert remaining[0]["likes"] == 0

    me = await client.get("/api/auth/me", headers=auth_header(alice))
    assert me.status_code == 404


@pytest.mark.asyncio
async def test_delete_account_requires_password(client: AsyncClient):
    _, token = await register(client, "alice")

    response = await client.request(
        "DELETE", "/api/auth/me", headers=auth_header(token), json={"password": "wrong-pass"}
    )

    assert response.status_code == 400
    assert response.json()["code"] == "INVALID_PASSWORD"


@pytest.mark.asyncio
async def test_token_of_deleted_account_cannot_rate_or_like(client: AsyncClient, db_session):
    """
    Given alice deleted her account but still holds her old token
    When she rates a movie and likes bob's comment with it
    Then both are refused and no row points at her
    """
    alice_user, alice = await register(client, "alice")
    _, bob = await register(client, "bob")
    bob_comment = (
        await client.post(
            f"/api/movie/{INCEPTION['movieId']}/comments",
            headers=auth_header(bob),
            json={"content": "bob was here"},
        )
    ).json()["data"]

    deleted = await client.request(
        "DELETE", "/api/auth/me", headers=auth_header(alice), json={"password": "secret123"}
    )
    assert deleted.status_code == 200

    rate = await client.post(
        f"/api/user/{alice_user['id']}/ratings",
        headers=auth_header(alice),
        json={**INCEPTION, "rating": 4},
    )
    like = await client.put(
        f"/api/user/{bob_comment['userId']}/comments/{bob_comment['id']}/like",
        headers=auth_header(alice),
    )

    assert rate.status_code == 404
    assert rate.json()["code"] == "USER_NOT_FOUND"
    assert like.status_code == 404
    assert like.json()["code"] == "USER_NOT_FOUND"

    ratings = await client.get(f"/api/movie/{INCEPTION['movieId']}/ratings")
    assert ratings.json()["data"]["totalRatings"] == 0
    assert (await db_session.exec(select(CommentLike))).all() == []
    assert (await db_session.exec(select(Comment))).one().likes == 0
