from typing import Dict, Tuple

from httpx import AsyncClient

from tests.fixtures.json_loader import FixtureDataLoader

user_payload = FixtureDataLoader.user
movie = FixtureDataLoader.movie


def auth_header(token: str) -> Dict[str, str]:
    return {"Authorization": f"Bearer {token}"}


async def register(client: AsyncClient, name: str, **overrides) -> Tuple[dict, str]:
    """Register a fixture user and return (user, token)"""
    response = await client.post("/api/auth/register", json=user_payload(name, **overrides))
    assert response.status_code == 201, response.text
    data = response.json()["data"]
    return data["user"], data["token"]
