import pytest
from httpx import AsyncClient


@pytest.mark.asyncio
async def test_health(client: AsyncClient):
    response = await client.get("/health")

    assert response.status_code == 200
    assert response.json()["success"] is True
    assert response.json()["data"] == {"status": "ok"}


@pytest.mark.asyncio
async def test_unknown_route(client: AsyncClient):
    response = await client.get("/api/nothing-here")

    assert response.status_code == 404
    assert response.json() == {
        "success": False,
        "message": "Route not found",
        "code": "NOT_FOUND",
    }
