from fastapi import APIRouter

from src.api.schemas import ok

router = APIRouter()


@router.get("/health")
async def health_check():
    return ok({"status": "ok"}, "Server is running")
