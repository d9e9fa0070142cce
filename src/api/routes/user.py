from uuid import UUID

from fastapi import APIRouter, Depends, status

from src.api.error import ClientError, ServerError
from src.api.schemas import ApiResponse, ok
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.users import GetPublicProfileUseCase, PublicProfile
from src.depends import get_unit_of_work

router = APIRouter(prefix="/user", tags=["User"])


@router.get("/{user_id}/profile", response_model=ApiResponse[PublicProfile])
async def get_public_profile(user_id: UUID, uow: UnitOfWork = Depends(get_unit_of_work)):
    """
    Public profile of any user with comment and rating counts.

    Raises:
        - 404 Not Found: Unknown user
    """
    result = await GetPublicProfileUseCase(uow).execute(user_id)

    if result.is_err():
        error = result.error
        if error.code == "USER_NOT_FOUND":
            raise ClientError(error, status_code=status.HTTP_404_NOT_FOUND)
        raise ServerError(error)

    return ok(result.value)
