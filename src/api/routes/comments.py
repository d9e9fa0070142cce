from uuid import UUID

from fastapi import APIRouter, Depends, Query, status
from pydantic import Field

from src.api.error import ClientError, ServerError
from src.api.schemas import ApiResponse, ok
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.comments import (
    CommentInfo,
    CommentPage,
    CreateCommentUseCase,
    DeleteCommentUseCase,
    LikeCommentUseCase,
    LikeResult,
    ListMovieCommentsUseCase,
    ListUserCommentsUseCase,
    UpdateCommentUseCase,
)
from src.app.use_cases.dto_base import CamelModel
from src.app.use_cases.pagination import DEFAULT_PAGE_SIZE, MAX_PAGE_SIZE
from src.depends import get_current_user, get_unit_of_work
from src.domain.entities import CommentSort

router = APIRouter(tags=["Comments"])


class CommentRequest(CamelModel):
    """Comment body; trimming and length rules live in the use case"""

    content: str = Field(..., description="Comment text (1-1000 chars)")


def _raise_comment_error(error):
    if error.code == "INVALID_CONTENT" or error.code == "INVALID_MOVIE_ID":
        raise ClientError(error, status_code=status.HTTP_400_BAD_REQUEST)
    if error.code == "FORBIDDEN":
        raise ClientError(error, status_code=status.HTTP_403_FORBIDDEN)
    if error.code in ("COMMENT_NOT_FOUND", "USER_NOT_FOUND"):
        raise ClientError(error, status_code=status.HTTP_404_NOT_FOUND)
    raise ServerError(error)


@router.get("/movie/{movie_id}/comments", response_model=ApiResponse[CommentPage])
async def list_movie_comments(
    movie_id: str,
    page: int = Query(1, ge=1),
    limit: int = Query(DEFAULT_PAGE_SIZE, ge=1, le=MAX_PAGE_SIZE),
    sort_by: CommentSort = Query(CommentSort.newest, alias="sortBy"),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """Paginated comments of a movie sorted by newest, oldest or likes"""
    result = await ListMovieCommentsUseCase(uow).execute(movie_id, page, limit, sort_by)
    if result.is_err():
        _raise_comment_error(result.error)
    return ok(result.value)


@router.post(
    "/movie/{movie_id}/comments",
    status_code=status.HTTP_201_CREATED,
    response_model=ApiResponse[CommentInfo],
)
async def create_comment(
    movie_id: str,
    request: CommentRequest,
    current_user: dict = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Post a comment on a movie.

    Raises:
        - 400 Bad Request: Empty or too long content
        - 401 Unauthorized: Missing token
    """
    use_case = CreateCommentUseCase(uow)
    result = await use_case.execute(UUID(current_user["id"]), movie_id, request.content)

    if result.is_err():
        _raise_comment_error(result.error)

    return ok(result.value, "Comment created successfully")


@router.get("/user/{user_id}/comments", response_model=ApiResponse[CommentPage])
async def list_user_comments(
    user_id: UUID,
    page: int = Query(1, ge=1),
    limit: int = Query(DEFAULT_PAGE_SIZE, ge=1, le=MAX_PAGE_SIZE),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await ListUserCommentsUseCase(uow).execute(user_id, page, limit)
    if result.is_err():
        raise ServerError(result.error)
    return ok(result.value)


@router.put("/user/{user_id}/comments/{comment_id}", response_model=ApiResponse[CommentInfo])
async def update_comment(
    user_id: UUID,
    comment_id: UUID,
    request: CommentRequest,
    current_user: dict = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Edit a comment. Only its owner may do so.

    Raises:
        - 403 Forbidden: Path user is not the caller
        - 404 Not Found: Comment missing or owned by someone else
    """
    use_case = UpdateCommentUseCase(uow)
    result = await use_case.execute(
        comment_id, user_id, UUID(current_user["id"]), request.content
    )

    if result.is_err():
        _raise_comment_error(result.error)

    return ok(result.value, "Comment updated successfully")


@router.delete("/user/{user_id}/comments/{comment_id}", response_model=ApiResponse[None])
async def delete_comment(
    user_id: UUID,
    comment_id: UUID,
    current_user: dict = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Delete a comment and its likes. Only its owner may do so.

    Raises:
        - 403 Forbidden: Path user is not the caller
        - 404 Not Found: Comment missing or owned by someone else
    """
    use_case = DeleteCommentUseCase(uow)
    result = await use_case.execute(comment_id, user_id, UUID(current_user["id"]))

    if result.is_err():
        _raise_comment_error(result.error)

    return ok(message="Comment deleted successfully")


@router.put(
    "/user/{user_id}/comments/{comment_id}/like", response_model=ApiResponse[LikeResult]
)
async def like_comment(
    user_id: UUID,
    comment_id: UUID,
    current_user: dict = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Like a comment. Liking the same comment twice leaves the count unchanged.

    Raises:
        - 404 Not Found: Comment missing
    """
    result = await LikeCommentUseCase(uow).execute(comment_id, UUID(current_user["id"]))

    if result.is_err():
        _raise_comment_error(result.error)

    message = "Comment liked successfully" if result.value.liked else "Comment already liked"
    return ok(result.value, message)
