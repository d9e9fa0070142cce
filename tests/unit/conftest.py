import pytest
from unittest.mock import AsyncMock, MagicMock

from src.app.services.notification_service import NotificationDispatcher


@pytest.fixture
def mock_uow():
    """Mock UnitOfWork with all repositories"""
    uow = MagicMock()
    uow.__aenter__ = AsyncMock(return_value=uow)
    uow.__aexit__ = AsyncMock(return_value=False)  # Must return False to not suppress exceptions
    uow.commit = AsyncMock()
    uow.rollback = AsyncMock()

    uow.users = MagicMock()
    for name in (
        "get_by_email",
        "get_by_username",
        "get_by_id",
        "create",
        "update",
        "get_by_verification_token",
        "get_by_reset_token_hash",
        "delete",
    ):
        setattr(uow.users, name, AsyncMock())

    uow.comments = MagicMock()
    for name in (
        "create",
        "get_by_id",
        "get_with_author",
        "list_by_movie",
        "count_by_movie",
        "list_by_user",
        "count_by_user",
        "update_content_if_owner",
        "delete_if_owner",
        "add_like",
        "delete_all_by_user",
    ):
        setattr(uow.comments, name, AsyncMock())

    uow.ratings = MagicMock()
    for name in (
        "upsert",
        "get_by_user_and_movie",
        "list_by_user",
        "count_by_user",
        "list_by_movie",
        "get_top_rated",
        "delete",
        "delete_all_by_user",
    ):
        setattr(uow.ratings, name, AsyncMock())

    return uow


@pytest.fixture
def mock_dispatcher():
    """Dispatcher double; notify_* are plain methods that schedule work"""
    return MagicMock(spec=NotificationDispatcher)
