from uuid import uuid4

import bcrypt
import pytest

from src.app.use_cases.users import (
    DeleteAccountUseCase,
    GetPublicProfileUseCase,
    UpdateProfileCommand,
    UpdateProfileUseCase,
)
from src.domain.entities import User


def _user(password: str = "secret123") -> User:
    return User(
        id=uuid4(),
        username="alice",
        email="alice@example.com",
        password_hash=bcrypt.hashpw(password.encode(), bcrypt.gensalt(4)).decode(),
        first_name="Alice",
        last_name="Liddell",
        favorite_genres=["Drama"],
    )


@pytest.mark.asyncio
async def test_update_profile_ignores_blank_names(mock_uow):
    user = _user()
    mock_uow.users.get_by_id.return_value = user
    mock_uow.users.update.side_effect = lambda u: u

    command = UpdateProfileCommand(first_name="  ", last_name="Smith", favorite_genres=["Horror", "Horror"])
    result = await UpdateProfileUseCase(mock_uow).execute(user.id, command)

    assert result.value.first_name == "Alice"
    assert result.value.last_name == "Smith"
    assert result.value.favorite_genres == ["Horror"]
    mock_uow.commit.assert_awaited_once()


@pytest.mark.asyncio
async def test_public_profile_hides_email(mock_uow):
    user = _user()
    mock_uow.users.get_by_id.return_value = user
    mock_uow.comments.count_by_user.return_value = 3
    mock_uow.ratings.count_by_user.return_value = 2

    result = await GetPublicProfileUseCase(mock_uow).execute(user.id)

    dumped = result.value.model_dump(by_alias=True)
    assert "email" not in dumped
    assert dumped["commentCount"] == 3
    assert dumped["ratingCount"] == 2


@pytest.mark.asyncio
async def test_delete_account_cascades(mock_uow):
    user = _user()
    mock_uow.users.get_by_id.return_value = user
    mock_uow.comments.delete_all_by_user.return_value = 2
    mock_uow.ratings.delete_all_by_user.return_value = 1

    result = await DeleteAccountUseCase(mock_uow).execute(user.id, "secret123")

    assert result.is_ok()
    mock_uow.comments.delete_all_by_user.assert_awaited_once_with(user.id)
    mock_uow.ratings.delete_all_by_user.assert_awaited_once_with(user.id)
    mock_uow.users.delete.assert_awaited_once_with(user.id)
    mock_uow.commit.assert_awaited_once()


@pytest.mark.asyncio
async def test_delete_account_requires_password(mock_uow):
    mock_uow.users.get_by_id.return_value = _user()

    result = await DeleteAccountUseCase(mock_uow).execute(uuid4(), "wrong-pass")

    assert result.error.code == "INVALID_PASSWORD"
    mock_uow.users.delete.assert_not_awaited()
    mock_uow.commit.assert_not_awaited()


@pytest.mark.asyncio
async def test_delete_account_with_overlong_password_is_rejected(mock_uow):
    mock_uow.users.get_by_id.return_value = _user()

    result = await DeleteAccountUseCase(mock_uow).execute(uuid4(), "p" * 100)

    assert result.error.code == "INVALID_PASSWORD"
    mock_uow.users.delete.assert_not_awaited()
