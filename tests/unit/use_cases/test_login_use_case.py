from datetime import timedelta
from uuid import uuid4

import bcrypt
import pytest

from src.api.utils.jwt import TokenIssuer
from src.app.use_cases.auth.login_use_case import LoginUseCase
from src.domain.entities import User


def _user(password: str) -> User:
    return User(
        id=uuid4(),
        username="alice",
        email="alice@example.com",
        password_hash=bcrypt.hashpw(password.encode(), bcrypt.gensalt(4)).decode(),
        first_name="Alice",
        last_name="Liddell",
        favorite_genres=[],
    )


@pytest.fixture
def token_issuer():
    return TokenIssuer("unit-test-secret", timedelta(days=7))


@pytest.mark.asyncio
async def test_successful_login(mock_uow, token_issuer):
    """
    Given a user exists
    When I log in with the right password
    Then I receive a token and my profile
    """
    user = _user("secret123")
    mock_uow.users.get_by_email.return_value = user

    result = await LoginUseCase(mock_uow, token_issuer).execute("alice@example.com", "secret123")

    assert result.is_ok()
    assert result.value.user.id == str(user.id)
    assert token_issuer.verify(result.value.token).value["email"] == "alice@example.com"


@pytest.mark.asyncio
async def test_login_wrong_password(mock_uow, token_issuer):
    mock_uow.users.get_by_email.return_value = _user("secret123")

    result = await LoginUseCase(mock_uow, token_issuer).execute("alice@example.com", "nope-nope")

    assert result.is_err()
    assert result.error.code == "INVALID_CREDENTIALS"


@pytest.mark.asyncio
async def test_login_unknown_email_gives_same_error(mock_uow, token_issuer):
    mock_uow.users.get_by_email.return_value = None

    result = await LoginUseCase(mock_uow, token_issuer).execute("ghost@example.com", "secret123")

    assert result.is_err()
    assert result.error.code == "INVALID_CREDENTIALS"
    assert result.error.message == "Invalid email or password"


@pytest.mark.asyncio
async def test_login_with_overlong_password_is_invalid_credentials(mock_uow, token_issuer):
    """
    Given a user exists
    When I log in with a password longer than bcrypt accepts
    Then I get the usual credential error instead of a crash
    """
    mock_uow.users.get_by_email.return_value = _user("secret123")

    result = await LoginUseCase(mock_uow, token_issuer).execute(
        "alice@example.com", "p" * 100
    )

    assert result.is_err()
    assert result.error.code == "INVALID_CREDENTIALS"


@pytest.mark.asyncio
async def test_login_unknown_email_with_overlong_password(mock_uow, token_issuer):
    mock_uow.users.get_by_email.return_value = None

    result = await LoginUseCase(mock_uow, token_issuer).execute("ghost@example.com", "é" * 40)

    assert result.error.code == "INVALID_CREDENTIALS"
