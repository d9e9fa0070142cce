"""
Login Use Case

Exchanges email and password for a bearer token and the caller's profile.
"""

import bcrypt

from libs.result import Error, Result, Return
from src.api.utils.jwt import TokenIssuer
from src.app.services.unit_of_work import UnitOfWork
from .dtos import AuthResponse, UserInfo
from .validation import password_matches

# compared against when the email is unknown so both failure paths pay for a hash
_DUMMY_HASH = bcrypt.hashpw(b"dummy_password", bcrypt.gensalt(12))

INVALID_CREDENTIALS = Error("INVALID_CREDENTIALS", "Invalid email or password")


class LoginUseCase:
    """
    Business Rules:
    - Email lookup is case-insensitive
    - Unknown email and wrong password produce the same error
    - The token embeds id, email and username
    """

    def __init__(self, uow: UnitOfWork, token_issuer: TokenIssuer):
        self.uow = uow
        self.token_issuer = token_issuer

    async def execute(self, email: str, password: str) -> Result[AuthResponse]:
        async with self.uow:
            user = await self.uow.users.get_by_email(email)
            stored_hash = user.password_hash.encode() if user else _DUMMY_HASH
            if not password_matches(password, stored_hash) or user is None:
                return Return.err(INVALID_CREDENTIALS)

            return Return.ok(
                AuthResponse(
                    user=UserInfo.from_entity(user),
                    token=self.token_issuer.issue(user),
                )
            )
