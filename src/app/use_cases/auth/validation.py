from typing import Iterable, List

import bcrypt

from libs.result import Error, Result, Return

MIN_PASSWORD_LENGTH = 6
# bcrypt only reads the first 72 bytes and bcrypt>=5 refuses anything longer
MAX_PASSWORD_BYTES = 72
MIN_USERNAME_LENGTH = 3
MAX_USERNAME_LENGTH = 50


def validate_password(password: str) -> Result[None]:
    """
    Validate password complexity.

    Args:
        password: Password to validate

    Returns:
        Result with None if valid, or Error if invalid
    """
    if len(password) < MIN_PASSWORD_LENGTH:
        return Return.err(
            Error(
                "INVALID_PASSWORD",
                f"Password must be at least {MIN_PASSWORD_LENGTH} characters long",
            )
        )
    if len(password.encode("utf-8")) > MAX_PASSWORD_BYTES:
        return Return.err(
            Error(
                "INVALID_PASSWORD",
                f"Password must be at most {MAX_PASSWORD_BYTES} bytes long",
            )
        )
    return Return.ok(None)


def password_matches(password: str, password_hash: bytes) -> bool:
    """Compare a candidate against a stored hash; over-long input never matches"""
    candidate = password.encode("utf-8")
    if len(candidate) > MAX_PASSWORD_BYTES:
        return False
    return bcrypt.checkpw(candidate, password_hash)


def validate_username(username: str) -> Result[str]:
    """Trim and lower-case a username, then check its length"""
    normalized = username.strip().lower()
    if not MIN_USERNAME_LENGTH <= len(normalized) <= MAX_USERNAME_LENGTH:
        return Return.err(
            Error(
                "INVALID_USERNAME",
                f"Username must be {MIN_USERNAME_LENGTH}-{MAX_USERNAME_LENGTH} characters long",
            )
        )
    return Return.ok(normalized)


def normalize_genres(genres: Iterable[str]) -> List[str]:
    """Trim genre names and drop blanks and case-insensitive duplicates, keeping order"""
    seen = set()
    normalized = []
    for genre in genres:
        name = genre.strip()
        if name and name.lower() not in seen:
            seen.add(name.lower())
            normalized.append(name)
    return normalized
