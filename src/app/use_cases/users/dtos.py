"""
User Use Case DTOs
"""

from datetime import datetime
from typing import List, Optional

from src.app.use_cases.dto_base import CamelModel


class UpdateProfileCommand(CamelModel):
    """Profile fields a user may change; None leaves the field untouched"""

    first_name: Optional[str] = None
    last_name: Optional[str] = None
    favorite_genres: Optional[List[str]] = None


class PublicProfile(CamelModel):
    """Public view of a user (no email, no tokens)"""

    id: str
    username: str
    first_name: str
    last_name: str
    favorite_genres: List[str]
    is_email_verified: bool
    created_at: datetime
    comment_count: int
    rating_count: int
