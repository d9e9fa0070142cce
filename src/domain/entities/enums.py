"""
Movie Review Domain Enums

All enumeration types used across domain entities and use cases.
"""

from enum import Enum


class CommentSort(str, Enum):
    """Ordering for comment listings"""

    newest = "newest"
    oldest = "oldest"
    likes = "likes"


class OwnershipAction(str, Enum):
    """Actions checked by the ownership guard"""

    read = "read"
    update = "update"
    delete = "delete"
    like = "like"
