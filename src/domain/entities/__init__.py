"""
Movie Review Domain Entities

All domain entities organized by model.
Each entity in its own file for better maintainability.
"""

# Export all enums
from .enums import CommentSort, OwnershipAction

# Export all entities
from .user import User
from .comment import Comment
from .comment_like import CommentLike
from .rating import Rating

__all__ = [
    # Enums
    "CommentSort",
    "OwnershipAction",
    # Entities
    "User",
    "Comment",
    "CommentLike",
    "Rating",
]
