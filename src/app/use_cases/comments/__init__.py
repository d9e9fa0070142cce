"""
Comment Use Cases
"""

from .create_comment_use_case import CreateCommentUseCase
from .delete_comment_use_case import DeleteCommentUseCase
from .dtos import CommentAuthor, CommentInfo, CommentPage, LikeResult
from .like_comment_use_case import LikeCommentUseCase
from .list_movie_comments_use_case import ListMovieCommentsUseCase
from .list_user_comments_use_case import ListUserCommentsUseCase
from .update_comment_use_case import UpdateCommentUseCase

__all__ = [
    "CreateCommentUseCase",
    "ListMovieCommentsUseCase",
    "ListUserCommentsUseCase",
    "UpdateCommentUseCase",
    "DeleteCommentUseCase",
    "LikeCommentUseCase",
    "CommentAuthor",
    "CommentInfo",
    "CommentPage",
    "LikeResult",
]
