"""
Use Cases

Organized into domain folders:
- auth/: Registration, login and password flows
- users/: Profiles and account deletion
- comments/: Comment lifecycle and likes
- ratings/: Rating ledger and leaderboard
"""

from .auth import (
    ChangePasswordUseCase,
    ForgotPasswordUseCase,
    LoginUseCase,
    RegisterUseCase,
    ResetPasswordUseCase,
    VerifyEmailUseCase,
)
from .comments import (
    CreateCommentUseCase,
    DeleteCommentUseCase,
    LikeCommentUseCase,
    ListMovieCommentsUseCase,
    ListUserCommentsUseCase,
    UpdateCommentUseCase,
)
from .ratings import (
    DeleteRatingUseCase,
    GetMovieRatingsUseCase,
    GetTopRatedMoviesUseCase,
    GetUserRatingUseCase,
    ListUserRatingsUseCase,
    UpsertRatingUseCase,
)
from .users import (
    DeleteAccountUseCase,
    GetProfileUseCase,
    GetPublicProfileUseCase,
    UpdateProfileUseCase,
)

__all__ = [
    # Auth
    "RegisterUseCase",
    "LoginUseCase",
    "VerifyEmailUseCase",
    "ForgotPasswordUseCase",
    "ResetPasswordUseCase",
    "ChangePasswordUseCase",
    # Users
    "GetProfileUseCase",
    "UpdateProfileUseCase",
    "GetPublicProfileUseCase",
    "DeleteAccountUseCase",
    # Comments
    "CreateCommentUseCase",
    "ListMovieCommentsUseCase",
    "ListUserCommentsUseCase",
    "UpdateCommentUseCase",
    "DeleteCommentUseCase",
    "LikeCommentUseCase",
    # Ratings
    "UpsertRatingUseCase",
    "ListUserRatingsUseCase",
    "GetMovieRatingsUseCase",
    "GetTopRatedMoviesUseCase",
    "DeleteRatingUseCase",
    "GetUserRatingUseCase",
]
