"""
User Use Cases

Profile management and account lifecycle.
"""

from .get_profile_use_case import GetProfileUseCase
from .update_profile_use_case import UpdateProfileUseCase
from .get_public_profile_use_case import GetPublicProfileUseCase
from .delete_account_use_case import DeleteAccountUseCase
from .dtos import PublicProfile, UpdateProfileCommand

__all__ = [
    "GetProfileUseCase",
    "UpdateProfileUseCase",
    "GetPublicProfileUseCase",
    "DeleteAccountUseCase",
    "PublicProfile",
    "UpdateProfileCommand",
]
