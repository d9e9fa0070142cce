"""
Ownership Guard

Decides whether an actor may act on a resource owned by another identity.
"""

from typing import FrozenSet
from uuid import UUID

from src.domain.entities import OwnershipAction


class OwnershipGuard:
    """
    Business Rules:
    - update and delete require the actor to be the owner
    - read and like are allowed for any authenticated actor

    The guard only compares identities. Whether the resource exists and is
    really owned by the actor is decided by a single owner-scoped statement
    in the repository, so absence and foreign ownership look the same.
    """

    MUTATING_ACTIONS: FrozenSet[OwnershipAction] = frozenset(
        {OwnershipAction.update, OwnershipAction.delete}
    )

    @classmethod
    def authorize(cls, actor_id: UUID, owner_id: UUID, action: OwnershipAction) -> bool:
        if action in cls.MUTATING_ACTIONS:
            return str(actor_id) == str(owner_id)
        return True
