"""
Collection permission rules.
"""

from .guard import require
from .models import Action, Collection, CollectionPermission, EntityKind, User
from .registry import PolicyRegistry


def register_collection_policies(registry: PolicyRegistry) -> None:
    """Register the collection rule family."""

    @registry.allow(EntityKind.USER, Action.READ, EntityKind.COLLECTION)
    def read_collection(policy, user: User, collection: Collection) -> bool:
        if collection.deleted_at:
            return False
        if user.tenant_id != collection.tenant_id:
            return False
        if user.is_admin:
            return True
        return (
            collection.permission is not None
            or collection.membership_for(user.id) is not None
        )

    @registry.allow(
        EntityKind.USER,
        [Action.UPDATE, Action.CREATE_DOCUMENT],
        EntityKind.COLLECTION,
    )
    def update_collection(policy, user: User, collection: Collection) -> bool:
        if collection.deleted_at:
            return False
        if user.is_viewer:
            return False
        if user.tenant_id != collection.tenant_id:
            return False
        if user.is_admin:
            return True
        return (
            collection.permission == CollectionPermission.READ_WRITE
            or collection.membership_for(user.id) == CollectionPermission.READ_WRITE
        )

    @registry.allow(EntityKind.USER, Action.SHARE, EntityKind.COLLECTION)
    def share_collection(policy, user: User, collection: Collection) -> bool:
        if collection.deleted_at:
            return False
        if not collection.sharing:
            return False
        require(
            collection.team,
            "team is missing, did you forget to load it with the collection?"
        )
        if policy.cannot(user, Action.SHARE, collection.team):
            return False
        if policy.cannot(user, Action.READ, collection):
            return False
        return user.tenant_id == collection.tenant_id

    @registry.allow(EntityKind.USER, Action.DELETE, EntityKind.COLLECTION)
    def delete_collection(policy, user: User, collection: Collection) -> bool:
        if collection.deleted_at:
            return False
        if user.is_viewer:
            return False
        if user.tenant_id != collection.tenant_id:
            return False
        return (
            user.is_admin
            or collection.membership_for(user.id) == CollectionPermission.READ_WRITE
        )
