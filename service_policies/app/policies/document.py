"""
Document permission rules.

Each rule applies resource-local restrictions first, then delegates to the
owning collection where required, and finally checks that the actor and
the document belong to the same tenant.
"""

from .guard import require
from .models import Action, Document, EntityKind, User
from .registry import PolicyRegistry
from .tree import has_descendant

COLLECTION_MISSING = "collection is missing, did you forget to load it with the document?"


def register_document_policies(registry: PolicyRegistry) -> None:
    """Register the document rule family."""

    @registry.allow(EntityKind.USER, [Action.READ, Action.DOWNLOAD], EntityKind.DOCUMENT)
    def read_document(policy, user: User, document: Document) -> bool:
        # Shared documents may be loaded without their collection
        if document.collection and policy.cannot(user, Action.READ, document.collection):
            return False
        return user.tenant_id == document.tenant_id

    @registry.allow(EntityKind.USER, [Action.STAR, Action.UNSTAR], EntityKind.DOCUMENT)
    def star_document(policy, user: User, document: Document) -> bool:
        if document.archived_at:
            return False
        if document.deleted_at:
            return False
        if document.template:
            return False
        require(document.collection, COLLECTION_MISSING)
        if policy.cannot(user, Action.READ, document.collection):
            return False
        return user.tenant_id == document.tenant_id

    @registry.allow(EntityKind.USER, Action.SHARE, EntityKind.DOCUMENT)
    def share_document(policy, user: User, document: Document) -> bool:
        if document.archived_at:
            return False
        if document.deleted_at:
            return False
        require(document.collection, COLLECTION_MISSING)
        if policy.cannot(user, Action.SHARE, document.collection):
            return False
        return user.tenant_id == document.tenant_id

    @registry.allow(EntityKind.USER, Action.UPDATE, EntityKind.DOCUMENT)
    def update_document(policy, user: User, document: Document) -> bool:
        if document.archived_at:
            return False
        if document.deleted_at:
            return False
        if not document.published_at:
            return False
        require(document.collection, COLLECTION_MISSING)
        if policy.cannot(user, Action.UPDATE, document.collection):
            return False
        return user.tenant_id == document.tenant_id

    @registry.allow(
        EntityKind.USER,
        [Action.CREATE_CHILD_DOCUMENT, Action.MOVE, Action.PIN, Action.UNPIN],
        EntityKind.DOCUMENT,
    )
    def restructure_document(policy, user: User, document: Document) -> bool:
        if document.archived_at:
            return False
        if document.deleted_at:
            return False
        if document.template:
            return False
        if not document.published_at:
            return False
        require(document.collection, COLLECTION_MISSING)
        if policy.cannot(user, Action.UPDATE, document.collection):
            return False
        return user.tenant_id == document.tenant_id

    @registry.allow(EntityKind.USER, Action.PIN_TO_HOME, EntityKind.DOCUMENT)
    def pin_document_to_home(policy, user: User, document: Document) -> bool:
        if document.archived_at:
            return False
        if document.deleted_at:
            return False
        if document.template:
            return False
        if not document.published_at:
            return False
        return user.tenant_id == document.tenant_id and user.is_admin

    @registry.allow(EntityKind.USER, Action.DELETE, EntityKind.DOCUMENT)
    def delete_document(policy, user: User, document: Document) -> bool:
        if user.is_viewer:
            return False
        if document.deleted_at:
            return False
        # Documents without a collection can still be deleted
        if document.collection and policy.cannot(user, Action.UPDATE, document.collection):
            return False
        # Drafts and published documents are deletable alike
        return user.tenant_id == document.tenant_id

    @registry.allow(EntityKind.USER, [Action.PERMANENT_DELETE, Action.RESTORE], EntityKind.DOCUMENT)
    def purge_or_restore_document(policy, user: User, document: Document) -> bool:
        if user.is_viewer:
            return False
        if not document.deleted_at:
            return False
        if document.collection and policy.cannot(user, Action.UPDATE, document.collection):
            return False
        return user.tenant_id == document.tenant_id

    @registry.allow(EntityKind.USER, Action.ARCHIVE, EntityKind.DOCUMENT)
    def archive_document(policy, user: User, document: Document) -> bool:
        if not document.published_at:
            return False
        if document.archived_at:
            return False
        if document.deleted_at:
            return False
        require(document.collection, COLLECTION_MISSING)
        if policy.cannot(user, Action.UPDATE, document.collection):
            return False
        return user.tenant_id == document.tenant_id

    @registry.allow(EntityKind.USER, Action.UNARCHIVE, EntityKind.DOCUMENT)
    def unarchive_document(policy, user: User, document: Document) -> bool:
        require(document.collection, COLLECTION_MISSING)
        if policy.cannot(user, Action.UPDATE, document.collection):
            return False
        if not document.archived_at:
            return False
        if document.deleted_at:
            return False
        return user.tenant_id == document.tenant_id

    @registry.allow(EntityKind.USER, Action.UNPUBLISH, EntityKind.DOCUMENT)
    def unpublish_document(policy, user: User, document: Document) -> bool:
        require(document.collection, COLLECTION_MISSING)
        if not document.published_at or document.deleted_at or document.archived_at:
            return False
        if policy.cannot(user, Action.UPDATE, document.collection):
            return False
        # Only leaf documents may be unpublished
        if has_descendant(document.collection.document_structure, document.id):
            return False
        return user.tenant_id == document.tenant_id
