"""
Revision permission rules.
"""

from .guard import require
from .models import Action, Document, EntityKind, Revision, User
from .registry import PolicyRegistry


def register_revision_policies(registry: PolicyRegistry) -> None:
    """Register the revision rule family."""

    @registry.allow(EntityKind.DOCUMENT, Action.RESTORE, EntityKind.REVISION)
    def restore_revision_into_document(policy, document: Document, revision: Revision) -> bool:
        return (
            document.id == revision.document_id
            and document.tenant_id == revision.tenant_id
        )

    @registry.allow(EntityKind.USER, Action.READ, EntityKind.REVISION)
    def read_revision(policy, user: User, revision: Revision) -> bool:
        require(
            revision.document,
            "document is missing, did you forget to load it with the revision?"
        )
        if policy.cannot(user, Action.READ, revision.document):
            return False
        return user.tenant_id == revision.tenant_id
