"""
Policies package.

Defines the rule registry and the decision engine, plus the rule families
registered at start-up. Rules are keyed by (actor kind, resource kind,
action) and OR-combined in registration order; anything ungoverned is
denied.

Modules of interest:
- registry: Rule storage, lookup and freezing.
- engine: can/cannot evaluation.
- guard: Precondition checks for relations rules dereference.
- tree: Containment search over a collection's document structure.
- document, collection, team, revision, user: Rule families.
"""

from .engine import PolicyEngine
from .guard import require
from .models import (
    Action,
    Collection,
    CollectionPermission,
    Document,
    DocumentState,
    DocumentTreeNode,
    EntityKind,
    Revision,
    Rule,
    Team,
    User,
    UserRole,
    kind_of,
)
from .registry import PolicyRegistry
from .tree import has_descendant

__all__ = [
    "PolicyEngine",
    "PolicyRegistry",
    "require",
    "has_descendant",
    "kind_of",
    "Action",
    "Collection",
    "CollectionPermission",
    "Document",
    "DocumentState",
    "DocumentTreeNode",
    "EntityKind",
    "Revision",
    "Rule",
    "Team",
    "User",
    "UserRole",
]
