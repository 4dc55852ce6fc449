"""
Entity and rule models for the Policy Service.

Entities are immutable snapshots handed in by the persistence layer with the
relations each rule needs already attached. Every entity class declares its
``kind`` so the engine can dispatch on an explicit tag instead of Python
types.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Any, Callable, ClassVar, Dict, FrozenSet, List, Optional

from pydantic import BaseModel, ConfigDict, Field


class EntityKind(str, Enum):
    """Kinds of actors and resources rules are keyed by."""
    USER = "user"
    TEAM = "team"
    COLLECTION = "collection"
    DOCUMENT = "document"
    REVISION = "revision"


class Action(str, Enum):
    """Actions governed by the shipped rule families."""
    READ = "read"
    DOWNLOAD = "download"
    UPDATE = "update"
    SHARE = "share"
    DELETE = "delete"
    STAR = "star"
    UNSTAR = "unstar"
    MOVE = "move"
    PIN = "pin"
    UNPIN = "unpin"
    PIN_TO_HOME = "pinToHome"
    CREATE_DOCUMENT = "createDocument"
    CREATE_CHILD_DOCUMENT = "createChildDocument"
    CREATE_COLLECTION = "createCollection"
    PERMANENT_DELETE = "permanentDelete"
    RESTORE = "restore"
    ARCHIVE = "archive"
    UNARCHIVE = "unarchive"
    UNPUBLISH = "unpublish"
    PROMOTE = "promote"
    DEMOTE = "demote"
    SUSPEND = "suspend"
    ACTIVATE = "activate"


class UserRole(str, Enum):
    """Tenant roles derived from the user's flags."""
    ADMIN = "admin"
    MEMBER = "member"
    VIEWER = "viewer"


class CollectionPermission(str, Enum):
    """Access level granted on a collection."""
    READ = "read"
    READ_WRITE = "read_write"


class DocumentState(str, Enum):
    """Visible lifecycle state of a document."""
    DRAFT = "draft"
    PUBLISHED = "published"
    ARCHIVED = "archived"
    DELETED = "deleted"


class Entity(BaseModel):
    """Base class for everything rules can be evaluated against."""

    model_config = ConfigDict(frozen=True)

    kind: ClassVar[EntityKind]

    id: str


class User(Entity):
    """A member of a tenant; the actor of most decisions."""

    kind: ClassVar[EntityKind] = EntityKind.USER

    tenant_id: str
    name: str = ""
    is_admin: bool = False
    is_viewer: bool = False
    suspended_at: Optional[datetime] = None
    suspended_by_id: Optional[str] = None
    last_active_at: Optional[datetime] = None

    @property
    def is_suspended(self) -> bool:
        return self.suspended_at is not None

    @property
    def is_invited(self) -> bool:
        return self.last_active_at is None

    @property
    def role(self) -> UserRole:
        if self.is_admin:
            return UserRole.ADMIN
        if self.is_viewer:
            return UserRole.VIEWER
        return UserRole.MEMBER


class Team(Entity):
    """A tenant. Members have ``tenant_id == team.id``."""

    kind: ClassVar[EntityKind] = EntityKind.TEAM

    name: str = ""
    sharing: bool = True

    @property
    def tenant_id(self) -> str:
        return self.id


class DocumentTreeNode(BaseModel):
    """One node of a collection's nested document structure."""

    model_config = ConfigDict(frozen=True)

    id: str
    title: str = ""
    url: str = ""
    children: List[DocumentTreeNode] = Field(default_factory=list)


class Collection(Entity):
    """A group of documents with its own access settings."""

    kind: ClassVar[EntityKind] = EntityKind.COLLECTION

    tenant_id: str
    name: str = ""
    permission: Optional[CollectionPermission] = None
    memberships: Dict[str, CollectionPermission] = Field(default_factory=dict)
    sharing: bool = True
    deleted_at: Optional[datetime] = None
    document_structure: List[DocumentTreeNode] = Field(default_factory=list)
    team: Optional[Team] = None

    def membership_for(self, user_id: str) -> Optional[CollectionPermission]:
        """Permission granted to a specific user, if any."""
        return self.memberships.get(user_id)


class Document(Entity):
    """A document, optionally placed in a collection."""

    kind: ClassVar[EntityKind] = EntityKind.DOCUMENT

    tenant_id: str
    title: str = ""
    collection_id: Optional[str] = None
    collection: Optional[Collection] = None
    template: bool = False
    created_at: Optional[datetime] = None
    published_at: Optional[datetime] = None
    archived_at: Optional[datetime] = None
    deleted_at: Optional[datetime] = None

    @property
    def state(self) -> DocumentState:
        if self.deleted_at is not None:
            return DocumentState.DELETED
        if self.archived_at is not None:
            return DocumentState.ARCHIVED
        if self.published_at is not None:
            return DocumentState.PUBLISHED
        return DocumentState.DRAFT


class Revision(Entity):
    """A saved snapshot of a document."""

    kind: ClassVar[EntityKind] = EntityKind.REVISION

    tenant_id: str
    document_id: str
    document: Optional[Document] = None
    created_at: Optional[datetime] = None


# (engine, actor, resource) -> bool
Predicate = Callable[[Any, Any, Any], bool]


@dataclass(frozen=True)
class Rule:
    """A registered permission rule."""
    actor_kind: EntityKind
    resource_kind: EntityKind
    actions: FrozenSet[str]
    predicate: Predicate
    name: str


def kind_of(entity: Any) -> Optional[EntityKind]:
    """Return the explicit kind tag of an entity, or None for anything untagged."""
    return getattr(entity, "kind", None)
