"""
Shared fixtures for Policy Service tests.
"""

import pytest
from datetime import datetime, timezone

from shared.config import PolicyConfig
from service_policies.app.bootstrap import build_policy_engine
from service_policies.app.policies.models import (
    Collection, CollectionPermission, Document, DocumentTreeNode, Team, User
)

TENANT = "team-1"
OTHER_TENANT = "team-2"
PUBLISHED_AT = datetime(2024, 1, 15, 9, 30, tzinfo=timezone.utc)


@pytest.fixture
def engine():
    """Create a fully bootstrapped policy engine."""
    return build_policy_engine(PolicyConfig())


@pytest.fixture
def team():
    return Team(id=TENANT, name="Acme")


@pytest.fixture
def admin():
    return User(id="user-admin", tenant_id=TENANT, name="Ada", is_admin=True)


@pytest.fixture
def member():
    return User(id="user-member", tenant_id=TENANT, name="Max")


@pytest.fixture
def viewer():
    return User(id="user-viewer", tenant_id=TENANT, name="Vic", is_viewer=True)


@pytest.fixture
def outsider():
    """Administrator of a different tenant."""
    return User(id="user-outsider", tenant_id=OTHER_TENANT, name="Oz", is_admin=True)


@pytest.fixture
def structure():
    """doc-1 has a child doc-2; doc-3 is a leaf."""
    return [
        DocumentTreeNode(
            id="doc-1",
            title="Handbook",
            children=[DocumentTreeNode(id="doc-2", title="Onboarding")],
        ),
        DocumentTreeNode(id="doc-3", title="Changelog"),
    ]


@pytest.fixture
def collection(team, structure):
    return Collection(
        id="col-1",
        tenant_id=TENANT,
        name="Engineering",
        permission=CollectionPermission.READ_WRITE,
        document_structure=structure,
        team=team,
    )


@pytest.fixture
def make_document(collection):
    """Factory for documents in the default collection."""
    def _make(**overrides):
        fields = {
            "id": "doc-3",
            "tenant_id": TENANT,
            "title": "Changelog",
            "collection_id": collection.id,
            "collection": collection,
            "published_at": PUBLISHED_AT,
        }
        fields.update(overrides)
        return Document(**fields)
    return _make
