"""
Unit tests for the policy rule registry.
"""

import pytest
from structlog.testing import capture_logs

from shared.errors import DuplicateRuleError, RegistryFrozenError
from service_policies.app.policies.models import Action, EntityKind
from service_policies.app.policies.registry import PolicyRegistry, action_name


def allow_all(policy, actor, resource):
    return True


def deny_all(policy, actor, resource):
    return False


class TestPolicyRegistry:
    """Test cases for PolicyRegistry."""

    @pytest.fixture
    def registry(self):
        return PolicyRegistry()

    def test_register_returns_rule(self, registry):
        """Test registering a rule for several actions."""
        rule = registry.register(
            EntityKind.USER, EntityKind.DOCUMENT, [Action.READ, "download"], allow_all
        )

        assert rule.actor_kind == EntityKind.USER
        assert rule.resource_kind == EntityKind.DOCUMENT
        assert rule.actions == frozenset({"read", "download"})
        assert rule.name == "allow_all"
        assert registry.rules == (rule,)

    def test_register_single_action_string(self, registry):
        """Test a bare action name is not split into characters."""
        rule = registry.register(EntityKind.USER, EntityKind.TEAM, "update", allow_all)

        assert rule.actions == frozenset({"update"})

    def test_register_without_actions(self, registry):
        """Test a rule must govern something."""
        with pytest.raises(ValueError):
            registry.register(EntityKind.USER, EntityKind.TEAM, [], allow_all)

    def test_lookup_preserves_registration_order(self, registry):
        """Test predicates come back in the order they were registered."""
        registry.register(EntityKind.USER, EntityKind.DOCUMENT, "read", deny_all)
        registry.register(EntityKind.USER, EntityKind.DOCUMENT, ["read", "update"], allow_all)

        assert registry.lookup(EntityKind.USER, EntityKind.DOCUMENT, "read") == (deny_all, allow_all)
        assert registry.lookup(EntityKind.USER, EntityKind.DOCUMENT, "update") == (allow_all,)

    def test_lookup_accepts_action_members_and_names(self, registry):
        """Test Action members and plain strings address the same rules."""
        registry.register(EntityKind.USER, EntityKind.DOCUMENT, "pinToHome", allow_all)

        assert registry.lookup(EntityKind.USER, EntityKind.DOCUMENT, Action.PIN_TO_HOME) == (allow_all,)

    def test_lookup_ungoverned(self, registry):
        """Test an unknown triple yields nothing."""
        registry.register(EntityKind.USER, EntityKind.DOCUMENT, "read", allow_all)

        assert registry.lookup(EntityKind.USER, EntityKind.DOCUMENT, "update") == ()
        assert registry.lookup(EntityKind.USER, EntityKind.COLLECTION, "read") == ()
        assert registry.lookup(None, EntityKind.DOCUMENT, "read") == ()

    def test_allow_decorator(self, registry):
        """Test the decorator registers and returns the predicate."""
        @registry.allow(EntityKind.DOCUMENT, Action.RESTORE, EntityKind.REVISION)
        def restore(policy, document, revision):
            return True

        assert callable(restore)
        assert registry.lookup(EntityKind.DOCUMENT, EntityKind.REVISION, "restore") == (restore,)

    def test_duplicate_triple_warns(self, registry):
        """Test covering a governed triple again logs a warning."""
        registry.register(EntityKind.USER, EntityKind.DOCUMENT, "read", deny_all)

        with capture_logs() as logs:
            registry.register(EntityKind.USER, EntityKind.DOCUMENT, ["read", "update"], allow_all)

        warnings = [entry for entry in logs if entry["log_level"] == "warning"]
        assert len(warnings) == 1
        assert warnings[0]["action"] == "read"

    def test_duplicate_triple_strict(self):
        """Test strict registries reject duplicate coverage."""
        registry = PolicyRegistry(strict=True)
        registry.register(EntityKind.USER, EntityKind.DOCUMENT, "read", deny_all)

        with pytest.raises(DuplicateRuleError) as exc_info:
            registry.register(EntityKind.USER, EntityKind.DOCUMENT, "read", allow_all)

        assert exc_info.value.details["action"] == "read"
        assert registry.lookup(EntityKind.USER, EntityKind.DOCUMENT, "read") == (deny_all,)

    def test_freeze_blocks_registration(self, registry):
        """Test a frozen registry rejects new rules."""
        registry.register(EntityKind.USER, EntityKind.DOCUMENT, "read", allow_all)
        registry.freeze()

        assert registry.is_frozen is True
        with pytest.raises(RegistryFrozenError):
            registry.register(EntityKind.USER, EntityKind.DOCUMENT, "update", allow_all)
        assert registry.lookup(EntityKind.USER, EntityKind.DOCUMENT, "read") == (allow_all,)

    def test_frozen_rules_are_immutable(self, registry):
        """Test the rule list cannot be extended behind a frozen registry."""
        registry.register(EntityKind.USER, EntityKind.DOCUMENT, "read", allow_all)
        registry.freeze()

        assert isinstance(registry.rules, tuple)
        with pytest.raises(AttributeError):
            registry.rules.append(registry.rules[0])
        assert registry.get_registry_stats()["total_rules"] == 1

    def test_actions_for(self, registry):
        """Test governed actions are listed once in first-registration order."""
        registry.register(EntityKind.USER, EntityKind.DOCUMENT, ["read", "download"], allow_all)
        registry.register(EntityKind.USER, EntityKind.DOCUMENT, ["update", "read"], deny_all)

        assert registry.actions_for(EntityKind.USER, EntityKind.DOCUMENT) == ("read", "download", "update")
        assert registry.actions_for(EntityKind.USER, EntityKind.TEAM) == ()

    def test_get_registry_stats(self, registry):
        """Test registry statistics."""
        registry.register(EntityKind.USER, EntityKind.DOCUMENT, ["read", "download"], allow_all)
        registry.register(EntityKind.USER, EntityKind.TEAM, "read", allow_all)

        stats = registry.get_registry_stats()

        assert stats == {
            "total_rules": 2,
            "governed_triples": 3,
            "frozen": False,
            "kind_pairs": ["user:document", "user:team"],
        }

    def test_action_name(self):
        """Test action normalization."""
        assert action_name(Action.CREATE_CHILD_DOCUMENT) == "createChildDocument"
        assert action_name("archive") == "archive"
