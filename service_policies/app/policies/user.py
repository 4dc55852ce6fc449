"""
User permission rules.
"""

from .models import Action, EntityKind, User
from .registry import PolicyRegistry


def register_user_policies(registry: PolicyRegistry) -> None:
    """Register the user rule family."""

    @registry.allow(EntityKind.USER, Action.READ, EntityKind.USER)
    def read_user(policy, actor: User, user: User) -> bool:
        return actor.tenant_id == user.tenant_id

    @registry.allow(EntityKind.USER, Action.UPDATE, EntityKind.USER)
    def update_user(policy, actor: User, user: User) -> bool:
        if actor.id != user.id and not actor.is_admin:
            return False
        return actor.tenant_id == user.tenant_id

    @registry.allow(EntityKind.USER, Action.PROMOTE, EntityKind.USER)
    def promote_user(policy, actor: User, user: User) -> bool:
        if user.is_suspended or user.is_admin:
            return False
        return actor.is_admin and actor.tenant_id == user.tenant_id

    @registry.allow(EntityKind.USER, Action.DEMOTE, EntityKind.USER)
    def demote_user(policy, actor: User, user: User) -> bool:
        if user.is_suspended:
            return False
        return actor.is_admin and actor.tenant_id == user.tenant_id

    @registry.allow(EntityKind.USER, Action.SUSPEND, EntityKind.USER)
    def suspend_user(policy, actor: User, user: User) -> bool:
        if actor.id == user.id or user.is_suspended:
            return False
        return actor.is_admin and actor.tenant_id == user.tenant_id

    @registry.allow(EntityKind.USER, Action.ACTIVATE, EntityKind.USER)
    def activate_user(policy, actor: User, user: User) -> bool:
        if not user.is_suspended:
            return False
        return actor.is_admin and actor.tenant_id == user.tenant_id
