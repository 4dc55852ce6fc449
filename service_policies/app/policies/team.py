"""
Team (tenant) permission rules.
"""

from .models import Action, EntityKind, Team, User
from .registry import PolicyRegistry


def register_team_policies(registry: PolicyRegistry) -> None:
    """Register the team rule family."""

    @registry.allow(
        EntityKind.USER,
        [Action.CREATE_DOCUMENT, Action.CREATE_COLLECTION],
        EntityKind.TEAM,
    )
    def create_in_team(policy, user: User, team: Team) -> bool:
        if user.is_viewer or user.tenant_id != team.id:
            return False
        return True

    @registry.allow(EntityKind.USER, Action.READ, EntityKind.TEAM)
    def read_team(policy, user: User, team: Team) -> bool:
        return user.tenant_id == team.id

    @registry.allow(EntityKind.USER, Action.SHARE, EntityKind.TEAM)
    def share_team(policy, user: User, team: Team) -> bool:
        return team.sharing and user.tenant_id == team.id

    @registry.allow(EntityKind.USER, Action.UPDATE, EntityKind.TEAM)
    def update_team(policy, user: User, team: Team) -> bool:
        return user.is_admin and user.tenant_id == team.id
