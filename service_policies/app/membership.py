"""
Role and suspension transitions for tenant members.

The caller loads whatever counts these transitions depend on and persists
the returned user; nothing here performs I/O.
"""

from datetime import datetime, timezone
from typing import Optional

from shared.errors import ValidationError
from shared.logging import get_logger
from .policies.models import User, UserRole

logger = get_logger("policies.membership")


def promote(user: User) -> User:
    """Make a user an administrator."""
    return user.model_copy(update={"is_admin": True, "is_viewer": False})


def demote(user: User, to: UserRole, other_admin_count: int) -> User:
    """
    Demote a user to member or viewer.

    ``other_admin_count`` is the number of administrators in the user's
    tenant other than ``user``. A tenant must always keep at least one
    administrator, so demoting the last one is rejected.
    """
    try:
        to = UserRole(to)
    except ValueError:
        raise ValidationError(
            "Demotion target must be member or viewer",
            details={"to": str(to)}
        )
    if to == UserRole.ADMIN:
        raise ValidationError(
            "Demotion target must be member or viewer",
            details={"to": to.value}
        )

    if user.is_admin and other_admin_count < 1:
        logger.warning(
            "Rejected demotion of last administrator",
            user_id=user.id,
            tenant_id=user.tenant_id
        )
        raise ValidationError(
            "At least one admin is required",
            details={"user_id": user.id, "tenant_id": user.tenant_id}
        )

    return user.model_copy(update={
        "is_admin": False,
        "is_viewer": to == UserRole.VIEWER,
    })


def suspend(user: User, by: User, at: Optional[datetime] = None) -> User:
    """Suspend a user."""
    return user.model_copy(update={
        "suspended_at": at or datetime.now(timezone.utc),
        "suspended_by_id": by.id,
    })


def activate(user: User) -> User:
    """Lift a suspension."""
    return user.model_copy(update={"suspended_at": None, "suspended_by_id": None})
