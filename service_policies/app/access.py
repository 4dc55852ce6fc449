"""
Request-layer helpers on top of the decision engine.
"""

from typing import Any, Dict

from shared.errors import AuthorizationError
from shared.logging import get_logger
from .policies.engine import PolicyEngine
from .policies.models import kind_of
from .policies.registry import action_name

logger = get_logger("policies.access")


def authorize(engine: PolicyEngine, actor: Any, action: Any, resource: Any) -> None:
    """
    Raise AuthorizationError unless ``actor`` may perform ``action``.

    PreconditionFault from a rule is not caught here; the request layer
    must answer it as an internal error.
    """
    if engine.can(actor, action, resource):
        return

    kind = kind_of(resource)
    details = {
        "action": action_name(action),
        "resource_kind": kind.value if kind is not None else None,
        "resource_id": getattr(resource, "id", None),
    }
    logger.info("Authorization denied", actor_id=getattr(actor, "id", None), **details)
    raise AuthorizationError(details=details)


def abilities(engine: PolicyEngine, actor: Any, resource: Any) -> Dict[str, bool]:
    """Map every governed action for the actor/resource pair to its decision."""
    actions = engine.registry.actions_for(kind_of(actor), kind_of(resource))
    return {action: engine.can(actor, action, resource) for action in actions}
