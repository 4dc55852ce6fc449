"""
Decision engine for the Policy Service.
"""

from typing import Any, Optional

from shared.logging import get_logger
from .models import kind_of
from .registry import PolicyRegistry, action_name


class PolicyEngine:
    """
    Decides whether an actor may perform an action on a resource.

    Rules are looked up by the explicit kind tags of the actor and the
    resource. An ungoverned triple is denied. Governing predicates run in
    registration order and the first one returning True permits the action.

    Predicates receive the engine itself so they can ask about a parent
    resource (document -> collection -> team). PreconditionFault raised by a
    predicate is never turned into a denial; it propagates to the caller.
    """

    def __init__(self, registry: PolicyRegistry, log_decisions: bool = False):
        self.logger = get_logger("policies.engine")
        self.registry = registry
        self.log_decisions = log_decisions

    def can(self, actor: Any, action: Any, resource: Any) -> bool:
        """Return True if ``actor`` may perform ``action`` on ``resource``."""
        predicates = self.registry.lookup(kind_of(actor), kind_of(resource), action)

        allowed = False
        for predicate in predicates:
            if predicate(self, actor, resource):
                allowed = True
                break

        if self.log_decisions:
            self.logger.debug(
                "Policy decision",
                actor_id=getattr(actor, "id", None),
                action=action_name(action),
                resource_kind=_kind_value(resource),
                resource_id=getattr(resource, "id", None),
                governed=bool(predicates),
                allowed=allowed
            )

        return allowed

    def cannot(self, actor: Any, action: Any, resource: Any) -> bool:
        """Logical negation of can()."""
        return not self.can(actor, action, resource)


def _kind_value(entity: Any) -> Optional[str]:
    kind = kind_of(entity)
    return kind.value if kind is not None else None
