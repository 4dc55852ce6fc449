"""
Rule registry for the Policy Service.

Rules are keyed by (actor kind, resource kind, action). Registration order
is the only form of priority, and several rules governing the same triple
are OR-combined by the engine. The registry is populated once during
bootstrap and then frozen.
"""

from enum import Enum
from typing import Any, Callable, Dict, Iterable, List, Optional, Tuple, Union

from shared.errors import DuplicateRuleError, RegistryFrozenError
from shared.logging import get_logger
from .models import EntityKind, Predicate, Rule

ActionNames = Union[str, Iterable[str]]
RuleKey = Tuple[EntityKind, EntityKind, str]


def action_name(action: Any) -> str:
    """Normalize an action (plain string or Action member) to its name."""
    if isinstance(action, Enum):
        return str(action.value)
    return str(action)


def _action_set(actions: ActionNames) -> Tuple[str, ...]:
    if isinstance(actions, (str, Enum)):
        actions = [actions]
    names: List[str] = []
    for action in actions:
        name = action_name(action)
        if name not in names:
            names.append(name)
    if not names:
        raise ValueError("A rule must govern at least one action")
    return tuple(names)


class PolicyRegistry:
    """Registry of permission rules."""

    def __init__(self, strict: bool = False):
        self.logger = get_logger("policies.registry")
        self.strict = strict
        self.rules: Tuple[Rule, ...] = ()
        self._index: Dict[RuleKey, Tuple[Predicate, ...]] = {}
        self._actions: Dict[Tuple[EntityKind, EntityKind], Tuple[str, ...]] = {}
        self._frozen = False

    @property
    def is_frozen(self) -> bool:
        return self._frozen

    def register(
        self,
        actor_kind: EntityKind,
        resource_kind: EntityKind,
        actions: ActionNames,
        predicate: Predicate,
        name: Optional[str] = None,
    ) -> Rule:
        """Add a rule governing ``actions`` for the given kind pair."""
        actor_kind = EntityKind(actor_kind)
        resource_kind = EntityKind(resource_kind)
        if self._frozen:
            raise RegistryFrozenError(
                {"actor_kind": actor_kind.value, "resource_kind": resource_kind.value}
            )

        names = _action_set(actions)

        for action in names:
            key = (actor_kind, resource_kind, action)
            if key in self._index:
                if self.strict:
                    raise DuplicateRuleError(actor_kind.value, resource_kind.value, action)
                self.logger.warning(
                    "Triple already governed, rules will be OR-combined",
                    actor_kind=actor_kind.value,
                    resource_kind=resource_kind.value,
                    action=action
                )

        rule = Rule(
            actor_kind=actor_kind,
            resource_kind=resource_kind,
            actions=frozenset(names),
            predicate=predicate,
            name=name or getattr(predicate, "__name__", "rule"),
        )
        self.rules = self.rules + (rule,)

        pair = (actor_kind, resource_kind)
        known = self._actions.get(pair, ())
        for action in names:
            key = (actor_kind, resource_kind, action)
            self._index[key] = self._index.get(key, ()) + (predicate,)
            if action not in known:
                known = known + (action,)
        self._actions[pair] = known

        self.logger.debug(
            "Rule registered",
            rule=rule.name,
            actor_kind=actor_kind.value,
            resource_kind=resource_kind.value,
            actions=list(names)
        )
        return rule

    def allow(
        self,
        actor_kind: EntityKind,
        actions: ActionNames,
        resource_kind: EntityKind,
    ) -> Callable[[Predicate], Predicate]:
        """Decorator form of register()."""
        def decorator(predicate: Predicate) -> Predicate:
            self.register(actor_kind, resource_kind, actions, predicate)
            return predicate
        return decorator

    def lookup(self, actor_kind: Any, resource_kind: Any, action: Any) -> Tuple[Predicate, ...]:
        """Predicates governing a triple, in registration order."""
        return self._index.get((actor_kind, resource_kind, action_name(action)), ())

    def actions_for(self, actor_kind: Any, resource_kind: Any) -> Tuple[str, ...]:
        """Action names governed for a kind pair, in first-registration order."""
        return self._actions.get((actor_kind, resource_kind), ())

    def freeze(self) -> None:
        """Make the registry read-only."""
        if not self._frozen:
            self._frozen = True
            self.logger.info(
                "Rule registry frozen",
                total_rules=len(self.rules),
                governed_triples=len(self._index)
            )

    def get_registry_stats(self) -> Dict[str, Any]:
        """Get registry statistics."""
        return {
            "total_rules": len(self.rules),
            "governed_triples": len(self._index),
            "frozen": self._frozen,
            "kind_pairs": sorted(
                f"{actor.value}:{resource.value}" for actor, resource in self._actions
            ),
        }
