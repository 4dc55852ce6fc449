"""
Start-up wiring for the Policy Service.

Builds the rule registry once, registers every rule family, freezes it and
hands back an engine bound to it. There is no module-level registry; the
caller keeps the engine and passes it where decisions are needed.
"""

from typing import Optional

from shared.config import PolicyConfig, get_config
from shared.logging import get_logger
from .policies.collection import register_collection_policies
from .policies.document import register_document_policies
from .policies.engine import PolicyEngine
from .policies.registry import PolicyRegistry
from .policies.revision import register_revision_policies
from .policies.team import register_team_policies
from .policies.user import register_user_policies

logger = get_logger("policies.bootstrap")

POLICY_FAMILIES = (
    register_team_policies,
    register_collection_policies,
    register_document_policies,
    register_revision_policies,
    register_user_policies,
)


def build_registry(config: Optional[PolicyConfig] = None) -> PolicyRegistry:
    """Create and freeze a registry holding every rule family."""
    config = config or get_config()
    registry = PolicyRegistry(strict=config.strict_registry)
    for register in POLICY_FAMILIES:
        register(registry)
    registry.freeze()
    logger.info("Policy registry built", **registry.get_registry_stats())
    return registry


def build_policy_engine(config: Optional[PolicyConfig] = None) -> PolicyEngine:
    """Create a decision engine over a freshly built registry."""
    config = config or get_config()
    return PolicyEngine(build_registry(config), log_decisions=config.log_decisions)
