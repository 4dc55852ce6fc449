"""
Policy service for the Folio access layer.

Wraps the decision engine for the request layer: logging is configured
once, the engine is built once, and errors are rendered with the status
code the caller should answer with.
"""

from typing import Any, Dict, Optional, Tuple

from shared.config import PolicyConfig, get_config
from shared.errors import FolioException, PreconditionFault
from shared.logging import clear_user_context, configure_logging, get_logger, set_user_context

from .access import abilities, authorize
from .bootstrap import build_policy_engine


class PolicyService:
    """Policy service implementation."""

    def __init__(self, config: Optional[PolicyConfig] = None):
        self.config = config or get_config()
        configure_logging(self.config.service_name, self.config.log_level)
        self.logger = get_logger(f"{self.config.service_name}.service")
        self.engine = build_policy_engine(self.config)

    def can(self, actor: Any, action: Any, resource: Any) -> bool:
        return self.engine.can(actor, action, resource)

    def cannot(self, actor: Any, action: Any, resource: Any) -> bool:
        return self.engine.cannot(actor, action, resource)

    def authorize(self, actor: Any, action: Any, resource: Any) -> None:
        """Authorize a request, binding the actor to the log context while it runs."""
        set_user_context(
            user_id=getattr(actor, "id", None),
            tenant_id=getattr(actor, "tenant_id", None)
        )
        try:
            authorize(self.engine, actor, action, resource)
        finally:
            clear_user_context()

    def abilities(self, actor: Any, resource: Any) -> Dict[str, bool]:
        return abilities(self.engine, actor, resource)

    def handle_error(self, exc: FolioException) -> Tuple[int, Dict[str, Any]]:
        """Render an error as (status code, response body)."""
        if isinstance(exc, PreconditionFault):
            self.logger.error(
                "Rule precondition not met by caller",
                code=exc.code,
                message=exc.message,
                details=exc.details
            )
        else:
            self.logger.info(
                "Request rejected",
                code=exc.code,
                message=exc.message
            )
        return exc.status_code, exc.to_response().model_dump()


def create_service(config: Optional[PolicyConfig] = None) -> PolicyService:
    """Create the policy service."""
    return PolicyService(config)
