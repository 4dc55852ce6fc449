"""
Precondition guard for rule predicates.
"""

from typing import Any

from shared.errors import PreconditionFault
from shared.logging import get_logger

logger = get_logger("policies.guard")


def require(condition: Any, message: str) -> None:
    """Raise PreconditionFault unless ``condition`` holds."""
    if not condition:
        logger.error("Precondition fault", message=message)
        raise PreconditionFault(message)
