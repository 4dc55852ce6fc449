"""
Shared error handling for the Folio access layer.

Every error carries a stable ``code`` and the HTTP ``status_code`` the
request layer should answer with. An authorization *denial* is never an
error at the decision layer; ``AuthorizationError`` only exists for the
request boundary that turns a ``False`` decision into a rejection.
"""

from typing import Dict, Any, Optional
from pydantic import BaseModel

from .logging import request_id_var


class ErrorResponse(BaseModel):
    """Standard error response format."""

    request_id: Optional[str] = None
    code: str
    message: str
    details: Dict[str, Any] = {}


class FolioException(Exception):
    """Base exception for Folio access layer services."""

    status_code = 500

    def __init__(self, code: str, message: str, details: Optional[Dict[str, Any]] = None):
        self.code = code
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def to_response(self) -> ErrorResponse:
        """Convert to error response."""
        return ErrorResponse(
            request_id=request_id_var.get(),
            code=self.code,
            message=self.message,
            details=self.details
        )


class AuthorizationError(FolioException):
    """The actor is not permitted to perform the action."""

    status_code = 403

    def __init__(self, message: str = "Authorization failed", details: Optional[Dict[str, Any]] = None):
        super().__init__("AUTHORIZATION_ERROR", message, details)


class ValidationError(FolioException):
    """Validation-related errors."""

    status_code = 400

    def __init__(self, message: str = "Validation failed", details: Optional[Dict[str, Any]] = None):
        super().__init__("VALIDATION_ERROR", message, details)


class PreconditionFault(FolioException):
    """
    A rule needed a relation the caller did not load.

    This is a defect in the calling layer, not a security decision, and
    must abort the request instead of being read as a denial.
    """

    status_code = 500

    def __init__(self, message: str = "Precondition failed", details: Optional[Dict[str, Any]] = None):
        super().__init__("PRECONDITION_FAULT", message, details)


class RegistryError(FolioException):
    """Rule registry misconfiguration detected at start-up."""

    status_code = 500

    def __init__(self, message: str = "Rule registry error", details: Optional[Dict[str, Any]] = None):
        super().__init__("REGISTRY_ERROR", message, details)


class RegistryFrozenError(RegistryError):
    """Registration attempted after the registry was frozen."""

    def __init__(self, details: Optional[Dict[str, Any]] = None):
        super().__init__(
            "Rule registry is frozen after bootstrap; no further rules may be registered",
            details
        )


class DuplicateRuleError(RegistryError):
    """A rule was registered for a triple that is already governed."""

    def __init__(self, actor_kind: str, resource_kind: str, action: str):
        super().__init__(
            f"Rule for ({actor_kind}, {resource_kind}, {action}) is already registered",
            {"actor_kind": actor_kind, "resource_kind": resource_kind, "action": action}
        )
