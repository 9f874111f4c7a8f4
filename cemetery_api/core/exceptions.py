"""Custom exception classes for the Cemetery Records API."""

from typing import Any, Iterable, Optional

from cemetery_api.models.role import Role


class CemeteryApiError(Exception):
    """Base exception for the Cemetery Records API."""

    code = "INTERNAL_ERROR"
    status_code = 500

    def __init__(self, message: str = "An error occurred", details: Optional[list] = None):
        self.message = message
        self.details = details or []
        super().__init__(self.message)

    def to_dict(self) -> dict[str, Any]:
        return {"code": self.code, "message": self.message, "details": list(self.details)}


class AuthenticationError(CemeteryApiError):
    """Raised when no authenticated actor is attached to the request."""

    code = "UNAUTHORIZED"
    status_code = 401

    def __init__(self, message: str = "Authentication required", details: Optional[list] = None):
        super().__init__(message, details)


class AuthorizationError(CemeteryApiError):
    """Raised when the actor's role does not cover the required roles."""

    code = "FORBIDDEN"
    status_code = 403

    def __init__(self, required_roles: Iterable[Role], actual_role: Optional[str]):
        self.required_roles = tuple(sorted(required_roles, key=lambda r: r.level))
        self.actual_role = actual_role
        required = ", ".join(r.value for r in self.required_roles) or "(none)"
        super().__init__(f"{required} vs {actual_role or '(none)'}")


class ValidationError(CemeteryApiError):
    """Raised when input validation fails."""

    code = "VALIDATION_ERROR"
    status_code = 400
