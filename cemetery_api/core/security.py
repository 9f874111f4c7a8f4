"""JWT actor extraction and RBAC authorization dependencies."""

from datetime import datetime, timedelta, timezone
from typing import Iterable, Optional

from fastapi import Depends, Request
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from jose import JWTError, jwt

from cemetery_api.core.config import settings
from cemetery_api.core.exceptions import AuthenticationError
from cemetery_api.core.paths import strip_prefix
from cemetery_api.models.actor import Actor
from cemetery_api.models.role import Role
from cemetery_api.services.permission_service import permission_service

# JWT bearer scheme
security_scheme = HTTPBearer(auto_error=False)


def create_access_token(data: dict, expires_delta: Optional[timedelta] = None) -> str:
    """Create a JWT access token (local tooling and tests only)."""
    to_encode = data.copy()
    expire = datetime.now(timezone.utc) + (expires_delta or timedelta(minutes=60))
    to_encode.update({"exp": expire, "type": "access"})
    return jwt.encode(to_encode, settings.JWT_SECRET, algorithm=settings.JWT_ALGORITHM)


def decode_token(token: str) -> dict:
    """Decode and validate a JWT token."""
    try:
        return jwt.decode(token, settings.JWT_SECRET, algorithms=[settings.JWT_ALGORITHM])
    except JWTError:
        raise AuthenticationError("Invalid or expired token")


_FALSE_STRINGS = {"false", "0", "no", "off"}


def _claim_is_active(value) -> bool:
    """Read the ``is_active`` claim; a missing claim means active."""
    if value is None:
        return True
    if isinstance(value, str):
        return value.strip().lower() not in _FALSE_STRINGS
    return bool(value)


def actor_from_claims(payload: dict) -> Actor:
    """Build an Actor from token claims."""
    sub = payload.get("sub")
    if sub is None or str(sub) == "":
        raise AuthenticationError("Invalid token payload")
    role = payload.get(settings.JWT_ROLE_CLAIM)
    return Actor(
        id=str(sub),
        role=role if isinstance(role, str) else None,
        email=payload.get("email"),
        name=payload.get("name"),
        is_active=_claim_is_active(payload.get("is_active")),
    )


async def get_optional_actor(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security_scheme),
) -> Optional[Actor]:
    """Actor for the bearer token, or None when the request carries no token."""
    if credentials is None or not credentials.credentials:
        return None
    actor = actor_from_claims(decode_token(credentials.credentials))
    if not actor.is_active:
        raise AuthenticationError("Account is deactivated")
    return actor


def route_template(request: Request) -> str:
    """Registered template of the matched route, relative to the API prefix.

    Falls back to the raw path only when the router did not expose a route.
    """
    route = request.scope.get("route")
    template = getattr(route, "path", None) or request.url.path
    return strip_prefix(template, settings.API_PREFIX)


class RequirePermission:
    """Dependency that checks the actor's role against a fixed role set."""

    def __init__(self, required_roles: Iterable[Role]):
        self.required_roles = frozenset(required_roles)

    async def __call__(self, actor: Optional[Actor] = Depends(get_optional_actor)) -> Actor:
        return permission_service.check_permission(actor, self.required_roles)


class CheckApiPermission:
    """Dependency that looks the current route up in the permission matrix."""

    async def __call__(
        self,
        request: Request,
        actor: Optional[Actor] = Depends(get_optional_actor),
    ) -> Actor:
        return permission_service.check_api_permission(
            actor, request.method, route_template(request)
        )


# Convenience dependencies
require_viewer = RequirePermission([Role.viewer])
require_operator = RequirePermission([Role.operator])
require_manager = RequirePermission([Role.manager])
require_admin = RequirePermission([Role.admin])
check_api_permission = CheckApiPermission()
