"""Permission service — route and resource/action authorization decisions."""

from typing import Any, Dict, FrozenSet, Iterable, List, Mapping, Optional

from cemetery_api.core.exceptions import AuthenticationError, AuthorizationError
from cemetery_api.core.hierarchy import RoleHierarchy, RoleLike, role_hierarchy
from cemetery_api.core.paths import route_key
from cemetery_api.core.permission_matrix import API_PERMISSIONS, DEFAULT_REQUIRED_ROLES
from cemetery_api.core.resource_actions import (
    RESOURCE_ACTION_PERMISSIONS,
    resource_action_key,
)
from cemetery_api.models.actor import Actor
from cemetery_api.models.role import Role


class PermissionService:
    """Resolves role-based access against the static permission tables.

    Every method is a pure function of its arguments and the tables the
    service was built with.
    """

    def __init__(
        self,
        hierarchy: RoleHierarchy = role_hierarchy,
        api_permissions: Mapping[str, FrozenSet[Role]] = API_PERMISSIONS,
        resource_actions: Mapping[str, FrozenSet[Role]] = RESOURCE_ACTION_PERMISSIONS,
    ):
        self.hierarchy = hierarchy
        self.api_permissions = api_permissions
        self.resource_actions = resource_actions

    def resolve(self, method: str, path_pattern: str) -> Optional[FrozenSet[Role]]:
        """Return the roles allowed for a route, or None when no rule exists."""
        return self.api_permissions.get(route_key(method, path_pattern))

    def required_roles_for(self, method: str, template: str) -> FrozenSet[Role]:
        """Like :meth:`resolve`, falling back to admin-only for unmapped routes."""
        required = self.resolve(method, template)
        if required is None:
            return DEFAULT_REQUIRED_ROLES
        return required

    def has_permission(self, actor_role: RoleLike, required_roles: Iterable[Role]) -> bool:
        """True iff the expanded actor role intersects ``required_roles``.

        An empty requirement set is never satisfied.
        """
        effective = self.hierarchy.expand(actor_role)
        return any(Role.parse(role) in effective for role in required_roles)

    def check_permission(self, actor: Optional[Actor], required_roles: Iterable[Role]) -> Actor:
        """Return the actor if allowed.

        Raises:
            AuthenticationError: If no actor is attached.
            AuthorizationError: If the actor's role is insufficient.
        """
        if actor is None:
            raise AuthenticationError()
        required = frozenset(filter(None, (Role.parse(r) for r in required_roles)))
        if not self.has_permission(actor.role, required):
            raise AuthorizationError(required, actor.role)
        return actor

    def check_api_permission(self, actor: Optional[Actor], method: str, template: str) -> Actor:
        """Matrix-driven check for a registered route template."""
        if actor is None:
            raise AuthenticationError()
        return self.check_permission(actor, self.required_roles_for(method, template))

    def check_resource_action(self, role: RoleLike, resource: str, action: str) -> bool:
        """Resource/action check; unmapped pairs are admin-only."""
        required = self.resource_actions.get(resource_action_key(resource, action))
        if required is None:
            return Role.parse(role) is Role.admin
        return self.has_permission(role, required)

    def permissions_for_role(self, role: RoleLike) -> Dict[str, Any]:
        """List every route key and resource/action key the role may use."""
        parsed = Role.parse(role)
        return {
            "role": parsed.value if parsed else None,
            "effective_roles": self.role_names(self.hierarchy.expand(role)),
            "routes": sorted(
                key for key, roles in self.api_permissions.items()
                if self.has_permission(role, roles)
            ),
            "resource_actions": sorted(
                key for key, roles in self.resource_actions.items()
                if self.has_permission(role, roles)
            ),
        }

    def role_names(self, roles: Iterable[Role]) -> List[str]:
        return [r.value for r in self.hierarchy.sort(roles)]

    def export_matrix(self) -> Dict[str, Dict[str, List[str]]]:
        """Serialize both tables with roles in hierarchy order."""
        return {
            "routes": {
                key: self.role_names(roles)
                for key, roles in sorted(self.api_permissions.items())
            },
            "resource_actions": {
                key: self.role_names(roles)
                for key, roles in sorted(self.resource_actions.items())
            },
            "default": {"routes": self.role_names(DEFAULT_REQUIRED_ROLES)},
        }


permission_service = PermissionService()
