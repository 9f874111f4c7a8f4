"""Resource/action permission matrix for checks that are not HTTP routes
(for example, whether the UI should offer a delete button)."""

from types import MappingProxyType
from typing import FrozenSet, Mapping

from cemetery_api.core.permission_matrix import (
    ADMIN_ONLY,
    MANAGER_UP,
    OPERATOR_UP,
    VIEWER_UP,
)
from cemetery_api.models.role import Role

RESOURCE_ACTION_PERMISSIONS: Mapping[str, FrozenSet[Role]] = MappingProxyType({
    "gravestone:read": VIEWER_UP,
    "gravestone:create": OPERATOR_UP,
    "gravestone:update": OPERATOR_UP,
    "gravestone:delete": MANAGER_UP,

    "contractor:read": VIEWER_UP,
    "contractor:create": OPERATOR_UP,
    "contractor:update": OPERATOR_UP,
    "contractor:delete": MANAGER_UP,
    "contractor:transfer": MANAGER_UP,

    "master:read": VIEWER_UP,
    "master:create": ADMIN_ONLY,
    "master:update": ADMIN_ONLY,
    "master:delete": ADMIN_ONLY,

    "user:read": MANAGER_UP,
    "user:manage": ADMIN_ONLY,

    "staff:read": MANAGER_UP,
    "staff:create": ADMIN_ONLY,
    "staff:update": ADMIN_ONLY,
    "staff:delete": ADMIN_ONLY,

    "collective-burial:read": MANAGER_UP,
    "collective-burial:create": ADMIN_ONLY,
    "collective-burial:update": ADMIN_ONLY,
    "collective-burial:delete": ADMIN_ONLY,
    "collective-burial:billing": MANAGER_UP,

    "system:admin": ADMIN_ONLY,
})


def resource_action_key(resource: str, action: str) -> str:
    return f"{resource}:{action}"
