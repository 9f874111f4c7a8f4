"""Route-level permission matrix.

Keys are ``"METHOD pattern"`` where the pattern is a normalized route
template (``*`` marks one dynamic segment) relative to the API prefix.
"""

from types import MappingProxyType
from typing import FrozenSet, Mapping

from cemetery_api.models.role import Role

VIEWER_UP: FrozenSet[Role] = frozenset({Role.viewer, Role.operator, Role.manager, Role.admin})
OPERATOR_UP: FrozenSet[Role] = frozenset({Role.operator, Role.manager, Role.admin})
MANAGER_UP: FrozenSet[Role] = frozenset({Role.manager, Role.admin})
ADMIN_ONLY: FrozenSet[Role] = frozenset({Role.admin})

# Used when no rule matches a route.
DEFAULT_REQUIRED_ROLES: FrozenSet[Role] = ADMIN_ONLY


API_PERMISSIONS: Mapping[str, FrozenSet[Role]] = MappingProxyType({
    # Auth
    "GET /auth/me": VIEWER_UP,
    "GET /auth/permissions": VIEWER_UP,
    "POST /auth/check-permission": VIEWER_UP,
    "GET /auth/can/*": VIEWER_UP,
    "GET /auth/can/*/*": VIEWER_UP,
    "PUT /auth/password": VIEWER_UP,
    "POST /auth/logout": VIEWER_UP,

    # Gravestones
    "GET /gravestones": VIEWER_UP,
    "GET /gravestones/*": VIEWER_UP,
    "POST /gravestones": OPERATOR_UP,
    "PUT /gravestones/*": OPERATOR_UP,
    "DELETE /gravestones/*": MANAGER_UP,

    # Plots
    "GET /plots": VIEWER_UP,
    "GET /plots/*": VIEWER_UP,
    "POST /plots": OPERATOR_UP,
    "PUT /plots/*": OPERATOR_UP,
    "DELETE /plots/*": MANAGER_UP,

    # Applicants
    "GET /applicants/*": VIEWER_UP,
    "POST /applicants": OPERATOR_UP,
    "PUT /applicants/*": OPERATOR_UP,
    "DELETE /applicants/*": MANAGER_UP,

    # Contractors
    "GET /contractors/*": VIEWER_UP,
    "POST /contractors": OPERATOR_UP,
    "PUT /contractors/*": OPERATOR_UP,
    "DELETE /contractors/*": MANAGER_UP,
    "POST /contractors/*/transfer": MANAGER_UP,

    # Usage and management fees
    "POST /usage-fees": OPERATOR_UP,
    "PUT /usage-fees/*": OPERATOR_UP,
    "DELETE /usage-fees/*": MANAGER_UP,
    "POST /management-fees": OPERATOR_UP,
    "PUT /management-fees/*": OPERATOR_UP,
    "DELETE /management-fees/*": MANAGER_UP,
    "POST /management-fees/calculate": OPERATOR_UP,

    # Billing
    "POST /billing-infos": OPERATOR_UP,
    "PUT /billing-infos/*": OPERATOR_UP,
    "DELETE /billing-infos/*": MANAGER_UP,
    "POST /billing-infos/generate": MANAGER_UP,

    # Family contacts
    "POST /family-contacts": OPERATOR_UP,
    "PUT /family-contacts/*": OPERATOR_UP,
    "DELETE /family-contacts/*": OPERATOR_UP,

    # Burials
    "GET /burials/search": VIEWER_UP,
    "POST /burials": OPERATOR_UP,
    "PUT /burials/*": OPERATOR_UP,
    "DELETE /burials/*": MANAGER_UP,

    # Constructions
    "POST /constructions": OPERATOR_UP,
    "PUT /constructions/*": OPERATOR_UP,
    "DELETE /constructions/*": MANAGER_UP,

    # History
    "GET /histories": VIEWER_UP,
    "GET /histories/*": VIEWER_UP,
    "POST /histories/*/restore": ADMIN_ONLY,

    # Reference data masters
    "GET /masters/*": VIEWER_UP,
    "POST /masters/*": ADMIN_ONLY,
    "PUT /masters/*": ADMIN_ONLY,
    "DELETE /masters/*": ADMIN_ONLY,

    # Users and roles
    "GET /users": MANAGER_UP,
    "GET /users/*": MANAGER_UP,
    "PUT /users/*/role": ADMIN_ONLY,
    "GET /roles": MANAGER_UP,
    "POST /roles": ADMIN_ONLY,
    "PUT /roles/*": ADMIN_ONLY,
    "DELETE /roles/*": ADMIN_ONLY,
    "GET /permissions/matrix": ADMIN_ONLY,
    "PUT /permissions/matrix": ADMIN_ONLY,

    # Batch operations
    "POST /import": ADMIN_ONLY,
    "GET /export": MANAGER_UP,
    "POST /reports": MANAGER_UP,
})
