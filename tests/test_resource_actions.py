from __future__ import annotations

import pytest

from cemetery_api.models.role import Role
from cemetery_api.services.permission_service import permission_service


@pytest.mark.parametrize(
    "role, resource, action, expected",
    [
        (Role.viewer, "gravestone", "read", True),
        (Role.viewer, "gravestone", "create", False),
        (Role.operator, "gravestone", "update", True),
        (Role.operator, "contractor", "transfer", False),
        (Role.manager, "contractor", "transfer", True),
        (Role.manager, "master", "create", False),
        (Role.admin, "master", "delete", True),
        (Role.manager, "collective-burial", "billing", True),
        (Role.manager, "staff", "create", False),
        ("admin", "system", "admin", True),
    ],
)
def test_check_resource_action(role, resource, action, expected):
    assert permission_service.check_resource_action(role, resource, action) is expected


@pytest.mark.parametrize("role", [Role.viewer, Role.operator, Role.manager, None, "ghost", "Admin", " admin "])
def test_unmapped_resource_action_denies_non_admin(role):
    assert not permission_service.check_resource_action(role, "crematorium", "schedule")


def test_unmapped_resource_action_allows_admin():
    assert permission_service.check_resource_action(Role.admin, "crematorium", "schedule")
    assert permission_service.check_resource_action("admin", "crematorium", "schedule")
