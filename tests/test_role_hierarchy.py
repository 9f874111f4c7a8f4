from __future__ import annotations

import itertools

import pytest

from cemetery_api.core.hierarchy import role_hierarchy
from cemetery_api.models.role import Role


def test_expand_each_role():
    assert role_hierarchy.expand(Role.viewer) == {Role.viewer}
    assert role_hierarchy.expand(Role.operator) == {Role.viewer, Role.operator}
    assert role_hierarchy.expand(Role.manager) == {Role.viewer, Role.operator, Role.manager}
    assert role_hierarchy.expand(Role.admin) == set(Role)


def test_roles_are_ordered_by_privilege():
    assert role_hierarchy.roles() == (Role.viewer, Role.operator, Role.manager, Role.admin)


def test_expand_is_monotonic():
    for lower, higher in itertools.combinations(role_hierarchy.roles(), 2):
        assert role_hierarchy.expand(lower) <= role_hierarchy.expand(higher)
        assert role_hierarchy.expand(lower) != role_hierarchy.expand(higher)


def test_expand_accepts_exact_role_strings():
    assert role_hierarchy.expand("manager") == role_hierarchy.expand(Role.manager)
    assert role_hierarchy.expand("admin") == role_hierarchy.expand(Role.admin)


@pytest.mark.parametrize("value", ["Admin", " admin ", " ADMIN ", "Manager"])
def test_role_strings_must_match_exactly(value):
    assert role_hierarchy.expand(value) == frozenset()


@pytest.mark.parametrize("value", [None, "", "superuser", "STAFF", 3])
def test_unknown_role_expands_to_nothing(value):
    assert role_hierarchy.expand(value) == frozenset()


def test_is_at_least():
    assert role_hierarchy.is_at_least(Role.manager, Role.operator)
    assert not role_hierarchy.is_at_least(Role.operator, Role.manager)
    assert not role_hierarchy.is_at_least("nobody", Role.viewer)


def test_expanded_sets_are_immutable():
    with pytest.raises(AttributeError):
        role_hierarchy.expand(Role.viewer).add(Role.admin)


def test_sort_orders_by_privilege():
    assert role_hierarchy.sort({Role.admin, Role.viewer, Role.manager}) == [
        Role.viewer,
        Role.manager,
        Role.admin,
    ]
