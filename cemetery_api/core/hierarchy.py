"""Role hierarchy: higher roles include every role beneath them."""

from types import MappingProxyType
from typing import FrozenSet, Iterable, List, Mapping, Tuple, Union

from cemetery_api.models.role import Role

RoleLike = Union[Role, str, None]


def _build_hierarchy() -> Mapping[Role, FrozenSet[Role]]:
    ordered = sorted(Role, key=lambda r: r.level)
    return MappingProxyType({
        role: frozenset(ordered[: index + 1])
        for index, role in enumerate(ordered)
    })


class RoleHierarchy:
    """Linear role hierarchy built once at import time."""

    def __init__(self, table: Mapping[Role, FrozenSet[Role]]):
        self._table = table

    def expand(self, role: RoleLike) -> FrozenSet[Role]:
        """Return the role plus every role below it.

        Absent or unrecognized roles expand to the empty set.
        """
        parsed = Role.parse(role)
        if parsed is None:
            return frozenset()
        return self._table.get(parsed, frozenset())

    def roles(self) -> Tuple[Role, ...]:
        """All roles in ascending privilege order."""
        return tuple(sorted(self._table, key=lambda r: r.level))

    def is_at_least(self, role: RoleLike, minimum: Role) -> bool:
        return minimum in self.expand(role)

    def sort(self, roles: Iterable[Role]) -> List[Role]:
        """Order a role collection by privilege, lowest first."""
        return sorted(roles, key=lambda r: r.level)


ROLE_HIERARCHY = _build_hierarchy()

role_hierarchy = RoleHierarchy(ROLE_HIERARCHY)
