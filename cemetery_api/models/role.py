"""Role enumeration for RBAC."""

import enum
from typing import Optional, Union


class Role(str, enum.Enum):
    """Staff role, ordered by privilege level."""

    viewer = "viewer"
    operator = "operator"
    manager = "manager"
    admin = "admin"

    @property
    def level(self) -> int:
        return ROLE_LEVELS[self]

    @classmethod
    def parse(cls, value: Union["Role", str, None]) -> Optional["Role"]:
        """Return the matching Role, or None for absent/unrecognized values."""
        if isinstance(value, Role):
            return value
        if not isinstance(value, str):
            return None
        try:
            return cls(value)
        except ValueError:
            return None


ROLE_LEVELS = {
    Role.viewer: 20,
    Role.operator: 40,
    Role.manager: 60,
    Role.admin: 80,
}
