"""Models package."""

from cemetery_api.models.role import Role, ROLE_LEVELS
from cemetery_api.models.actor import Actor

__all__ = ["Role", "ROLE_LEVELS", "Actor"]
