"""Authenticated actor handed to the authorization layer."""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Actor:
    """Staff member resolved by the authentication layer.

    ``role`` is kept as the raw claim value; an unknown role simply grants
    nothing.
    """

    id: str
    role: Optional[str] = None
    email: Optional[str] = None
    name: Optional[str] = None
    is_active: bool = True
