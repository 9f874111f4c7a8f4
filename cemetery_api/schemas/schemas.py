"""Pydantic schemas for API request/response serialization."""

from pydantic import BaseModel, Field, field_validator
from typing import Optional, List, Dict, Any


HTTP_METHODS = {"GET", "POST", "PUT", "PATCH", "DELETE", "HEAD", "OPTIONS"}


# ---- Errors ----
class ErrorBody(BaseModel):
    code: str
    message: str
    details: List[Any] = []

class ErrorResponse(BaseModel):
    success: bool = False
    error: ErrorBody
    request_id: Optional[str] = None


AUTH_ERROR_RESPONSES: Dict[int, Dict[str, Any]] = {
    401: {"model": ErrorResponse, "description": "No authenticated actor"},
    403: {"model": ErrorResponse, "description": "Role does not permit this operation"},
}


# ---- Actor ----
class ActorOut(BaseModel):
    id: str
    email: Optional[str] = None
    name: Optional[str] = None
    role: Optional[str] = None
    effective_roles: List[str] = []


# ---- Permissions ----
class RolePermissionsOut(BaseModel):
    role: Optional[str] = None
    effective_roles: List[str] = []
    routes: List[str] = []
    resource_actions: List[str] = []

class PermissionCheckRequest(BaseModel):
    method: str = Field(..., min_length=1)
    path: str = Field(..., min_length=1, description="Registered route template, e.g. /gravestones/:id")

    @field_validator("method")
    @classmethod
    def method_must_be_http(cls, value: str) -> str:
        method = value.strip().upper()
        if method not in HTTP_METHODS:
            raise ValueError(f"Unsupported HTTP method '{value}'")
        return method

    @field_validator("path")
    @classmethod
    def path_must_be_absolute(cls, value: str) -> str:
        if not value.startswith("/"):
            raise ValueError("Route template must start with '/'")
        return value

class PermissionCheckResponse(BaseModel):
    key: str
    allowed: bool
    matched: bool
    required_roles: List[str]

class ResourceActionOut(BaseModel):
    resource: str
    action: str
    allowed: bool

class PermissionMatrixOut(BaseModel):
    routes: Dict[str, List[str]]
    resource_actions: Dict[str, List[str]]
    default: Dict[str, List[str]]
