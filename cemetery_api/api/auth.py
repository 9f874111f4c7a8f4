"""Auth API router — current actor and permission introspection."""

from fastapi import APIRouter, Depends

from cemetery_api.core.paths import route_key
from cemetery_api.core.security import check_api_permission
from cemetery_api.models.actor import Actor
from cemetery_api.schemas.schemas import (
    AUTH_ERROR_RESPONSES, ActorOut, RolePermissionsOut, PermissionCheckRequest,
    PermissionCheckResponse, ResourceActionOut,
)
from cemetery_api.services.permission_service import permission_service

router = APIRouter(prefix="/auth", tags=["auth"], responses=AUTH_ERROR_RESPONSES)


@router.get("/me", response_model=ActorOut)
async def get_me(actor: Actor = Depends(check_api_permission)):
    """Get the current actor."""
    return ActorOut(
        id=actor.id,
        email=actor.email,
        name=actor.name,
        role=actor.role,
        effective_roles=permission_service.role_names(
            permission_service.hierarchy.expand(actor.role)
        ),
    )


@router.get("/permissions", response_model=RolePermissionsOut)
async def get_my_permissions(actor: Actor = Depends(check_api_permission)):
    """List every route and resource/action the current role may use."""
    return permission_service.permissions_for_role(actor.role)


@router.post("/check-permission", response_model=PermissionCheckResponse)
async def check_permission(
    body: PermissionCheckRequest,
    actor: Actor = Depends(check_api_permission),
):
    """Evaluate the current role against a route template."""
    matched = permission_service.resolve(body.method, body.path) is not None
    required = permission_service.required_roles_for(body.method, body.path)
    return PermissionCheckResponse(
        key=route_key(body.method, body.path),
        allowed=permission_service.has_permission(actor.role, required),
        matched=matched,
        required_roles=permission_service.role_names(required),
    )


@router.get("/can/{resource}/{action}", response_model=ResourceActionOut)
async def can(
    resource: str,
    action: str,
    actor: Actor = Depends(check_api_permission),
):
    """Resource/action capability check for the current role."""
    return ResourceActionOut(
        resource=resource,
        action=action,
        allowed=permission_service.check_resource_action(actor.role, resource, action),
    )
