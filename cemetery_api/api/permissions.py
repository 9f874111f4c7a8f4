"""Permissions API router."""

from fastapi import APIRouter, Depends

from cemetery_api.core.security import check_api_permission
from cemetery_api.models.actor import Actor
from cemetery_api.schemas.schemas import AUTH_ERROR_RESPONSES, PermissionMatrixOut
from cemetery_api.services.permission_service import permission_service

router = APIRouter(prefix="/permissions", tags=["permissions"], responses=AUTH_ERROR_RESPONSES)


@router.get("/matrix", response_model=PermissionMatrixOut)
async def get_matrix(actor: Actor = Depends(check_api_permission)):
    """Dump the route and resource/action permission tables (admin only)."""
    return permission_service.export_matrix()
