from __future__ import annotations

from typing import Callable, Optional

import pytest
from fastapi import APIRouter, Depends, FastAPI
from fastapi.testclient import TestClient

from cemetery_api.core.config import settings
from cemetery_api.core.security import check_api_permission, create_access_token, get_optional_actor
from cemetery_api.main import create_app
from cemetery_api.models.actor import Actor


def make_token(role: Optional[str], sub: str = "1", **claims) -> str:
    data = {"sub": sub, "email": f"user{sub}@example.com", "name": "Test User", **claims}
    if role is not None:
        data["role"] = role
    return create_access_token(data)


def auth_header(role: Optional[str], **claims) -> dict[str, str]:
    return {"Authorization": f"Bearer {make_token(role, **claims)}"}


def _records_router() -> APIRouter:
    """Stand-in business routes guarded by the route matrix."""
    router = APIRouter(dependencies=[Depends(check_api_permission)])

    @router.get("/gravestones")
    async def list_gravestones():
        return {"items": []}

    @router.get("/gravestones/{gravestone_id}")
    async def get_gravestone(gravestone_id: int):
        return {"id": gravestone_id}

    @router.delete("/gravestones/{gravestone_id}")
    async def delete_gravestone(gravestone_id: int):
        return {"deleted": gravestone_id}

    @router.post("/masters/{master_type}")
    async def create_master(master_type: str):
        return {"type": master_type}

    @router.post("/contractors/{contractor_id}/transfer")
    async def transfer_contractor(contractor_id: int):
        return {"id": contractor_id}

    @router.get("/histories/2024")
    async def histories_2024():
        return {"items": []}

    @router.post("/some/unmapped/route")
    async def unmapped():
        return {"ok": True}

    return router


@pytest.fixture
def app() -> FastAPI:
    application = create_app()
    application.include_router(_records_router(), prefix=settings.API_PREFIX)
    return application


@pytest.fixture
def client(app: FastAPI) -> TestClient:
    return TestClient(app)


@pytest.fixture
def as_role(app: FastAPI) -> Callable[[Optional[str]], None]:
    """Attach an actor with the given role to every request."""

    def _set(role: Optional[str]) -> None:
        actor = Actor(id="42", role=role, email="staff@example.com", name="Staff")
        app.dependency_overrides[get_optional_actor] = lambda: actor

    yield _set
    app.dependency_overrides.clear()
