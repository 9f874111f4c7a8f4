"""FastAPI main application entry point."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from cemetery_api.core.config import settings
from cemetery_api.core.middleware import request_id_of, setup_middleware
from cemetery_api.core.exceptions import CemeteryApiError, ValidationError
from cemetery_api.core.permission_matrix import API_PERMISSIONS
from cemetery_api.core.resource_actions import RESOURCE_ACTION_PERMISSIONS

from cemetery_api.api.auth import router as auth_router
from cemetery_api.api.permissions import router as permissions_router

# Configure logging
logging.basicConfig(
    level=settings.LOG_LEVEL or (logging.DEBUG if settings.DEBUG else logging.INFO),
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)
logger = logging.getLogger("cemetery_api")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup and shutdown events."""
    logger.info(
        "Starting %s (%d route rules, %d resource/action rules)",
        settings.APP_NAME,
        len(API_PERMISSIONS),
        len(RESOURCE_ACTION_PERMISSIONS),
    )
    yield
    logger.info("Shutting down %s", settings.APP_NAME)


def error_response(request: Request, exc: CemeteryApiError) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content={
            "success": False,
            "error": exc.to_dict(),
            "request_id": request_id_of(request),
        },
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Render errors in the ``{"success": false, "error": {...}}`` envelope."""

    @app.exception_handler(CemeteryApiError)
    async def cemetery_exception_handler(request: Request, exc: CemeteryApiError):
        return error_response(request, exc)

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        details = [
            {"field": ".".join(str(p) for p in err.get("loc", ())), "message": err.get("msg")}
            for err in exc.errors()
        ]
        return error_response(request, ValidationError("Request validation failed", details))


def create_app() -> FastAPI:
    app = FastAPI(
        title=settings.APP_NAME,
        description="Role-based access control for cemetery records",
        version="0.1.0",
        lifespan=lifespan,
        docs_url="/docs",
        redoc_url="/redoc",
    )

    # Middleware
    setup_middleware(app)
    register_exception_handlers(app)

    # Register routers
    app.include_router(auth_router, prefix=settings.API_PREFIX)
    app.include_router(permissions_router, prefix=settings.API_PREFIX)

    @app.get("/")
    async def root():
        return {
            "name": settings.APP_NAME,
            "version": "0.1.0",
            "docs": "/docs",
        }

    @app.get(f"{settings.API_PREFIX}/health")
    async def health():
        """Quick health check endpoint."""
        return {"status": "ok"}

    return app


app = create_app()
