"""Request context middleware and CORS setup."""

import logging
import time
import uuid
from typing import Optional

from fastapi import FastAPI, Request, Response
from fastapi.middleware.cors import CORSMiddleware
from starlette.middleware.base import BaseHTTPMiddleware

from cemetery_api.core.config import settings

logger = logging.getLogger("cemetery_api")

REQUEST_ID_HEADER = "X-Request-Id"


def request_id_of(request: Request) -> Optional[str]:
    """Request id assigned by :class:`RequestContextMiddleware`, if any."""
    return getattr(request.state, "request_id", None)


class RequestContextMiddleware(BaseHTTPMiddleware):
    """Tag each request with an id and log one line per response.

    The id is echoed in the ``X-Request-Id`` header and in error envelopes,
    so a 401/403 seen by a client can be matched to its log line. Paths in
    ``quiet_paths`` (health probes) are not logged.
    """

    def __init__(self, app, quiet_paths: frozenset = frozenset()):
        super().__init__(app)
        self.quiet_paths = quiet_paths

    async def dispatch(self, request: Request, call_next):
        request.state.request_id = request.headers.get(REQUEST_ID_HEADER) or uuid.uuid4().hex
        started = time.perf_counter()

        response: Response = await call_next(request)

        elapsed_ms = round((time.perf_counter() - started) * 1000, 2)
        response.headers[REQUEST_ID_HEADER] = request.state.request_id
        response.headers["X-Response-Time-Ms"] = str(elapsed_ms)

        if request.url.path not in self.quiet_paths:
            logger.info(
                "[%s] %s %s %s %sms",
                request.state.request_id,
                request.method,
                request.url.path,
                response.status_code,
                elapsed_ms,
            )
        return response


def setup_middleware(app: FastAPI) -> None:
    """Configure all middleware for the application."""
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=[REQUEST_ID_HEADER],
    )
    app.add_middleware(
        RequestContextMiddleware,
        quiet_paths=frozenset({f"{settings.API_PREFIX}/health"}),
    )
