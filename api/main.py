"""
api/main.py -- FastAPI application entry point for the Minimal API.

Run with:      uvicorn asgi:app --reload
               python main.py --reload

Middleware stack (outermost to innermost):
  1. CORSMiddleware -- any origin by default (CORS_ALLOW_ORIGINS), any method, any header
  2. log_requests   -- one INFO line per request with status and latency

Wiring: the lifespan builds every long-lived collaborator exactly once
(Settings, DbContext, TokenService) and stores it on app.state. Route handlers
receive services through the providers in api/dependencies.py; nothing is
looked up from a global registry.
"""

from __future__ import annotations

import logging
import time
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI, HTTPException, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from api.models import ErrorDetail, ErrorResponse, HealthResponse, HomeResponse
from api.routes.administrators import router as administrators_router
from api.routes.vehicles import router as vehicles_router
from auth.tokens import TokenService
from core.config import get_settings
from db.context import DbContext
from services.administrators import AdministratorService

__version__ = "1.0.0"

# ---------------------------------------------------------------------------
# Logging
# ---------------------------------------------------------------------------

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s %(levelname)-5s %(name)s %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
)
logger = logging.getLogger("minimalapi.api")

# ---------------------------------------------------------------------------
# Lifespan
# ---------------------------------------------------------------------------


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Build the application's collaborators on startup, release them on shutdown.

    Startup order: settings, database (schema + optional seed account), token
    service. Tests replace this whole function through
    app.router.lifespan_context to wire in-memory databases.
    """
    settings = get_settings()
    app.state.settings = settings
    app.state.db = DbContext(settings.database_url)
    logger.info("Database ready")
    if settings.seed_default_admin:
        AdministratorService(app.state.db, hash_passwords=settings.hash_passwords).ensure_default(
            settings.default_admin_email, settings.default_admin_password
        )
    app.state.tokens = TokenService.from_settings(settings)

    yield

    app.state.db.close()
    logger.info("Minimal API shutdown complete")


# ---------------------------------------------------------------------------
# App instantiation
# ---------------------------------------------------------------------------

app = FastAPI(
    title="Minimal API",
    description="Administrators and vehicles with JWT, role-gated endpoints.",
    version=__version__,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=get_settings().cors_allow_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

# ---------------------------------------------------------------------------
# Request logging middleware
# ---------------------------------------------------------------------------


@app.middleware("http")
async def log_requests(request: Request, call_next):
    start = time.perf_counter()
    response = await call_next(request)
    ms = (time.perf_counter() - start) * 1000
    logger.info(
        "%s %s %d %.1fms %s",
        request.method,
        request.url.path,
        response.status_code,
        ms,
        request.client.host if request.client else "unknown",
    )
    return response


# ---------------------------------------------------------------------------
# Router registration
# ---------------------------------------------------------------------------

app.include_router(administrators_router, tags=["Administradores"])
app.include_router(vehicles_router, tags=["Veiculos"])


# ---------------------------------------------------------------------------
# Exception handlers
#
# All handlers return the same ErrorResponse envelope. The one exception is a
# rejected creation payload, which routes answer with ValidationErrors (400).
# ---------------------------------------------------------------------------


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Return 422 with structured error when request body or query params fail schema validation."""
    return JSONResponse(
        status_code=422,
        content=ErrorResponse(
            error=ErrorDetail(
                code="validation_error",
                message="Request validation failed.",
                detail=str(exc.errors()),
            )
        ).model_dump(),
    )


@app.exception_handler(HTTPException)
async def http_exception_handler(request: Request, exc: HTTPException) -> JSONResponse:
    """Return a structured error for all HTTP exceptions.

    When detail is already a structured dict, use it directly as the error
    field -- str(dict) produces a Python repr, not JSON. Headers such as
    WWW-Authenticate are carried over.
    """
    if isinstance(exc.detail, dict):
        content = {"error": exc.detail}
    else:
        content = ErrorResponse(
            error=ErrorDetail(
                code=f"http_{exc.status_code}",
                message=str(exc.detail),
            )
        ).model_dump()
    return JSONResponse(status_code=exc.status_code, content=content, headers=exc.headers)


@app.exception_handler(Exception)
async def generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Catch-all handler for unexpected server errors (database failures included).

    The traceback goes to the log only, never to the response body.
    """
    logger.exception("Unhandled exception on %s %s", request.method, request.url.path)
    return JSONResponse(
        status_code=500,
        content=ErrorResponse(
            error=ErrorDetail(
                code="internal_error",
                message="An unexpected error occurred.",
            )
        ).model_dump(),
    )


# ---------------------------------------------------------------------------
# Public endpoints
# ---------------------------------------------------------------------------


@app.get("/", response_model=HomeResponse, tags=["Home"])
async def home() -> HomeResponse:
    """Welcome payload pointing at the API documentation."""
    return HomeResponse()


@app.get("/health", response_model=HealthResponse, tags=["Health"])
async def health() -> HealthResponse:
    """Return API liveness and current version."""
    return HealthResponse(version=__version__)
