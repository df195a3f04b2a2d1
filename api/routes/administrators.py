"""
api/routes/administrators.py -- Login and administrator management endpoints.

Routes:
  POST /administradores/login   -- email + senha login; returns a JWT
  GET  /administradores         -- list administrators, ?pagina=N (Adm only)
  POST /administradores         -- create an administrator (Adm only)

Security:
  Login returns the same bare 401 for an unknown email and a wrong password.
  Cache-Control: no-store on login responses so tokens are not cached.
  Passwords are never serialized (AdministratorView has no password field).
"""

from __future__ import annotations

import logging
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query, Request, Response
from fastapi.responses import JSONResponse
from sqlalchemy.exc import IntegrityError

from api.dependencies import get_administrator_service
from api.models import (
    AdministratorCreate,
    AdministratorView,
    AuthenticatedAdministrator,
    ErrorResponse,
    LoginRequest,
    ValidationErrors,
)
from auth.dependencies import require_admin
from auth.tokens import TokenService
from core.models import Administrator
from core.validation import validate_administrator
from services.administrators import AdministratorService
from services.pagination import MAX_PAGE

logger = logging.getLogger("minimalapi.api.administrators")

# Auth policy:
# - POST /administradores/login: public -- the login endpoint must be unauthenticated
# - GET  /administradores:       requires role Adm (require_admin)
# - POST /administradores:       requires role Adm (require_admin)
router = APIRouter(prefix="/administradores")


@router.post(
    "/login",
    response_model=AuthenticatedAdministrator,
    responses={401: {"description": "Invalid email or password"}},
)
def login(
    request: Request,
    body: LoginRequest,
    service: AdministratorService = Depends(get_administrator_service),
) -> Response:
    """Check the credentials and issue a signed token carrying email and role."""
    administrator = service.login(body.email or "", body.password or "")
    if administrator is None:
        logger.warning("Failed login for %s", body.email)
        return Response(status_code=401, headers={"Cache-Control": "no-store"})

    tokens: TokenService = request.app.state.tokens
    payload = AuthenticatedAdministrator(
        email=administrator.email,
        role=administrator.role,
        token=tokens.issue(administrator),
    )
    logger.info("Administrator %s logged in", administrator.email)
    return JSONResponse(
        status_code=200,
        content=payload.model_dump(mode="json", by_alias=True),
        headers={"Cache-Control": "no-store"},
    )


@router.get("", response_model=list[AdministratorView], dependencies=[Depends(require_admin)])
def list_administrators(
    pagina: Optional[int] = Query(
        default=None, ge=1, le=MAX_PAGE, description="1-based page number; omit for all rows"
    ),
    service: AdministratorService = Depends(get_administrator_service),
) -> list[AdministratorView]:
    """List administrators without their passwords."""
    return [AdministratorView.from_domain(a) for a in service.list(pagina)]


@router.post(
    "",
    response_model=AdministratorView,
    status_code=201,
    dependencies=[Depends(require_admin)],
    responses={400: {"model": ValidationErrors}, 409: {"model": ErrorResponse}},
)
def create_administrator(
    body: AdministratorCreate,
    response: Response,
    service: AdministratorService = Depends(get_administrator_service),
):
    """Validate and store a new administrator; 201 with a Location header."""
    messages = validate_administrator(body.email, body.password, body.role)
    if messages:
        return JSONResponse(status_code=400, content=ValidationErrors(messages=messages).model_dump(by_alias=True))

    try:
        created = service.create(Administrator(email=body.email, password=body.password, role=body.role))
    except IntegrityError as exc:
        raise HTTPException(
            status_code=409,
            detail={"code": "conflict", "message": "An administrator with that email already exists."},
        ) from exc

    response.headers["Location"] = f"/administrador/{created.id}"
    return AdministratorView.from_domain(created)
