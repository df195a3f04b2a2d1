"""
auth/dependencies.py -- FastAPI Depends() helpers for authentication.

Tokens arrive in the Authorization: Bearer <token> header. HTTPBearer with
auto_error=False only parses the header (and registers the "Bearer" scheme in
the OpenAPI document); every decision is made here.

get_current_identity() raises HTTP 401 if the request is not authenticated.
require_roles(*roles) wraps it and raises HTTP 403 if the role is not allowed.

Layer rule: no imports from api/, db/, or services/.
"""

from __future__ import annotations

from typing import Callable, Optional

from fastapi import Depends, HTTPException, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from auth.models import TokenIdentity
from auth.tokens import TokenService
from core.models import Role

_bearer = HTTPBearer(auto_error=False, description="JWT returned by POST /administradores/login")


def try_get_current_identity(
    request: Request,
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(_bearer),
) -> TokenIdentity | None:
    """Return the identity behind a valid Bearer token, or None. Never raises."""
    if credentials is None:
        return None
    tokens: TokenService = request.app.state.tokens
    return tokens.decode(credentials.credentials)


def get_current_identity(identity: TokenIdentity | None = Depends(try_get_current_identity)) -> TokenIdentity:
    """Require authentication. Raises HTTP 401 for a missing, invalid or expired token.

    Use as a FastAPI dependency:
        @router.get("/protected")
        def route(identity: TokenIdentity = Depends(get_current_identity)): ...
    """
    if identity is None:
        raise HTTPException(
            status_code=401,
            detail={"code": "unauthorized", "message": "Authentication required."},
            headers={"WWW-Authenticate": "Bearer"},
        )
    return identity


def require_roles(*roles: Role) -> Callable[..., TokenIdentity]:
    """Build a dependency that admits only the given roles.

    Raises HTTP 401 if unauthenticated, HTTP 403 if the role is not allowed.

        @router.post("/veiculos")
        def route(identity: TokenIdentity = Depends(require_roles(Role.ADM, Role.EDITOR))): ...
    """
    allowed = frozenset(roles)

    def dependency(identity: TokenIdentity = Depends(get_current_identity)) -> TokenIdentity:
        if identity.role not in allowed:
            raise HTTPException(
                status_code=403,
                detail={"code": "forbidden", "message": "Insufficient role for this resource."},
            )
        return identity

    return dependency


require_admin = require_roles(Role.ADM)
