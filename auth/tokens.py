"""
auth/tokens.py -- JWT issuance and verification.

python-jose with HS256. Tokens are signed with Settings.secret_key and carry
the administrator's email, role, and an expiry. Verification checks signature
and expiry only; there is no issuer or audience, no refresh and no revocation.
decode() returns None on any failure -- the dependency layer turns that into
a 401.

TokenService is built once at startup (see api/main.py lifespan) and read from
app.state by the dependencies.

Layer rule: no imports from api/, db/, or services/.
"""

from __future__ import annotations

import logging
from datetime import datetime, timedelta, timezone

from jose import JWTError, jwt

from auth.models import TokenIdentity
from core.config import Settings
from core.models import Administrator, Role

logger = logging.getLogger("minimalapi.auth")

ALGORITHM = "HS256"


class TokenService:
    """Issues and verifies signed access tokens.

    Usage:
        tokens = TokenService(secret_key, expire_seconds=3600)
        token = tokens.issue(administrator)
        identity = tokens.decode(token)  # TokenIdentity or None
    """

    def __init__(self, secret_key: str, expire_seconds: int = 86400) -> None:
        self._secret_key = secret_key
        self.expire_seconds = expire_seconds

    @classmethod
    def from_settings(cls, settings: Settings) -> "TokenService":
        return cls(settings.secret_key, settings.token_expire_seconds)

    def issue(self, administrator: Administrator) -> str:
        """Encode a signed JWT with the administrator's email and role claims."""
        expire = datetime.now(timezone.utc) + timedelta(seconds=self.expire_seconds)
        payload = {
            "email": administrator.email,
            "role": administrator.role.value,
            "exp": expire,
        }
        return jwt.encode(payload, self._secret_key, algorithm=ALGORITHM)

    def decode(self, token: str) -> TokenIdentity | None:
        """Verify a JWT and rebuild the identity. None on any failure.

        A token whose role claim is not a known Role is rejected like a bad
        signature.
        """
        try:
            payload = jwt.decode(token, self._secret_key, algorithms=[ALGORITHM])
        except JWTError as exc:
            logger.debug("Rejected token: %s", exc)
            return None
        email = payload.get("email")
        role = payload.get("role")
        if not email or role is None:
            return None
        try:
            return TokenIdentity(email=email, role=Role(role))
        except ValueError:
            return None
