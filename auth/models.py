"""
auth/models.py -- Identity carried by a verified access token.

Pattern: Data class (pure data container, zero logic). Mirrors core/models.py.

Layer rule: may import from core/ only.
"""

from __future__ import annotations

from dataclasses import dataclass

from core.models import Role


@dataclass(frozen=True)
class TokenIdentity:
    """Who a request is acting as, rebuilt from the JWT claims alone.

    No database lookup happens on authenticated requests: the token is
    trusted until it expires.
    """

    email: str
    role: Role
