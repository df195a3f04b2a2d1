"""
tests/conftest.py -- Shared test fixtures for the Minimal API.

This module provides:
  - make_db(): isolated named shared-memory SQLite DbContext
  - _patch_lifespan(): wires a test DbContext into app.state, bypassing real startup
  - api_client: TestClient plus seeded Adm/Editor accounts and their tokens

Design: Named shared-memory SQLite URIs (not plain :memory:) are required
because TestClient runs sync route handlers in a thread pool. Plain :memory:
DBs are per-connection and would present a blank schema to each worker thread.

The DEBUG env var must be set before any core/auth/api import so
get_settings() auto-generates SECRET_KEY instead of raising ValueError.
"""

from __future__ import annotations

import os
import uuid
from collections.abc import Generator
from contextlib import asynccontextmanager
from dataclasses import dataclass

# CRITICAL: Set DEBUG before any core/auth import so get_settings() can
# auto-generate SECRET_KEY in dev mode instead of raising ValueError.
os.environ.setdefault("DEBUG", "true")

import pytest
from fastapi.testclient import TestClient

from api.main import app
from auth.tokens import TokenService
from core.config import get_settings
from core.models import Administrator, Role
from db.context import DbContext

ADM_EMAIL = "adm@teste.com"
ADM_PASSWORD = "adm123"
EDITOR_EMAIL = "editor@teste.com"
EDITOR_PASSWORD = "editor123"


def make_db() -> DbContext:
    """Create a DbContext on a uniquely named shared-memory SQLite database."""
    name = f"test_minimalapi_{uuid.uuid4().hex}"
    return DbContext(f"sqlite:///file:{name}?mode=memory&cache=shared&uri=true")


def _patch_lifespan(db: DbContext, tokens: TokenService):
    """Return a lifespan that wires pre-created test collaborators into app.state."""

    @asynccontextmanager
    async def test_lifespan(app):
        app.state.settings = get_settings()
        app.state.db = db
        app.state.tokens = tokens
        yield

    return test_lifespan


@dataclass
class ApiHarness:
    client: TestClient
    db: DbContext
    tokens: TokenService
    adm_token: str
    editor_token: str

    @property
    def adm_headers(self) -> dict[str, str]:
        return {"Authorization": f"Bearer {self.adm_token}"}

    @property
    def editor_headers(self) -> dict[str, str]:
        return {"Authorization": f"Bearer {self.editor_token}"}


@pytest.fixture
def db() -> Generator[DbContext, None, None]:
    context = make_db()
    yield context
    context.close()


@pytest.fixture
def tokens() -> TokenService:
    return TokenService.from_settings(get_settings())


@pytest.fixture
def api_client(db: DbContext, tokens: TokenService) -> Generator[ApiHarness, None, None]:
    """Yield an ApiHarness over a fresh database holding one Adm and one Editor.

    The TestClient uses the real FastAPI app with a patched lifespan, so tests
    hit real route handlers and dependencies against an isolated database.
    """
    adm = Administrator(email=ADM_EMAIL, password=ADM_PASSWORD, role=Role.ADM)
    editor = Administrator(email=EDITOR_EMAIL, password=EDITOR_PASSWORD, role=Role.EDITOR)
    db.add_administrator(adm)
    db.add_administrator(editor)

    app.router.lifespan_context = _patch_lifespan(db, tokens)

    with TestClient(app, raise_server_exceptions=True) as client:
        yield ApiHarness(
            client=client,
            db=db,
            tokens=tokens,
            adm_token=tokens.issue(adm),
            editor_token=tokens.issue(editor),
        )
