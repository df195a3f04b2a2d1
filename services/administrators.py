"""
services/administrators.py -- Administrator use cases over the persistence context.

Login returns Optional[Administrator]: None is the "no such credentials"
signal, not an error. Database failures propagate as exceptions, so the two
cases never collapse into each other.
"""

from __future__ import annotations

import logging
from dataclasses import replace
from typing import Optional

from auth.passwords import hash_password, verify_password
from core.models import Administrator, Role
from db.context import DbContext
from services.pagination import page_bounds

logger = logging.getLogger("minimalapi.services.administrators")


class AdministratorService:
    """Login lookup, creation, and paged listing of administrators.

    hash_passwords switches between the plaintext equality contract (default)
    and bcrypt storage/verification.
    """

    def __init__(self, db: DbContext, page_size: int = 10, hash_passwords: bool = False) -> None:
        self.db = db
        self.page_size = page_size
        self.hash_passwords = hash_passwords

    def login(self, email: str, password: str) -> Optional[Administrator]:
        """Return the administrator whose email and password both match, else None."""
        if not self.hash_passwords:
            return self.db.find_administrator(email, password)

        administrator = self.db.find_administrator_by_email(email)
        if administrator is None or not verify_password(password, administrator.password):
            return None
        return administrator

    def create(self, administrator: Administrator) -> Administrator:
        """Persist a new administrator and return it with its assigned id.

        Raises sqlalchemy.exc.IntegrityError if the email is already taken.
        """
        stored = administrator
        if self.hash_passwords:
            stored = replace(administrator, password=hash_password(administrator.password))
        new_id = self.db.add_administrator(stored)
        logger.info("Administrator %s created (id=%d, role=%s)", stored.email, new_id, stored.role.value)
        return replace(stored, id=new_id)

    def ensure_default(self, email: str, password: str, role: Role = Role.ADM) -> bool:
        """Seed a first administrator when the table is empty.

        Goes through create(), so the seed honours hash_passwords. Returns True
        only when a row was inserted.
        """
        if self.db.count_administrators() > 0:
            return False
        self.create(Administrator(email=email, password=password, role=role))
        logger.info("Default administrator %s created", email)
        return True

    def list(self, page: Optional[int] = None) -> list[Administrator]:
        offset, limit = page_bounds(page, self.page_size)
        return self.db.list_administrators(offset=offset, limit=limit)
