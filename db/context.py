"""
db/context.py -- SQLAlchemy Core persistence context for administrators and vehicles.

Pattern: Repository + Data Mapper. DbContext owns the engine and both tables;
_row_to_administrator / _row_to_vehicle are the mappers. Services and routes
never touch SQL directly.

Security:
  All queries use bound parameters. No f-strings in SQL.

Role values are stored as their string form ("Adm" / "Editor") and turned back
into core.models.Role by the mapper.

Layer rule: may import from core/ only.
"""

from __future__ import annotations

import logging
from typing import Optional

from sqlalchemy import Column, Integer, MetaData, String, Table, create_engine, event, func, select
from sqlalchemy.engine import Engine

from core.models import Administrator, Role, Vehicle

logger = logging.getLogger("minimalapi.db")

# ---------------------------------------------------------------------------
# Schema
# ---------------------------------------------------------------------------

_metadata = MetaData()

_administrators = Table(
    "administrators",
    _metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("email", String(255), nullable=False, unique=True),
    Column("password", String(255), nullable=False),
    Column("role", String(10), nullable=False),
)

_vehicles = Table(
    "vehicles",
    _metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("name", String(150), nullable=False),
    Column("brand", String(100), nullable=False),
    Column("year", Integer, nullable=False),
)


# ---------------------------------------------------------------------------
# WAL mode
# ---------------------------------------------------------------------------


def _set_wal_mode(dbapi_conn, connection_record) -> None:
    """Enable WAL journal mode so readers are not blocked during writes.

    Set per-connection because SQLite PRAGMAs are not inherited by new
    connections from the pool.
    """
    dbapi_conn.execute("PRAGMA journal_mode=WAL")


# ---------------------------------------------------------------------------
# Context
# ---------------------------------------------------------------------------


class DbContext:
    """Owns the database connection and exposes both record collections.

    Usage:
        db = DbContext("sqlite:///:memory:")
        db.add_vehicle(Vehicle(name="Fusca", brand="Volkswagen", year=1970))
        db.list_vehicles(offset=0, limit=10)
        db.close()

    Every method opens its own pooled connection, so one instance can be
    shared by concurrent request threads.
    """

    def __init__(self, db_url: str) -> None:
        connect_args: dict = {}
        if db_url.startswith("sqlite"):
            connect_args["check_same_thread"] = False
        self.engine: Engine = create_engine(db_url, connect_args=connect_args)
        if db_url.startswith("sqlite"):
            event.listen(self.engine, "connect", _set_wal_mode)
        _metadata.create_all(self.engine)
        logger.debug("Schema ready on %s", self.engine.url)

    # ------------------------------------------------------------------
    # Administrators
    # ------------------------------------------------------------------

    def add_administrator(self, administrator: Administrator) -> int:
        """Insert an administrator and return its assigned database ID.

        Raises sqlalchemy.exc.IntegrityError if the email already exists.
        """
        with self.engine.connect() as conn:
            result = conn.execute(
                _administrators.insert().values(
                    email=administrator.email,
                    password=administrator.password,
                    role=administrator.role.value,
                )
            )
            conn.commit()
            return result.inserted_primary_key[0]

    def find_administrator(self, email: str, password: str) -> Administrator | None:
        """Return the administrator whose email and stored password both match exactly.

        Comparison is case-sensitive. None means no row matched.
        """
        query = _administrators.select().where(
            _administrators.c.email == email,
            _administrators.c.password == password,
        )
        with self.engine.connect() as conn:
            row = conn.execute(query).fetchone()
        return _row_to_administrator(row) if row is not None else None

    def find_administrator_by_email(self, email: str) -> Administrator | None:
        query = _administrators.select().where(_administrators.c.email == email)
        with self.engine.connect() as conn:
            row = conn.execute(query).fetchone()
        return _row_to_administrator(row) if row is not None else None

    def list_administrators(self, offset: int = 0, limit: Optional[int] = None) -> list[Administrator]:
        """Return administrators ordered by id. limit=None returns every row."""
        query = _administrators.select().order_by(_administrators.c.id).offset(offset)
        if limit is not None:
            query = query.limit(limit)
        with self.engine.connect() as conn:
            rows = conn.execute(query).fetchall()
        return [_row_to_administrator(r) for r in rows]

    def count_administrators(self) -> int:
        with self.engine.connect() as conn:
            result = conn.execute(select(func.count()).select_from(_administrators)).scalar()
        return result or 0

    # ------------------------------------------------------------------
    # Vehicles
    # ------------------------------------------------------------------

    def add_vehicle(self, vehicle: Vehicle) -> int:
        """Insert a vehicle and return its assigned database ID."""
        with self.engine.connect() as conn:
            result = conn.execute(
                _vehicles.insert().values(
                    name=vehicle.name,
                    brand=vehicle.brand,
                    year=vehicle.year,
                )
            )
            conn.commit()
            return result.inserted_primary_key[0]

    def list_vehicles(self, offset: int = 0, limit: Optional[int] = None) -> list[Vehicle]:
        """Return vehicles ordered by id. limit=None returns every row."""
        query = _vehicles.select().order_by(_vehicles.c.id).offset(offset)
        if limit is not None:
            query = query.limit(limit)
        with self.engine.connect() as conn:
            rows = conn.execute(query).fetchall()
        return [_row_to_vehicle(r) for r in rows]

    def close(self) -> None:
        self.engine.dispose()


# ---------------------------------------------------------------------------
# Row mappers (Data Mapper pattern)
# ---------------------------------------------------------------------------


def _row_to_administrator(row) -> Administrator:
    return Administrator(
        id=row.id,
        email=row.email,
        password=row.password,
        role=Role(row.role),
    )


def _row_to_vehicle(row) -> Vehicle:
    return Vehicle(
        id=row.id,
        name=row.name,
        brand=row.brand,
        year=row.year,
    )
