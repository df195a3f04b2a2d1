"""
core/models.py -- Domain types for administrators and vehicles.

Pure data containers with zero logic. Persistence lives in db/context.py,
business rules in services/, and the HTTP contract in api/models.py.

Role is a closed enum. It is converted to and from its string value only at
the storage boundary (db/) and the JSON boundary (api/, auth/tokens.py).
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class Role(str, Enum):
    """Authorization tier attached to an administrator."""

    ADM = "Adm"
    EDITOR = "Editor"


# Year before which a vehicle is rejected as too old (inclusive lower bound).
MIN_VEHICLE_YEAR = 1950


@dataclass
class Administrator:
    """An account allowed to log in and manage records.

    id is None before the record is written to the database.
    password is whatever the store holds: the plaintext value, or a bcrypt
    hash when Settings.hash_passwords is enabled.
    """

    email: str
    password: str
    role: Role
    id: Optional[int] = None


@dataclass
class Vehicle:
    """A vehicle record. id is None before the record is written."""

    name: str
    brand: str
    year: int
    id: Optional[int] = None
