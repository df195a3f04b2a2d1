"""
auth/passwords.py -- bcrypt helpers for the optional hashed-password mode.

Only used when Settings.hash_passwords is enabled. The default mode stores and
compares passwords as plaintext, which is the historical contract of this API.

Using bcrypt directly rather than passlib[bcrypt]: passlib's wrap-bug detection
feeds bcrypt 4.x a password longer than 72 bytes, which it rejects.
"""

from __future__ import annotations

import bcrypt


def hash_password(plain: str) -> str:
    """Return a bcrypt hash of the given plaintext password.

    Passwords longer than 72 bytes are silently truncated by bcrypt.
    """
    return bcrypt.hashpw(plain.encode("utf-8"), bcrypt.gensalt()).decode("utf-8")


def verify_password(plain: str, hashed: str) -> bool:
    """Return True if the plaintext password matches the bcrypt hash.

    A stored value that is not a bcrypt hash (ValueError from bcrypt) counts
    as a mismatch.
    """
    try:
        return bcrypt.checkpw(plain.encode("utf-8"), hashed.encode("utf-8"))
    except ValueError:
        return False
