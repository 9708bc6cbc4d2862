"""Password hashing utilities using bcrypt.

Uses the ``bcrypt`` library directly (>=4.0). The cost factor comes from
settings.BCRYPT_ROUNDS so tests can drop it to the minimum (4).
"""

import bcrypt

from config.settings import settings


def hash_password(plain: str) -> str:
    """Hash a plain-text password with bcrypt. Returns a utf-8 hash string."""
    salt = bcrypt.gensalt(rounds=settings.BCRYPT_ROUNDS)
    hashed_bytes: bytes = bcrypt.hashpw(plain.encode("utf-8"), salt)
    return hashed_bytes.decode("utf-8")


def verify_password(plain: str, hashed: str) -> bool:
    """Verify a plain-text password against a bcrypt hash."""
    return bcrypt.checkpw(plain.encode("utf-8"), hashed.encode("utf-8"))
