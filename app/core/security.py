"""Password hashing helpers backed by bcrypt."""

from __future__ import annotations

import bcrypt

# bcrypt only reads the first 72 bytes; newer releases reject longer input.
_BCRYPT_MAX_BYTES = 72


def _secret(plaintext: str) -> bytes:
    return plaintext.encode("utf-8")[:_BCRYPT_MAX_BYTES]


def hash_password(plaintext: str, rounds: int) -> str:
    """Return a salted bcrypt hash of ``plaintext`` at the given cost factor."""
    return bcrypt.hashpw(_secret(plaintext), bcrypt.gensalt(rounds=rounds)).decode("utf-8")


def verify_password(plaintext: str, hashed: str) -> bool:
    """Check ``plaintext`` against a stored bcrypt hash."""
    try:
        return bcrypt.checkpw(_secret(plaintext), hashed.encode("utf-8"))
    except ValueError:
        # Stored value is not a bcrypt hash.
        return False
