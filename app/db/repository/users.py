"""Repository statements for user accounts."""

from __future__ import annotations

from typing import Any

from sqlalchemy import text
from sqlalchemy.orm import Session

_SELECT_USER_BY_EMAIL_SQL = text(
    """
    SELECT id, name, email, password
    FROM users
    WHERE email = :email
    """
)

_INSERT_USER_SQL = text(
    """
    INSERT INTO users (name, email, password)
    VALUES (:name, :email, :password)
    """
)


def _rows_as_dicts(result: Any) -> list[dict[str, Any]]:
    return [dict(row._mapping) for row in result]


def select_user_by_email(session: Session, *, email: str) -> list[dict[str, Any]]:
    """Return users registered with ``email`` (zero or one row)."""
    result = session.execute(_SELECT_USER_BY_EMAIL_SQL, {"email": email})
    return _rows_as_dicts(result)


def insert_user(session: Session, *, name: str, email: str, password_hash: str) -> None:
    """Insert a user row; the password must already be hashed."""
    session.execute(
        _INSERT_USER_SQL,
        {"name": name, "email": email, "password": password_hash},
    )
