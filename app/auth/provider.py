"""Credentials authentication provider."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any
from typing import Protocol
import logging

from sqlalchemy.orm import Session

from app.core.errors import AuthenticationError
from app.core.errors import InvalidCredentialsError
from app.core.security import verify_password
from app.db.repository.users import select_user_by_email
from app.forms.schema import PASSWORD_MIN_LENGTH
from app.forms.schema import is_valid_email

logger = logging.getLogger(__name__)

CREDENTIALS_PROVIDER = "credentials"


class AuthProvider(Protocol):
    def sign_in(self, provider: str, credentials: Mapping[str, Any]) -> dict[str, Any]:
        ...


class CredentialsProvider:
    """Check an email/password pair against the stored bcrypt hash."""

    def __init__(self, session: Session) -> None:
        self._session = session

    def sign_in(self, provider: str, credentials: Mapping[str, Any]) -> dict[str, Any]:
        """Return the signed-in user without its password hash.

        Raises ``InvalidCredentialsError`` for any rejected pair and
        ``AuthenticationError`` for an unknown provider.
        """
        if provider != CREDENTIALS_PROVIDER:
            raise AuthenticationError("UnknownProvider", f"Unsupported provider: {provider}")

        email = str(credentials.get("email") or "")
        password = str(credentials.get("password") or "")
        if not is_valid_email(email) or len(password) < PASSWORD_MIN_LENGTH:
            raise InvalidCredentialsError("malformed credentials")

        rows = select_user_by_email(self._session, email=email)
        if not rows:
            raise InvalidCredentialsError("unknown user")

        user = rows[0]
        if not verify_password(password, user["password"]):
            raise InvalidCredentialsError("password mismatch")

        logger.info("User signed in")
        return {key: value for key, value in user.items() if key != "password"}
