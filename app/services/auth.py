"""Login flow delegating credential checks to the auth provider."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from app.auth.provider import CREDENTIALS_PROVIDER
from app.auth.provider import AuthProvider
from app.core.errors import CREDENTIALS_SIGNIN
from app.core.errors import AuthenticationError
from app.services.signals import FormSignals

INVALID_CREDENTIALS_MESSAGE = "Données incorrectes."
LOGIN_REDIRECT_PATH = "/dashboard"


def authenticate_service(
    provider: AuthProvider,
    form: Mapping[str, Any],
    signals: FormSignals,
) -> str | None:
    """Sign in with the submitted form.

    Rejected credentials return the login form message; any other
    authentication failure propagates.
    """
    try:
        provider.sign_in(CREDENTIALS_PROVIDER, dict(form))
    except AuthenticationError as exc:
        if exc.kind == CREDENTIALS_SIGNIN:
            return INVALID_CREDENTIALS_MESSAGE
        raise

    signals.navigate(LOGIN_REDIRECT_PATH)
    return None
