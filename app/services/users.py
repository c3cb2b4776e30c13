"""Registration flow for new dashboard accounts."""

from __future__ import annotations

from collections.abc import Callable
from collections.abc import Mapping
from typing import Any
import logging

from sqlalchemy.orm import Session

from app.core.config import get_settings
from app.core.security import hash_password
from app.db.repository.users import insert_user
from app.forms.rules import check_email_available
from app.forms.rules import check_password_match
from app.forms.schema import get_schema
from app.forms.validator import Invalid
from app.forms.validator import validate_form
from app.schemas.submission import SubmissionResult
from app.services.persistence import Mutation
from app.services.persistence import run_mutation
from app.services.signals import FormSignals

logger = logging.getLogger(__name__)

REGISTER_FORM_MESSAGE = "Veuillez vérifier vos saisies."
DASHBOARD_PATH = "/dashboard"


def _rejected(outcome: Invalid) -> SubmissionResult:
    return SubmissionResult(errors=outcome.field_errors, message=REGISTER_FORM_MESSAGE)


def register_user_service(
    session: Session,
    form: Mapping[str, Any],
    signals: FormSignals,
    *,
    hash_fn: Callable[[str, int], str] = hash_password,
    hash_rounds: int | None = None,
) -> SubmissionResult | None:
    """Validate, check and store a new user, then navigate to the dashboard.

    Returns the form state to re-render, or ``None`` once the user was stored
    and the navigation signal was sent.
    """
    outcome = validate_form(get_schema("user", "create"), form)
    if isinstance(outcome, Invalid):
        return _rejected(outcome)
    data = outcome.data

    mismatch = check_password_match(data)
    if mismatch is not None:
        return _rejected(mismatch)

    taken = check_email_available(session, data["email"])
    if taken is not None:
        logger.info("Registration rejected for an email already in use")
        return _rejected(taken)

    rounds = hash_rounds if hash_rounds is not None else get_settings().password_hash_rounds
    password_hash = hash_fn(data["password"], rounds)

    failure = run_mutation(
        session,
        Mutation.INSERT_USER,
        lambda: insert_user(session, name=data["name"], email=data["email"], password_hash=password_hash),
    )
    if failure is not None:
        return failure

    signals.invalidate(DASHBOARD_PATH)
    signals.navigate(DASHBOARD_PATH)
    return None
