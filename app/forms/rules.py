"""Business rules applied after a form passed schema validation."""

from __future__ import annotations

from collections.abc import Mapping
from decimal import ROUND_HALF_UP
from decimal import Decimal
from typing import Any

from sqlalchemy.orm import Session

from app.db.repository.users import select_user_by_email
from app.forms.validator import Invalid

PASSWORD_MISMATCH_MESSAGE = "Les mots de passe ne correspondent pas."
DUPLICATE_EMAIL_MESSAGE = "Cet e-mail est déjà utilisé par un autre compte."

_CENTS = Decimal(100)


def check_password_match(data: Mapping[str, Any]) -> Invalid | None:
    """Reject registrations whose confirmation differs from the password."""
    if data["password"] != data["confirmPassword"]:
        return Invalid(field_errors={"confirmPassword": [PASSWORD_MISMATCH_MESSAGE]})
    return None


def check_email_available(session: Session, email: str) -> Invalid | None:
    """Reject registrations for an email that already has an account.

    Store failures propagate; an empty result is the normal outcome.
    """
    if select_user_by_email(session, email=email):
        return Invalid(field_errors={"email": [DUPLICATE_EMAIL_MESSAGE]})
    return None


def amount_to_cents(amount: Decimal) -> int:
    """Convert a validated dollar amount to integer cents, rounding half up."""
    return int((amount * _CENTS).quantize(Decimal(1), rounding=ROUND_HALF_UP))
