"""Store boundary for form mutations."""

from __future__ import annotations

from collections.abc import Callable
from enum import Enum
from typing import Any
import logging

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.schemas.submission import SubmissionResult

logger = logging.getLogger(__name__)


class Mutation(str, Enum):
    INSERT_USER = "insert-user"
    INSERT_INVOICE = "insert-invoice"
    UPDATE_INVOICE = "update-invoice"
    DELETE_INVOICE = "delete-invoice"


FAILURE_MESSAGES: dict[Mutation, str] = {
    Mutation.INSERT_USER: "Erreur de base de données : inscription impossible.",
    Mutation.INSERT_INVOICE: "Database Error: Failed to Create Invoice.",
    Mutation.UPDATE_INVOICE: "Database Error: Failed to Update Invoice.",
    Mutation.DELETE_INVOICE: "Database Error: Failed to Delete Invoice.",
}


def run_mutation(
    session: Session,
    mutation: Mutation,
    statement: Callable[[], Any],
) -> SubmissionResult | None:
    """Execute and commit one mutation statement.

    Store failures are rolled back, logged, and reported as the mutation's
    generic failure message; the cause never reaches the caller.
    """
    try:
        statement()
        session.commit()
    except SQLAlchemyError:
        session.rollback()
        logger.exception("Store error during %s", mutation.value, extra={"operation": mutation.value})
        return SubmissionResult(message=FAILURE_MESSAGES[mutation])
    return None
