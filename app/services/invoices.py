"""Service helpers for invoice forms and listings."""

from __future__ import annotations

from collections.abc import Callable
from collections.abc import Mapping
from datetime import date
from datetime import datetime
from datetime import timezone
from typing import Any
from uuid import UUID
import math

from sqlalchemy.orm import Session

from app.core.config import get_settings
from app.core.errors import NotFoundError
from app.db.repository.customers import list_customers
from app.db.repository.invoices import count_filtered_invoices
from app.db.repository.invoices import delete_invoice
from app.db.repository.invoices import get_invoice
from app.db.repository.invoices import insert_invoice
from app.db.repository.invoices import list_filtered_invoices
from app.db.repository.invoices import update_invoice
from app.forms.rules import amount_to_cents
from app.forms.schema import get_schema
from app.forms.validator import Invalid
from app.forms.validator import validate_form
from app.schemas.invoice import Customer
from app.schemas.invoice import InvoiceForm
from app.schemas.invoice import InvoiceListItem
from app.schemas.invoice import InvoiceListResponse
from app.schemas.submission import SubmissionResult
from app.services.persistence import Mutation
from app.services.persistence import run_mutation
from app.services.signals import FormSignals

INVOICES_PATH = "/dashboard/invoices"
CREATE_FORM_MESSAGE = "Missing Fields. Failed to Create Invoice."
UPDATE_FORM_MESSAGE = "Missing Fields. Failed to update Invoice."
DELETED_MESSAGE = "Deleted Invoice."


def _utc_today() -> date:
    return datetime.now(timezone.utc).date()


def create_invoice_service(
    session: Session,
    form: Mapping[str, Any],
    signals: FormSignals,
    *,
    today_fn: Callable[[], date] = _utc_today,
) -> SubmissionResult | None:
    """Validate and store a new invoice dated today, then return to the listing."""
    outcome = validate_form(get_schema("invoice", "create"), form)
    if isinstance(outcome, Invalid):
        return SubmissionResult(errors=outcome.field_errors, message=CREATE_FORM_MESSAGE)
    data = outcome.data

    failure = run_mutation(
        session,
        Mutation.INSERT_INVOICE,
        lambda: insert_invoice(
            session,
            customer_id=data["customerId"],
            amount_cents=amount_to_cents(data["amount"]),
            status=data["status"],
            invoice_date=today_fn(),
        ),
    )
    if failure is not None:
        return failure

    signals.invalidate(INVOICES_PATH)
    signals.navigate(INVOICES_PATH)
    return None


def update_invoice_service(
    session: Session,
    invoice_id: str,
    form: Mapping[str, Any],
    signals: FormSignals,
) -> SubmissionResult | None:
    """Validate and apply invoice changes, then return to the listing.

    An id matching no invoice updates nothing and still counts as success.
    """
    outcome = validate_form(get_schema("invoice", "update"), form)
    if isinstance(outcome, Invalid):
        return SubmissionResult(errors=outcome.field_errors, message=UPDATE_FORM_MESSAGE)
    data = outcome.data

    failure = run_mutation(
        session,
        Mutation.UPDATE_INVOICE,
        lambda: update_invoice(
            session,
            invoice_id=invoice_id,
            customer_id=data["customerId"],
            amount_cents=amount_to_cents(data["amount"]),
            status=data["status"],
        ),
    )
    if failure is not None:
        return failure

    signals.invalidate(INVOICES_PATH)
    signals.navigate(INVOICES_PATH)
    return None


def delete_invoice_service(session: Session, invoice_id: str, signals: FormSignals) -> SubmissionResult:
    """Delete an invoice from the listing; deleting a missing id is a no-op."""
    failure = run_mutation(
        session,
        Mutation.DELETE_INVOICE,
        lambda: delete_invoice(session, invoice_id=invoice_id),
    )
    if failure is not None:
        return failure

    signals.invalidate(INVOICES_PATH)
    return SubmissionResult(message=DELETED_MESSAGE)


def list_invoices_service(
    session: Session,
    *,
    query: str = "",
    page: int = 1,
    per_page: int | None = None,
) -> InvoiceListResponse:
    """Return one page of the filtered invoices listing."""
    size = per_page or get_settings().items_per_page
    current = max(page, 1)
    rows = list_filtered_invoices(session, query=query, limit=size, offset=(current - 1) * size)
    total = count_filtered_invoices(session, query=query)
    return InvoiceListResponse(
        items=[InvoiceListItem(**row) for row in rows],
        page=current,
        total_pages=math.ceil(total / size),
    )


def get_invoice_form_service(session: Session, invoice_id: UUID) -> InvoiceForm:
    """Fetch an invoice for the edit form with its amount in dollars."""
    invoice = get_invoice(session, invoice_id)
    if invoice is None:
        raise NotFoundError(message="Invoice not found")
    return InvoiceForm(
        id=invoice.id,
        customer_id=invoice.customer_id,
        amount=invoice.amount / 100,
        status=invoice.status,
    )


def list_customers_service(session: Session) -> list[Customer]:
    """List customers for the invoice form select."""
    return [Customer.model_validate(customer) for customer in list_customers(session)]
