"""Invoice form and listing routes."""

from __future__ import annotations

from uuid import UUID

from fastapi import APIRouter
from fastapi import Depends
from fastapi import Query
from sqlalchemy.orm import Session

from app.api.deps import form_response
from app.api.deps import get_request_signals
from app.api.deps import read_form
from app.db.base import get_db_session
from app.schemas.invoice import CustomerListResponse
from app.schemas.invoice import InvoiceForm
from app.schemas.invoice import InvoiceListResponse
from app.schemas.submission import SubmissionResult
from app.services.invoices import create_invoice_service
from app.services.invoices import delete_invoice_service
from app.services.invoices import get_invoice_form_service
from app.services.invoices import list_customers_service
from app.services.invoices import list_invoices_service
from app.services.invoices import update_invoice_service
from app.services.signals import RequestSignals

router = APIRouter(prefix="/dashboard", tags=["invoices"])


@router.get("/invoices", response_model=InvoiceListResponse)
def list_invoices_endpoint(
    query: str = "",
    page: int = Query(default=1, ge=1),
    session: Session = Depends(get_db_session),
) -> InvoiceListResponse:
    """List invoices matching ``query``, one page at a time."""
    return list_invoices_service(session, query=query, page=page)


@router.post("/invoices", response_model=SubmissionResult, response_model_exclude_none=True)
def create_invoice_endpoint(
    form: dict[str, str] = Depends(read_form),
    session: Session = Depends(get_db_session),
    signals: RequestSignals = Depends(get_request_signals),
):
    """Create an invoice; redirects to the listing on success."""
    result = create_invoice_service(session, form, signals)
    return form_response(result, signals)


@router.get("/invoices/{invoice_id}", response_model=InvoiceForm)
def get_invoice_endpoint(
    invoice_id: UUID,
    session: Session = Depends(get_db_session),
) -> InvoiceForm:
    """Get an invoice to prefill the edit form."""
    return get_invoice_form_service(session, invoice_id)


@router.post("/invoices/{invoice_id}/edit", response_model=SubmissionResult, response_model_exclude_none=True)
def update_invoice_endpoint(
    invoice_id: str,
    form: dict[str, str] = Depends(read_form),
    session: Session = Depends(get_db_session),
    signals: RequestSignals = Depends(get_request_signals),
):
    """Update an invoice; redirects to the listing on success."""
    result = update_invoice_service(session, invoice_id, form, signals)
    return form_response(result, signals)


@router.post("/invoices/{invoice_id}/delete", response_model=SubmissionResult, response_model_exclude_none=True)
def delete_invoice_endpoint(
    invoice_id: str,
    session: Session = Depends(get_db_session),
    signals: RequestSignals = Depends(get_request_signals),
):
    """Delete an invoice from the listing."""
    result = delete_invoice_service(session, invoice_id, signals)
    return form_response(result, signals)


@router.get("/customers", response_model=CustomerListResponse)
def list_customers_endpoint(
    session: Session = Depends(get_db_session),
) -> CustomerListResponse:
    """List customers for the invoice form select."""
    return CustomerListResponse(items=list_customers_service(session))
