"""Unit tests for invoice submissions and listing helpers."""

from __future__ import annotations

from datetime import date
from types import SimpleNamespace
import uuid

import pytest
from sqlalchemy.dialects import postgresql

from app.core.errors import NotFoundError
from app.db.models.invoice import InvoiceStatusEnum
from app.db.repository.invoices import count_filtered_invoices
from app.db.repository.invoices import list_filtered_invoices
from app.services import invoices as invoice_services
from tests.stubs import ResultStub
from tests.stubs import SessionStub
from tests.stubs import SignalsStub

CUSTOMER_ID = "3958dc9e-712f-4377-85e9-fec4b6a6442a"
INVOICE_ID = "cc27c14a-0acf-4f4a-a6c9-d45682c144b9"


def _form(**overrides: str) -> dict[str, str]:
    form = {"customerId": CUSTOMER_ID, "amount": "12.50", "status": "pending"}
    form.update(overrides)
    return form


def test_create_invoice_stores_cents_and_todays_date() -> None:
    session = SessionStub()
    signals = SignalsStub()

    result = invoice_services.create_invoice_service(
        session,
        _form(),
        signals,
        today_fn=lambda: date(2026, 10, 18),
    )

    assert result is None
    assert len(session.calls) == 1
    assert "INSERT INTO invoices" in session.calls[0]["sql"]
    assert session.calls[0]["params"] == {
        "customer_id": CUSTOMER_ID,
        "amount": 1250,
        "status": "pending",
        "date": date(2026, 10, 18),
    }
    assert session.commits == 1
    assert signals.invalidated == ["/dashboard/invoices"]
    assert signals.navigated == ["/dashboard/invoices"]


def test_create_invoice_with_zero_amount_is_rejected() -> None:
    session = SessionStub()
    signals = SignalsStub()

    result = invoice_services.create_invoice_service(session, _form(amount="0"), signals)

    assert result is not None
    assert result.to_state() == {
        "errors": {"amount": ["Please enter an amount greater than $0."]},
        "message": "Missing Fields. Failed to Create Invoice.",
    }
    assert session.calls == []
    assert signals.invalidated == []


@pytest.mark.parametrize(
    ("amount", "message"),
    [
        ("1e27", "Please enter an amount no greater than $21,474,836.47."),
        ("0.001", "Please enter an amount with at most 2 decimal places."),
    ],
)
def test_create_invoice_with_unstorable_amount_is_rejected(amount: str, message: str) -> None:
    session = SessionStub()
    signals = SignalsStub()

    result = invoice_services.create_invoice_service(session, _form(amount=amount), signals)

    assert result is not None
    assert result.to_state() == {
        "errors": {"amount": [message]},
        "message": "Missing Fields. Failed to Create Invoice.",
    }
    assert session.calls == []
    assert signals.navigated == []


def test_create_invoice_store_failure_returns_generic_message() -> None:
    session = SessionStub(fail_on="INSERT INTO invoices")
    signals = SignalsStub()

    result = invoice_services.create_invoice_service(session, _form(), signals)

    assert result is not None
    assert result.to_state() == {"message": "Database Error: Failed to Create Invoice."}
    assert session.rollbacks == 1
    assert signals.invalidated == []
    assert signals.navigated == []


def test_update_invoice_binds_id_and_navigates() -> None:
    session = SessionStub(responses=[ResultStub(rowcount=1)])
    signals = SignalsStub()

    result = invoice_services.update_invoice_service(session, INVOICE_ID, _form(amount="99.99", status="paid"), signals)

    assert result is None
    assert "UPDATE invoices" in session.calls[0]["sql"]
    assert session.calls[0]["params"] == {
        "id": INVOICE_ID,
        "customer_id": CUSTOMER_ID,
        "amount": 9999,
        "status": "paid",
    }
    assert signals.invalidated == ["/dashboard/invoices"]
    assert signals.navigated == ["/dashboard/invoices"]


def test_update_invoice_validation_message() -> None:
    result = invoice_services.update_invoice_service(SessionStub(), INVOICE_ID, _form(status=""), SignalsStub())

    assert result is not None
    assert result.message == "Missing Fields. Failed to update Invoice."
    assert result.errors == {"status": ["Please select an invoice status."]}


def test_update_invoice_with_out_of_range_amount_is_rejected() -> None:
    session = SessionStub()

    result = invoice_services.update_invoice_service(session, INVOICE_ID, _form(amount="1e27"), SignalsStub())

    assert result is not None
    assert result.to_state() == {
        "errors": {"amount": ["Please enter an amount no greater than $21,474,836.47."]},
        "message": "Missing Fields. Failed to update Invoice.",
    }
    assert session.calls == []


def test_update_invoice_store_failure_returns_generic_message() -> None:
    session = SessionStub(fail_on="UPDATE invoices")

    result = invoice_services.update_invoice_service(session, "not-a-uuid", _form(), SignalsStub())

    assert result is not None
    assert result.to_state() == {"message": "Database Error: Failed to Update Invoice."}


def test_delete_of_missing_invoice_is_a_no_op_success() -> None:
    session = SessionStub(responses=[ResultStub(rowcount=0)])
    signals = SignalsStub()

    result = invoice_services.delete_invoice_service(session, INVOICE_ID, signals)

    assert result.to_state() == {"message": "Deleted Invoice."}
    assert session.calls[0]["params"] == {"id": INVOICE_ID}
    assert session.commits == 1
    assert signals.invalidated == ["/dashboard/invoices"]
    assert signals.navigated == []


def test_delete_store_failure_returns_generic_message() -> None:
    session = SessionStub(fail_on="DELETE FROM invoices")
    signals = SignalsStub()

    result = invoice_services.delete_invoice_service(session, "not-a-uuid", signals)

    assert result.to_state() == {"message": "Database Error: Failed to Delete Invoice."}
    assert session.rollbacks == 1
    assert signals.invalidated == []


def test_list_invoices_pages_results() -> None:
    row = {
        "id": uuid.UUID(INVOICE_ID),
        "amount": 1250,
        "date": date(2026, 10, 18),
        "status": "pending",
        "name": "Delba de Oliveira",
        "email": "delba@oliveira.com",
        "image_url": "/customers/delba-de-oliveira.png",
    }
    session = SessionStub(responses=[[row]], scalar_result=13)

    listing = invoice_services.list_invoices_service(session, query="delba", page=2, per_page=6)

    assert listing.page == 2
    assert listing.total_pages == 3
    assert listing.items[0].name == "Delba de Oliveira"
    assert listing.items[0].status is InvoiceStatusEnum.PENDING
    assert "LIMIT" in session.calls[0]["sql"]


def test_get_invoice_form_converts_cents_to_dollars() -> None:
    invoice_id = uuid.UUID(INVOICE_ID)
    invoice = SimpleNamespace(
        id=invoice_id,
        customer_id=uuid.UUID(CUSTOMER_ID),
        amount=1250,
        status=InvoiceStatusEnum.PAID,
    )
    session = SessionStub(objects={invoice_id: invoice})

    form = invoice_services.get_invoice_form_service(session, invoice_id)

    assert form.amount == 12.5
    assert form.status is InvoiceStatusEnum.PAID


def test_get_invoice_form_raises_not_found() -> None:
    with pytest.raises(NotFoundError):
        invoice_services.get_invoice_form_service(SessionStub(), uuid.uuid4())


def test_listing_search_matches_every_column_case_insensitively() -> None:
    session = SessionStub(responses=[[]], scalar_result=13)

    rows = list_filtered_invoices(session, query="delba", limit=6, offset=6)
    total = count_filtered_invoices(session, query="delba")

    assert rows == []
    assert total == 13
    for call in session.calls:
        compiled = call["statement"].compile(dialect=postgresql.dialect())
        assert str(compiled).count("ILIKE") == 5
        assert list(compiled.params.values()).count("%delba%") == 5
    listing_sql = str(session.calls[0]["statement"].compile(dialect=postgresql.dialect()))
    assert "customers.name ILIKE" in listing_sql
    assert "CAST(invoices.status AS VARCHAR) ILIKE" in listing_sql


def test_count_of_empty_result_is_zero() -> None:
    assert count_filtered_invoices(SessionStub(), query="") == 0
