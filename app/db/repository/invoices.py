"""Repository statements and queries for invoices."""

from __future__ import annotations

from datetime import date
from typing import Any
from uuid import UUID

from sqlalchemy import String
from sqlalchemy import cast
from sqlalchemy import func
from sqlalchemy import or_
from sqlalchemy import select
from sqlalchemy import text
from sqlalchemy.orm import Session

from app.db.models.customer import Customer
from app.db.models.invoice import Invoice

_INSERT_INVOICE_SQL = text(
    """
    INSERT INTO invoices (customer_id, amount, status, date)
    VALUES (CAST(:customer_id AS uuid), :amount, CAST(:status AS invoice_status), :date)
    """
)

_UPDATE_INVOICE_SQL = text(
    """
    UPDATE invoices
    SET customer_id = CAST(:customer_id AS uuid),
        amount = :amount,
        status = CAST(:status AS invoice_status)
    WHERE id = CAST(:id AS uuid)
    """
)

_DELETE_INVOICE_SQL = text(
    """
    DELETE FROM invoices
    WHERE id = CAST(:id AS uuid)
    """
)


def insert_invoice(
    session: Session,
    *,
    customer_id: str,
    amount_cents: int,
    status: str,
    invoice_date: date,
) -> None:
    """Insert one invoice row."""
    session.execute(
        _INSERT_INVOICE_SQL,
        {
            "customer_id": customer_id,
            "amount": amount_cents,
            "status": status,
            "date": invoice_date,
        },
    )


def update_invoice(
    session: Session,
    *,
    invoice_id: str,
    customer_id: str,
    amount_cents: int,
    status: str,
) -> int:
    """Update one invoice and return the affected row count."""
    result = session.execute(
        _UPDATE_INVOICE_SQL,
        {
            "id": invoice_id,
            "customer_id": customer_id,
            "amount": amount_cents,
            "status": status,
        },
    )
    return result.rowcount


def delete_invoice(session: Session, *, invoice_id: str) -> int:
    """Delete one invoice and return the affected row count."""
    result = session.execute(_DELETE_INVOICE_SQL, {"id": invoice_id})
    return result.rowcount


def _search_clause(query: str):
    pattern = f"%{query}%"
    return or_(
        Customer.name.ilike(pattern),
        Customer.email.ilike(pattern),
        cast(Invoice.amount, String).ilike(pattern),
        cast(Invoice.date, String).ilike(pattern),
        cast(Invoice.status, String).ilike(pattern),
    )


def list_filtered_invoices(
    session: Session,
    *,
    query: str = "",
    limit: int = 6,
    offset: int = 0,
) -> list[dict[str, Any]]:
    """List invoices joined with their customer, newest first."""
    stmt = (
        select(
            Invoice.id,
            Invoice.amount,
            Invoice.date,
            Invoice.status,
            Customer.name,
            Customer.email,
            Customer.image_url,
        )
        .join(Customer, Invoice.customer_id == Customer.id)
        .where(_search_clause(query))
        .order_by(Invoice.date.desc(), Invoice.id)
        .limit(limit)
        .offset(offset)
    )
    return [dict(row._mapping) for row in session.execute(stmt)]


def count_filtered_invoices(session: Session, *, query: str = "") -> int:
    """Count invoices matching the listing search."""
    stmt = (
        select(func.count())
        .select_from(Invoice)
        .join(Customer, Invoice.customer_id == Customer.id)
        .where(_search_clause(query))
    )
    return int(session.scalar(stmt) or 0)


def get_invoice(session: Session, invoice_id: UUID) -> Invoice | None:
    """Fetch an invoice by id."""
    return session.get(Invoice, invoice_id)
