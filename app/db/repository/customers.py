"""Repository primitives for customer entities."""

from __future__ import annotations

from sqlalchemy import select
from sqlalchemy.orm import Session

from app.db.models.customer import Customer


def list_customers(session: Session) -> list[Customer]:
    """List customers ordered by name for form selects."""
    stmt = select(Customer).order_by(Customer.name.asc())
    return list(session.scalars(stmt))
