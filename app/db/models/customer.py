"""SQLAlchemy model for dashboard customers."""

from __future__ import annotations

import uuid
from typing import TYPE_CHECKING

from sqlalchemy import PrimaryKeyConstraint
from sqlalchemy import String
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.orm import DeclarativeBase
from sqlalchemy.orm import Mapped
from sqlalchemy.orm import mapped_column
from sqlalchemy.orm import relationship


class Base(DeclarativeBase):
    """Declarative base for dashboard ORM models."""


if TYPE_CHECKING:
    from app.db.models.invoice import Invoice


class Customer(Base):
    """Customer an invoice is billed to."""

    __tablename__ = "customers"
    __table_args__ = (PrimaryKeyConstraint("id", name="pk_customers"),)

    id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True),
        primary_key=True,
        default=uuid.uuid4,
    )
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    email: Mapped[str] = mapped_column(String(255), nullable=False)
    image_url: Mapped[str] = mapped_column(String(255), nullable=False)

    invoices: Mapped[list["Invoice"]] = relationship("Invoice", back_populates="customer")
