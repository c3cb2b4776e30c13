"""SQLAlchemy model for dashboard invoices."""

from __future__ import annotations

import uuid
import datetime
from enum import Enum
from typing import TYPE_CHECKING

from sqlalchemy import CheckConstraint
from sqlalchemy import Date
from sqlalchemy import ForeignKey
from sqlalchemy import Integer
from sqlalchemy import PrimaryKeyConstraint
from sqlalchemy.dialects import postgresql
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.orm import Mapped
from sqlalchemy.orm import mapped_column
from sqlalchemy.orm import relationship

from app.db.models.customer import Base


class InvoiceStatusEnum(str, Enum):
    PENDING = "pending"
    PAID = "paid"


if TYPE_CHECKING:
    from app.db.models.customer import Customer


class Invoice(Base):
    """Invoice billed to a customer; amount is stored in cents."""

    __tablename__ = "invoices"
    __table_args__ = (
        PrimaryKeyConstraint("id", name="pk_invoices"),
        CheckConstraint("amount >= 0", name="ck_invoices_amount_non_negative"),
    )

    id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True),
        primary_key=True,
        default=uuid.uuid4,
    )
    customer_id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True),
        ForeignKey("customers.id", name="fk_invoices_customer_id_customers", ondelete="RESTRICT"),
        nullable=False,
    )
    amount: Mapped[int] = mapped_column(Integer, nullable=False)
    status: Mapped[InvoiceStatusEnum] = mapped_column(
        postgresql.ENUM(
            InvoiceStatusEnum,
            name="invoice_status",
            create_type=False,
            values_callable=lambda members: [member.value for member in members],
        ),
        nullable=False,
    )
    date: Mapped[datetime.date] = mapped_column(Date, nullable=False)

    customer: Mapped["Customer"] = relationship("Customer", back_populates="invoices")
