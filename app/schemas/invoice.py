"""Pydantic schemas for invoice and customer read payloads."""

from __future__ import annotations

import datetime
from uuid import UUID

from pydantic import BaseModel
from pydantic import ConfigDict

from app.db.models.invoice import InvoiceStatusEnum


class Customer(BaseModel):
    """Customer option for the invoice form select."""

    model_config = ConfigDict(from_attributes=True)

    id: UUID
    name: str


class InvoiceListItem(BaseModel):
    """Row of the invoices listing, joined with its customer."""

    id: UUID
    amount: int
    date: datetime.date
    status: InvoiceStatusEnum
    name: str
    email: str
    image_url: str


class InvoiceListResponse(BaseModel):
    items: list[InvoiceListItem]
    page: int
    total_pages: int


class InvoiceForm(BaseModel):
    """Invoice values used to prefill the edit form; ``amount`` is in dollars."""

    id: UUID
    customer_id: UUID
    amount: float
    status: InvoiceStatusEnum


class CustomerListResponse(BaseModel):
    items: list[Customer]
