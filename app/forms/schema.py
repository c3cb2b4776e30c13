"""Declarative field schemas for dashboard forms.

Each form is described as a rule table: an ordered tuple of ``FieldSchema``
entries, each carrying its kind, an optional coercion step and the ordered
constraints evaluated against the (coerced) value. Schemas are immutable and
looked up by ``(entity, operation)`` through ``get_schema``.
"""

from __future__ import annotations

from collections.abc import Callable
from collections.abc import Mapping
from dataclasses import dataclass
from dataclasses import field
from decimal import Decimal
from decimal import InvalidOperation
from enum import Enum
from types import MappingProxyType
from typing import Any
import re

from email_validator import EmailNotValidError
from email_validator import validate_email

from app.db.models.invoice import InvoiceStatusEnum


class FieldKind(str, Enum):
    STRING = "string"
    NUMBER = "number"
    ENUM = "enum"
    EMAIL = "email"


class CoercionError(ValueError):
    """Raised by a coercion rule when raw text cannot become the declared type."""


@dataclass(frozen=True)
class Constraint:
    """Predicate over a coerced value and the message reported when it fails."""

    check: Callable[[Any], bool]
    message: str


@dataclass(frozen=True)
class Coercion:
    """Conversion from raw form text; ``message`` is reported on failure."""

    convert: Callable[[str], Any]
    message: str


@dataclass(frozen=True)
class FieldSchema:
    name: str
    kind: FieldKind
    constraints: tuple[Constraint, ...] = ()
    coercion: Coercion | None = None


@dataclass(frozen=True)
class EntitySchema:
    """Ordered, name-unique collection of field schemas."""

    entity: str
    operation: str
    fields: tuple[FieldSchema, ...]
    by_name: Mapping[str, FieldSchema] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        names = [item.name for item in self.fields]
        if len(set(names)) != len(names):
            raise ValueError(f"duplicate field names in {self.entity}/{self.operation} schema")
        object.__setattr__(self, "by_name", MappingProxyType({item.name: item for item in self.fields}))

    @property
    def field_names(self) -> tuple[str, ...]:
        return tuple(item.name for item in self.fields)


# Constraint builders


def min_length(size: int, message: str) -> Constraint:
    return Constraint(check=lambda value: len(value) >= size, message=message)


def matches(pattern: str, message: str) -> Constraint:
    compiled = re.compile(pattern)
    return Constraint(check=lambda value: compiled.fullmatch(value) is not None, message=message)


def one_of(choices: tuple[str, ...], message: str) -> Constraint:
    return Constraint(check=lambda value: value in choices, message=message)


def greater_than(bound: Decimal, message: str) -> Constraint:
    return Constraint(check=lambda value: value > bound, message=message)


def at_most(bound: Decimal, message: str) -> Constraint:
    return Constraint(check=lambda value: value <= bound, message=message)


def _decimal_places(value: Decimal) -> int:
    # Exact count; trailing zeros after the point do not count.
    _, digits, exponent = value.as_tuple()
    trailing_zeros = len(digits) - len("".join(map(str, digits)).rstrip("0"))
    return max(0, -exponent - trailing_zeros)


def max_decimal_places(places: int, message: str) -> Constraint:
    return Constraint(check=lambda value: _decimal_places(value) <= places, message=message)


def is_valid_email(value: str) -> bool:
    """Syntax-only email check; deliverability is not checked."""
    try:
        validate_email(value, check_deliverability=False)
    except EmailNotValidError:
        return False
    return True


def is_email(message: str) -> Constraint:
    return Constraint(check=is_valid_email, message=message)


def to_decimal(raw: str) -> Decimal:
    """Coerce form text to a finite ``Decimal``; blank text reads as zero."""
    text = raw.strip()
    if not text:
        return Decimal(0)
    try:
        value = Decimal(text)
    except InvalidOperation as exc:
        raise CoercionError(f"not a number: {raw!r}") from exc
    if not value.is_finite():
        raise CoercionError(f"not a finite number: {raw!r}")
    return value


# Invoice forms

INVOICE_STATUSES = tuple(member.value for member in InvoiceStatusEnum)

# Largest dollar amount whose cents fit the int4 `invoices.amount` column.
MAX_INVOICE_AMOUNT = Decimal("21474836.47")

_INVOICE_FIELDS = (
    FieldSchema(
        name="customerId",
        kind=FieldKind.STRING,
        constraints=(min_length(1, "Please select a customer."),),
    ),
    FieldSchema(
        name="amount",
        kind=FieldKind.NUMBER,
        coercion=Coercion(convert=to_decimal, message="Please enter a valid amount."),
        constraints=(
            greater_than(Decimal(0), "Please enter an amount greater than $0."),
            at_most(MAX_INVOICE_AMOUNT, "Please enter an amount no greater than $21,474,836.47."),
            max_decimal_places(2, "Please enter an amount with at most 2 decimal places."),
        ),
    ),
    FieldSchema(
        name="status",
        kind=FieldKind.ENUM,
        constraints=(one_of(INVOICE_STATUSES, "Please select an invoice status."),),
    ),
)

CREATE_INVOICE = EntitySchema(entity="invoice", operation="create", fields=_INVOICE_FIELDS)
UPDATE_INVOICE = EntitySchema(entity="invoice", operation="update", fields=_INVOICE_FIELDS)

# User forms

PASSWORD_MIN_LENGTH = 6
_PASSWORD_TOO_SHORT = "Le mot de passe doit comporter au moins 6 caractères."

CREATE_USER = EntitySchema(
    entity="user",
    operation="create",
    fields=(
        FieldSchema(
            name="name",
            kind=FieldKind.STRING,
            constraints=(
                min_length(1, "Le nom est requis."),
                min_length(3, "Le nom doit comporter au moins 3 caractères."),
                matches(r"[A-Za-z]+", "Le nom ne doit contenir que des lettres."),
            ),
        ),
        FieldSchema(
            name="email",
            kind=FieldKind.EMAIL,
            constraints=(is_email("L'e-mail doit être valide."),),
        ),
        FieldSchema(
            name="password",
            kind=FieldKind.STRING,
            constraints=(min_length(PASSWORD_MIN_LENGTH, _PASSWORD_TOO_SHORT),),
        ),
        FieldSchema(
            name="confirmPassword",
            kind=FieldKind.STRING,
            constraints=(min_length(PASSWORD_MIN_LENGTH, _PASSWORD_TOO_SHORT),),
        ),
    ),
)

_REGISTRY: Mapping[tuple[str, str], EntitySchema] = MappingProxyType(
    {
        (schema.entity, schema.operation): schema
        for schema in (CREATE_INVOICE, UPDATE_INVOICE, CREATE_USER)
    }
)


def get_schema(entity: str, operation: str) -> EntitySchema:
    """Return the registered schema for an entity/operation pair."""
    try:
        return _REGISTRY[(entity, operation)]
    except KeyError:
        raise KeyError(f"no form schema registered for {entity}/{operation}") from None
