"""Apply form schemas to raw form input."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any
from typing import Union

from app.forms.schema import CoercionError
from app.forms.schema import EntitySchema
from app.forms.schema import FieldSchema


@dataclass(frozen=True)
class Valid:
    """Every field passed; ``data`` holds coerced values keyed by field name."""

    data: dict[str, Any]


@dataclass(frozen=True)
class Invalid:
    """At least one field failed; messages are kept in constraint order."""

    field_errors: dict[str, list[str]]


ValidationOutcome = Union[Valid, Invalid]


def _check_field(field: FieldSchema, raw: str) -> tuple[Any, list[str]]:
    value: Any = raw
    if field.coercion is not None:
        try:
            value = field.coercion.convert(raw)
        except CoercionError:
            return None, [field.coercion.message]

    errors = [constraint.message for constraint in field.constraints if not constraint.check(value)]
    return value, errors


def validate_form(schema: EntitySchema, raw: Mapping[str, Any]) -> ValidationOutcome:
    """Validate raw form input against ``schema``.

    Missing fields are read as empty strings. Every failing constraint of a
    field is reported, not only the first one.
    """
    data: dict[str, Any] = {}
    field_errors: dict[str, list[str]] = {}

    for field in schema.fields:
        value = raw.get(field.name)
        value, errors = _check_field(field, "" if value is None else str(value))
        if errors:
            field_errors[field.name] = errors
        else:
            data[field.name] = value

    if field_errors:
        return Invalid(field_errors=field_errors)
    return Valid(data=data)
