"""Error envelope returned for failures outside the form pipeline."""

from __future__ import annotations

from pydantic import BaseModel


class ErrorDetail(BaseModel):
    """One offending request parameter."""

    field: str
    issue: str


class ErrorObject(BaseModel):
    code: str
    message: str
    details: list[ErrorDetail] | None = None


class ErrorResponse(BaseModel):
    """Top-level ``{"error": {...}}`` envelope."""

    error: ErrorObject
