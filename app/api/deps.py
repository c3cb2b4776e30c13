"""Shared request dependencies for form routes."""

from __future__ import annotations

from fastapi import Request
from fastapi.responses import JSONResponse
from fastapi.responses import RedirectResponse
from starlette.datastructures import UploadFile

from app.schemas.submission import SubmissionResult
from app.services.signals import RequestSignals


async def read_form(request: Request) -> dict[str, str]:
    """Read the submitted form body as a field -> text mapping."""
    form = await request.form()
    return {key: value for key, value in form.items() if not isinstance(value, UploadFile)}


def get_request_signals() -> RequestSignals:
    return RequestSignals()


def form_response(result: SubmissionResult | None, signals: RequestSignals):
    """Render form state, or follow the navigation signal after success."""
    if result is None and signals.redirect_to is not None:
        return RedirectResponse(signals.redirect_to, status_code=303)
    state = result.to_state() if result is not None else {}
    return JSONResponse(content=state)
