"""Registration and login form routes."""

from __future__ import annotations

from fastapi import APIRouter
from fastapi import Depends
from sqlalchemy.orm import Session

from app.api.deps import form_response
from app.api.deps import get_request_signals
from app.api.deps import read_form
from app.auth.provider import CredentialsProvider
from app.db.base import get_db_session
from app.schemas.submission import LoginState
from app.schemas.submission import SubmissionResult
from app.services.auth import authenticate_service
from app.services.signals import RequestSignals
from app.services.users import register_user_service

router = APIRouter(tags=["auth"])


@router.post("/signup", response_model=SubmissionResult, response_model_exclude_none=True)
def register_endpoint(
    form: dict[str, str] = Depends(read_form),
    session: Session = Depends(get_db_session),
    signals: RequestSignals = Depends(get_request_signals),
):
    """Register a user; redirects to the dashboard on success."""
    result = register_user_service(session, form, signals)
    return form_response(result, signals)


@router.post("/login", response_model=LoginState, response_model_exclude_none=True)
def login_endpoint(
    form: dict[str, str] = Depends(read_form),
    session: Session = Depends(get_db_session),
    signals: RequestSignals = Depends(get_request_signals),
):
    """Sign in with email and password; redirects to the dashboard on success."""
    message = authenticate_service(CredentialsProvider(session), form, signals)
    if message is not None:
        return form_response(SubmissionResult(message=message), signals)
    return form_response(None, signals)
