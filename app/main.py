"""FastAPI application entrypoint for the invoice dashboard."""

from __future__ import annotations

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
import logging

from fastapi import FastAPI

from app.api.auth import router as auth_router
from app.api.invoices import router as invoices_router
from app.core.config import get_settings
from app.core.errors import register_error_handlers
from app.core.observability import setup_logging
from app.db import models as _models  # noqa: F401

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(_: FastAPI) -> AsyncIterator[None]:
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    logger.info("Starting dashboard with settings=%s", settings.safe_for_logging())
    yield


app = FastAPI(title="Invoice Dashboard", lifespan=lifespan)
register_error_handlers(app)
app.include_router(auth_router)
app.include_router(invoices_router)


@app.get("/health")
def health() -> dict[str, str]:
    """Health check stub endpoint for service readiness."""
    return {"status": "ok"}
